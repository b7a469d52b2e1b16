"""
Wishlist API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.wishlist.interfaces.api.v1.urls')),
]
