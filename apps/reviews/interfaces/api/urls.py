"""
Reviews API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.reviews.interfaces.api.v1.urls')),
]
