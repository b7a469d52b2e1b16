"""
Reviews API v1 URLs.
"""
from django.urls import path

from .views import ProductReviewsView, ReviewDetailView

urlpatterns = [
    path('products/<str:product_id>/reviews/', ProductReviewsView.as_view(), name='product-reviews'),
    path('reviews/<uuid:review_id>/', ReviewDetailView.as_view(), name='review-detail'),
]
