"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    CartView,
    CartItemView,
    CartVisibilityView,
    CheckoutQuoteView,
    OrderListCreateView,
    OrderDetailView,
)

urlpatterns = [
    # Cart
    path('cart/', CartView.as_view(), name='cart'),
    path('cart/items/', CartItemView.as_view(), name='cart-items'),
    path('cart/visibility/', CartVisibilityView.as_view(), name='cart-visibility'),

    # Checkout
    path('checkout/quote/', CheckoutQuoteView.as_view(), name='checkout-quote'),

    # Orders
    path('orders/', OrderListCreateView.as_view(), name='order-list-create'),
    path('orders/<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
]
