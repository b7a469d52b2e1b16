"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from shared.interfaces.health_views import HealthCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),

    # Health
    path('api/v1/health/', HealthCheckView.as_view(), name='health'),
    path('api/v1/health/ready/', ReadinessCheckView.as_view(), name='health-ready'),

    # Auth
    path('api/v1/auth/token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('api/v1/auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # Apps
    path('api/v1/products/', include('apps.products.interfaces.api.urls')),
    path('api/v1/wishlist/', include('apps.wishlist.interfaces.api.urls')),
    path('api/v1/', include('apps.orders.interfaces.api.urls')),
    path('api/v1/', include('apps.reviews.interfaces.api.urls')),

    # Schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]
