"""
Health check views.
"""
import logging

from django.core.cache import cache
from django.db import connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.products.infrastructure.repositories import StaticProductRepository

logger = logging.getLogger(__name__)

PROBE_KEY = 'health:probe'


class HealthCheckView(APIView):
    """Process is up and serving requests."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """
    Readiness probe.

    Orders and wishlists need the database, the checkout lock needs the
    cache and every cart operation needs the catalog.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        checks = {
            'database': self._check_database(),
            'cache': self._check_cache(),
            'catalog': self._check_catalog(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        if not all_healthy:
            failed = [name for name, check in checks.items() if not check['healthy']]
            logger.warning(f"Readiness check failed: {', '.join(failed)}")

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except Exception as e:
            return {'healthy': False, 'error': str(e)}

    def _check_cache(self):
        # same add/delete round trip the checkout lock relies on
        try:
            cache.delete(PROBE_KEY)
            added = cache.add(PROBE_KEY, 'ok', 10)
            cache.delete(PROBE_KEY)
            return {'healthy': bool(added)}
        except Exception as e:
            return {'healthy': False, 'error': str(e)}

    def _check_catalog(self):
        count = len(StaticProductRepository().find_all())
        return {'healthy': count > 0, 'products': count}
