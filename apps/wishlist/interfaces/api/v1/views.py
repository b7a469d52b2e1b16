"""
Wishlist API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.products.infrastructure.repositories import StaticProductRepository
from shared.interfaces import get_notifier, with_notifications
from ....application.services import WishlistService
from ....infrastructure.repositories import DjangoWishlistRepository
from ...serializers import WishlistItemSerializer, WishlistSerializer

product_repository = StaticProductRepository()


def _payload(service: WishlistService) -> dict:
    return dict(WishlistSerializer({
        'product_ids': service.product_ids,
        'count': len(service.wishlist),
    }).data)


@extend_schema(tags=['Wishlist'])
class WishlistView(APIView):
    """Wishlist endpoint."""
    # sign-in is checked by the service so the shopper gets a notification
    permission_classes = [AllowAny]

    def _service(self, request) -> WishlistService:
        user = request.user
        service = WishlistService(
            repository=DjangoWishlistRepository(),
            notifier=get_notifier(request),
            user_id=user.id if user.is_authenticated else None,
            product_repository=product_repository,
        )
        service.load()
        return service

    @extend_schema(responses={200: WishlistSerializer}, summary="Get wishlist")
    def get(self, request):
        return Response(_payload(self._service(request)))

    @extend_schema(
        request=WishlistItemSerializer,
        responses={201: WishlistSerializer},
        summary="Add product to wishlist",
    )
    def post(self, request):
        serializer = WishlistItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = self._service(request)
        service.add(serializer.validated_data['product_id'])
        return Response(
            with_notifications(request, _payload(service)),
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        request=WishlistItemSerializer,
        responses={200: WishlistSerializer},
        summary="Remove product from wishlist",
    )
    def delete(self, request):
        serializer = WishlistItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = self._service(request)
        service.remove(serializer.validated_data['product_id'])
        return Response(with_notifications(request, _payload(service)))
