"""
Orders API v1 views.
"""
import logging
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.products.infrastructure.repositories import StaticProductRepository
from shared.domain import PersistenceError
from shared.interfaces import StandardPagination, get_notifier, with_notifications
from ....application.dtos import (
    AddToCartDTO,
    CartItemKeyDTO,
    PlaceOrderDTO,
    UpdateCartItemDTO,
)
from ....application.use_cases import (
    AddToCartUseCase,
    ClearCartUseCase,
    GetCartUseCase,
    GetCheckoutQuoteUseCase,
    GetOrderQuery,
    GetOrderUseCase,
    ListOrdersUseCase,
    PlaceOrderUseCase,
    RemoveCartItemUseCase,
    SetCartVisibilityUseCase,
    UpdateCartItemUseCase,
)
from ....infrastructure.repositories import DjangoOrderRepository, SessionCartRepository
from ...serializers import (
    CartItemCreateSerializer,
    CartItemKeySerializer,
    CartItemUpdateSerializer,
    CartSerializer,
    CartVisibilitySerializer,
    OrderCreateSerializer,
    OrderSerializer,
    OrderTotalsSerializer,
)

logger = logging.getLogger(__name__)

product_repository = StaticProductRepository()


def _user_id(request):
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return user.id
    return None


def _cart_response(request, result, status_code=status.HTTP_200_OK) -> Response:
    payload = dict(CartSerializer(result.data).data)
    payload['events'] = [
        {'type': event.event_type, 'action': getattr(event, 'action', None)}
        for event in result.events
    ]
    return Response(with_notifications(request, payload), status=status_code)


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get the session cart",
    )
    def get(self, request):
        use_case = GetCartUseCase(cart_repository=SessionCartRepository(request.session))
        return _cart_response(request, use_case.execute())

    @extend_schema(responses={200: CartSerializer}, summary="Clear cart")
    def delete(self, request):
        use_case = ClearCartUseCase(cart_repository=SessionCartRepository(request.session))
        return _cart_response(request, use_case.execute())


@extend_schema(tags=['Cart'])
class CartItemView(APIView):
    """Cart line endpoint. Lines are addressed by product, size and color."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={201: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = AddToCartUseCase(
            product_repository=product_repository,
            cart_repository=SessionCartRepository(request.session),
            notifier=get_notifier(request),
        )
        result = use_case.execute(AddToCartDTO(**serializer.validated_data))
        return _cart_response(request, result, status.HTTP_201_CREATED)

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartSerializer},
        summary="Set cart item quantity",
    )
    def patch(self, request):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateCartItemUseCase(cart_repository=SessionCartRepository(request.session))
        result = use_case.execute(UpdateCartItemDTO(**serializer.validated_data))
        return _cart_response(request, result)

    @extend_schema(
        request=CartItemKeySerializer,
        responses={200: CartSerializer},
        summary="Remove item from cart",
    )
    def delete(self, request):
        serializer = CartItemKeySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RemoveCartItemUseCase(
            cart_repository=SessionCartRepository(request.session),
            notifier=get_notifier(request),
        )
        result = use_case.execute(CartItemKeyDTO(**serializer.validated_data))
        return _cart_response(request, result)


@extend_schema(tags=['Cart'])
class CartVisibilityView(APIView):
    """Cart drawer open/closed state."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CartVisibilitySerializer,
        responses={200: CartSerializer},
        summary="Open or close the cart drawer",
    )
    def put(self, request):
        serializer = CartVisibilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = SetCartVisibilityUseCase(cart_repository=SessionCartRepository(request.session))
        return _cart_response(request, use_case.execute(serializer.validated_data['is_open']))


@extend_schema(tags=['Checkout'])
class CheckoutQuoteView(APIView):
    """Totals preview for the current cart."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: OrderTotalsSerializer},
        summary="Quote subtotal, shipping, tax and total",
    )
    def get(self, request):
        use_case = GetCheckoutQuoteUseCase(cart_repository=SessionCartRepository(request.session))
        return Response(OrderTotalsSerializer(use_case.execute().data).data)


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint."""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [IsAuthenticated()]
        # sign-in is checked by the use case so the shopper gets a notification
        return [AllowAny()]

    @extend_schema(
        responses={200: OrderSerializer(many=True)},
        summary="List user's orders",
    )
    def get(self, request):
        use_case = ListOrdersUseCase(order_repository=DjangoOrderRepository())
        orders = use_case.execute(_user_id(request)).data

        paginator = StandardPagination()
        page = paginator.paginate_queryset(orders, request, view=self)
        return paginator.get_paginated_response(OrderSerializer(page, many=True).data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Create order from cart",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        use_case = PlaceOrderUseCase(
            order_repository=DjangoOrderRepository(),
            cart_repository=SessionCartRepository(request.session),
            notifier=get_notifier(request),
        )
        try:
            result = use_case.execute(
                PlaceOrderDTO(
                    user_id=_user_id(request),
                    shipping_address=dict(data['shipping_address']),
                    payment_method=data['payment_method'],
                )
            )
        except PersistenceError as e:
            logger.error(f"Error creating order: {e.message}", exc_info=True)
            return Response(
                with_notifications(request, {'error': e.message, 'code': e.code}),
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        payload = dict(OrderSerializer(result.data).data)
        return Response(with_notifications(request, payload), status=status.HTTP_201_CREATED)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint, backs the confirmation page."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        use_case = GetOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(GetOrderQuery(order_id=order_id, user_id=_user_id(request)))
        return Response(OrderSerializer(result.data).data)
