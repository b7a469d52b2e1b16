"""
Reviews API v1 views.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.orders.infrastructure.repositories import DjangoOrderRepository
from apps.products.infrastructure.repositories import StaticProductRepository
from shared.interfaces import get_notifier, with_notifications
from ....application.dtos import DeleteReviewDTO, SubmitReviewDTO
from ....application.use_cases import (
    DeleteReviewUseCase,
    ListProductReviewsUseCase,
    SubmitReviewUseCase,
)
from ....infrastructure.repositories import DjangoReviewRepository
from ...serializers import ProductReviewsSerializer, ReviewSerializer, SubmitReviewSerializer

product_repository = StaticProductRepository()


def _user_id(request):
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return user.id
    return None


@extend_schema(tags=['Reviews'])
class ProductReviewsView(APIView):
    """Product reviews endpoint."""
    # sign-in is checked by the use case so the shopper gets a notification
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: ProductReviewsSerializer},
        summary="List product reviews",
    )
    def get(self, request, product_id: str):
        use_case = ListProductReviewsUseCase(
            review_repository=DjangoReviewRepository(),
            product_repository=product_repository,
        )
        result = use_case.execute(product_id)
        return Response(ProductReviewsSerializer(result.data).data)

    @extend_schema(
        request=SubmitReviewSerializer,
        responses={201: ReviewSerializer},
        summary="Submit a review",
    )
    def post(self, request, product_id: str):
        serializer = SubmitReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = SubmitReviewUseCase(
            review_repository=DjangoReviewRepository(),
            product_repository=product_repository,
            notifier=get_notifier(request),
            order_repository=DjangoOrderRepository(),
        )
        result = use_case.execute(SubmitReviewDTO(
            product_id=product_id,
            user_id=_user_id(request),
            **serializer.validated_data,
        ))
        return Response(
            with_notifications(request, dict(ReviewSerializer(result.data).data)),
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Reviews'])
class ReviewDetailView(APIView):
    """Single review endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(responses={200: None}, summary="Delete own review")
    def delete(self, request, review_id: UUID):
        use_case = DeleteReviewUseCase(
            review_repository=DjangoReviewRepository(),
            notifier=get_notifier(request),
        )
        use_case.execute(DeleteReviewDTO(review_id=review_id, user_id=_user_id(request)))
        return Response(with_notifications(request, {'id': str(review_id)}))
