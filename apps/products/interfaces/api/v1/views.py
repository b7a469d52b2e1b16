"""
Products API v1 views.
"""
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.product_dto import ProductDTO
from ....domain.exceptions import ProductNotFoundError
from ....infrastructure.repositories import StaticProductRepository
from ...serializers.product_serializer import ProductSerializer

product_repository = StaticProductRepository()


@extend_schema(tags=['Products'])
class ProductListView(APIView):
    """Product list endpoint."""
    permission_classes = [AllowAny]
    repository = product_repository

    @extend_schema(
        parameters=[
            OpenApiParameter(name='category', type=str, required=False,
                             description='all, men, women, trending or sale'),
            OpenApiParameter(name='collection', type=str, required=False,
                             description='new or best_sellers'),
        ],
        responses={200: ProductSerializer(many=True)},
        summary="List products",
    )
    def get(self, request):
        collection = request.query_params.get('collection')
        if collection == 'new':
            products = self.repository.find_new_arrivals()
        elif collection == 'best_sellers':
            products = self.repository.find_best_sellers()
        else:
            products = self.repository.find_all(request.query_params.get('category', 'all'))

        dtos = [ProductDTO.from_entity(p) for p in products]
        return Response(ProductSerializer(dtos, many=True).data)


@extend_schema(tags=['Products'])
class ProductDetailView(APIView):
    """Product detail endpoint."""
    permission_classes = [AllowAny]
    repository = product_repository

    @extend_schema(
        responses={200: ProductSerializer},
        summary="Get product detail",
    )
    def get(self, request, product_id: str):
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return Response(ProductSerializer(ProductDTO.from_entity(product)).data)
