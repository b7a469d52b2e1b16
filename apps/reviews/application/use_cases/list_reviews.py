"""
List product reviews use case.
"""
from dataclasses import dataclass

from apps.products.domain.exceptions import ProductNotFoundError
from apps.products.domain.repositories.product_repository import ProductRepository
from shared.application import UseCase, UseCaseResult
from ...domain.repositories.review_repository import ReviewRepository
from ..dtos.review_dto import ProductReviewsDTO


@dataclass
class ListProductReviewsUseCase(UseCase[str, ProductReviewsDTO]):
    """Reviews of one product, newest first, with the average rating."""

    review_repository: ReviewRepository
    product_repository: ProductRepository

    def execute(self, input_dto: str) -> UseCaseResult[ProductReviewsDTO]:
        if self.product_repository.find_by_id(input_dto) is None:
            raise ProductNotFoundError(input_dto)
        reviews = self.review_repository.find_by_product_id(input_dto)
        return UseCaseResult.ok(ProductReviewsDTO.from_reviews(input_dto, reviews))
