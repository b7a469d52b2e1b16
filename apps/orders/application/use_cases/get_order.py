"""
Order query use cases.
"""
from dataclasses import dataclass
from typing import Any, List, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO


@dataclass
class GetOrderQuery:
    order_id: UUID
    user_id: Optional[Any]


@dataclass
class GetOrderUseCase(UseCase[GetOrderQuery, OrderDTO]):
    """Fetch one of the user's orders for the confirmation page."""

    order_repository: OrderRepository

    def execute(self, input_dto: GetOrderQuery) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_by_id(input_dto.order_id)
        # someone else's order looks the same as a missing one
        if order is None or order.user_id != input_dto.user_id:
            raise OrderNotFoundError(str(input_dto.order_id))
        return UseCaseResult.ok(OrderDTO.from_entity(order))


@dataclass
class ListOrdersUseCase(UseCase[Optional[Any], List[OrderDTO]]):
    """List the user's orders, newest first."""

    order_repository: OrderRepository

    def execute(self, input_dto: Optional[Any]) -> UseCaseResult[List[OrderDTO]]:
        if input_dto is None:
            return UseCaseResult.ok([])
        orders = self.order_repository.find_by_user_id(input_dto)
        return UseCaseResult.ok([OrderDTO.from_entity(order) for order in orders])
