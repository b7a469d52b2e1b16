# Django discovers models from this module.
from .infrastructure.models import OrderModel, OrderItemModel  # noqa: F401
