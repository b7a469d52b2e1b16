# Django discovers models from this module.
from .infrastructure.models import WishlistItemModel  # noqa: F401
