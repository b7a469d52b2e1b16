# Django discovers models from this module.
from .infrastructure.models import ReviewModel  # noqa: F401
