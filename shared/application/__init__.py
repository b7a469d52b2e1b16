# Shared application module
from .base_use_case import UseCase, UseCaseResult

__all__ = ['UseCase', 'UseCaseResult']
