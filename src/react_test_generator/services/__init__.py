"""Services package for react test generator."""

from .base_service import BaseService
from .scaffold_service import ScaffoldService

__all__ = [
    'BaseService',
    'ScaffoldService',
]
