# boutique/modules/categories/__init__.py
"""
Categories module - product category catalog

Architecture:
- router.py: category endpoints (mutations restricted to admin)
- service.py: category business rules
- repository.py: category data access
- schemas.py: request/response models
"""

from .router import router
from .service import CategoryService
from .repository import CategoryRepository

__all__ = [
    "router",
    "CategoryService",
    "CategoryRepository"
]
