# boutique/modules/users/__init__.py
"""
Users module - API users and their roles (admin only)
"""

from .router import router
from .service import UserService
from .repository import UserRepository

__all__ = [
    "router",
    "UserService",
    "UserRepository"
]
