# boutique/modules/phones/__init__.py
"""
Phones module - client phone numbers
"""

from .router import router
from .service import PhoneService
from .repository import PhoneRepository

__all__ = [
    "router",
    "PhoneService",
    "PhoneRepository"
]
