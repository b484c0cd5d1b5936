# boutique/modules/sales/__init__.py
"""
Sales module - sell lifecycle

Handles the full lifecycle of a sale:
- Registration bound to an existing client
- Replacement of client and date with the date rule enforced
- Removal
- Queries by client, by exact date and by inclusive date range

Architecture:
- router.py: sale endpoints
- service.py: sale business rules (client reference, date rule)
- repository.py: sale data access and derived finders
- schemas.py: request/response models
"""

from .router import router
from .service import SellService
from .repository import SellRepository

__all__ = [
    "router",
    "SellService",
    "SellRepository"
]
