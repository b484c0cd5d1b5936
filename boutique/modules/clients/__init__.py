# boutique/modules/clients/__init__.py
"""
Clients module - boutique clients

Sales and phones reference clients; the sales and phones services
look clients up through ClientService.
"""

from .router import router
from .service import ClientService
from .repository import ClientRepository

__all__ = [
    "router",
    "ClientService",
    "ClientRepository"
]
