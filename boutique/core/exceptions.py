"""
Domain exceptions raised by the services.

Services raise them and never catch them; the HTTP layer translates them
into responses (see boutique/api/error_handlers.py).
"""
from typing import Optional


class BoutiqueException(Exception):
    """Base exception for every domain error."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class NotFoundError(BoutiqueException):
    """The requested entity or result set does not exist."""
    pass


class IntegrityViolationError(BoutiqueException):
    """Input breaks a business rule and was not persisted."""
    pass
