"""Boutique API - backend for categories, clients, phones, sales and users."""

__version__ = "1.0.0"
