"""
SQLAlchemy models for FlavorFare.
"""
from flavorfare.models.restaurant import Restaurant


__all__ = [
    "Restaurant",
]
