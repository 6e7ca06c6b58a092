"""
Pydantic schemas for typed repository input.
"""

from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertyCreate, PropertySearchFilters

__all__ = [
    "UserCreate",
    "PropertyCreate",
    "PropertySearchFilters",
]
