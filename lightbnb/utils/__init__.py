"""
Utility modules for the LightBnB data-access layer.
"""

from .exceptions import (
    DataAccessError,
    ValidationError,
)

__all__ = [
    "DataAccessError",
    "ValidationError",
]
