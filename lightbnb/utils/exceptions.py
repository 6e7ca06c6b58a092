"""
Exception classes raised by the data-access layer itself.
Store errors (constraint violations, connectivity) are SQLAlchemy's own and are not wrapped.
"""

from typing import Dict, List, Optional


class DataAccessError(Exception):
    """Base class for errors raised before a statement reaches the store."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class ValidationError(DataAccessError, ValueError):
    """Input that cannot be turned into a valid statement."""

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None
    ):
        super().__init__(detail, error_code="VALIDATION_ERROR")
        self.field_errors = field_errors or []
