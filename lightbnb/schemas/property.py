"""
Pydantic schemas for property input and search filters.
Every field is optional; a field counts as present when it is not None.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional

from lightbnb.models.property import PROPERTY_COLUMNS


def _blank_to_none(value: Any) -> Any:
    """Treat blank strings (empty form fields) as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class PropertyCreate(BaseModel):
    """Fields accepted when adding a property, in insert column order."""

    owner_id: Optional[int] = Field(None, description="ID of the owning user")
    title: Optional[str] = Field(None, description="Property listing title")
    description: Optional[str] = Field(None, description="Detailed property description")
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: Optional[int] = Field(None, description="Nightly price in cents")
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_strings_are_absent(cls, v):
        return _blank_to_none(v)

    def present_fields(self) -> Dict[str, Any]:
        """
        Column values for the fields that were supplied.

        Returns:
            Dict keyed by column name, ordered like PROPERTY_COLUMNS
        """
        values = self.model_dump()
        return {
            column: values[column]
            for column in PROPERTY_COLUMNS
            if values[column] is not None
        }


class PropertySearchFilters(BaseModel):
    """
    Optional criteria for property search, combined with AND.

    Prices are given in whole currency units and compared against the stored
    cost in cents.
    """

    city: Optional[str] = Field(None, description="Substring of the city name")
    owner_id: Optional[int] = Field(None, description="Only this owner's properties")
    minimum_price_per_night: Optional[int] = Field(None, description="Exclusive lower bound, whole units")
    maximum_price_per_night: Optional[int] = Field(None, description="Exclusive upper bound, whole units")
    minimum_rating: Optional[float] = Field(None, description="Inclusive lower bound on the average rating")
    limit: Optional[int] = Field(None, description="Maximum number of results")

    @field_validator("*", mode="before")
    @classmethod
    def blank_strings_are_absent(cls, v):
        return _blank_to_none(v)
