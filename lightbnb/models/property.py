"""
Property model for rental listings.
Prices are stored in integer cents; the average review rating is computed at query time.
"""

from sqlalchemy import String, Text, Integer, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, query_expression
from lightbnb.database import Base
from typing import Optional


# Insertable columns in the order they are written by an insert.
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class Property(Base):
    """
    A listing offered by an owner.
    Text fields are nullable so a listing can be created from any subset of fields.
    """

    __tablename__ = "properties"

    owner_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Listing details
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    thumbnail_photo_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cover_photo_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        server_default="0",
        comment="Nightly price in cents"
    )

    # Address
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    province: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    post_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Specifications
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")

    # Only populated by queries that select it, see PropertyRepository.get_all_properties
    average_rating: Mapped[Optional[float]] = query_expression()

    __table_args__ = (
        Index("idx_property_city_cost", "city", "cost_per_night"),
    )

    def __repr__(self) -> str:
        """String representation of the property."""
        title = (self.title or "")[:30]
        return f"<Property(id={self.id}, title={title}, cost_per_night={self.cost_per_night})>"

    @property
    def price_per_night(self) -> float:
        """Nightly price in whole currency units."""
        return self.cost_per_night / 100
