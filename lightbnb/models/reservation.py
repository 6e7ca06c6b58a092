"""
Reservation model linking a guest to a property for a date range.
Read-only from the point of view of the data-access layer.
"""

from datetime import date
from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class Reservation(Base):
    """A guest's booking of a property."""

    __tablename__ = "reservations"

    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who made the reservation"
    )

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, guest_id={self.guest_id}, "
            f"property_id={self.property_id}, start_date={self.start_date})>"
        )

    @property
    def nights(self) -> int:
        """Number of nights covered by the reservation."""
        return (self.end_date - self.start_date).days
