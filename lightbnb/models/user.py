"""
User model for guests and property owners.
Passwords are stored exactly as supplied; hashing happens upstream if at all.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """A LightBnB account, acting as a guest, an owner, or both."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - unique in the schema"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password as supplied by the caller"
    )

    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email})>"

    def to_dict(self) -> dict:
        """Column values of the user row."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password,
        }
