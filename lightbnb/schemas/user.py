"""
Pydantic schemas for user input.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    Fields required to create a user.
    No format checks are applied; the store's constraints are authoritative.
    """

    name: str = Field(..., description="User's display name", examples=["Ada"])
    email: str = Field(..., description="User email address", examples=["ada@example.com"])
    password: str = Field(..., description="Password, stored as given")
