"""
Pydantic models for user data.

``User`` is both the record kept by the store and the JSON shape sent
to clients; its field names are camelCase on purpose because that is
the wire format the front end expects.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """Schema for a stored user record."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Zhang San"])
    email: str = Field(..., examples=["zhang@example.com"])
    createdAt: str = Field(..., examples=["2024-01-01 12:00:00"])
    updatedAt: str = Field(..., examples=["2024-01-01 12:00:00"])


class UserCreate(BaseModel):
    """Schema for creating a user.

    Both fields are required in the body.  Empty strings pass schema
    validation and are rejected by the store instead, so that the
    client gets the store's message rather than a body error.
    """

    name: str = Field(..., examples=["Zhang San"])
    email: str = Field(..., examples=["zhang@example.com"])


class UserUpdate(BaseModel):
    """Schema for updating a user.

    A missing, ``null`` or empty field leaves the stored value as it is.
    There is no way to clear a field through this schema.
    """

    name: Optional[str] = None
    email: Optional[str] = None


class UserEnvelope(BaseModel):
    success: bool = True
    data: User
    message: Optional[str] = None


class UserListEnvelope(BaseModel):
    success: bool = True
    data: List[User]


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str
