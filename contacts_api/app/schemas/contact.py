"""
Pydantic schemas for contacts.

A contact is an ``id`` plus three free-form strings.  No format checks
are applied to ``phone`` or ``email``; a field missing from a payload
(or sent as ``null``) is stored as an empty string.  Values of any JSON
type other than string are rejected, which the API reports as
``400 Bad Request``.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ContactBase(BaseModel):
    name: str = Field("", examples=["Иван Иванов"])
    phone: str = Field("", examples=["+79161234567"])
    email: str = Field("", examples=["ivan@mail.ru"])

    @field_validator("name", "phone", "email", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class ContactIn(ContactBase):
    """Schema for creating or replacing a contact.

    ``id`` is accepted so that clients may send back a full record, but
    the server always ignores it: new contacts get a generated id and
    updates keep the id from the URL.
    """

    id: Optional[str] = Field(None, examples=["1"], description="Игнорируется сервером")


class Contact(ContactBase):
    """Schema for a stored contact."""

    id: str = Field(..., examples=["1"])


class MessageResponse(BaseModel):
    message: str = Field(..., examples=["Контакт удален"])


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Контакт не найден"])
