"""Pydantic schemas for request/response validation."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from content_sanitizer.compliance.patterns import ContactCategory

from .config import settings

MAX_CONTENT_LENGTH = 100_000


def _check_message_body(v: str) -> str:
    """Trim a message body and enforce the non-empty and length limits."""
    v = v.strip()
    if not v:
        raise ValueError("Message content is required")
    if len(v) > settings.MAX_MESSAGE_LENGTH:
        raise ValueError(f"Message cannot exceed {settings.MAX_MESSAGE_LENGTH} characters")
    return v


class HealthResponse(BaseModel):
    """Schema for health check response."""

    status: str
    service: str
    version: str
    timestamp: datetime


# Sanitizer schemas
class SanitizeRequest(BaseModel):
    """Schema for a sanitize or detect request."""

    content: str = Field(max_length=MAX_CONTENT_LENGTH)


class SanitizeResponse(BaseModel):
    """Schema for sanitized content."""

    content: str
    sanitized: bool
    removed: dict[ContactCategory, int] = {}


class ContactSpan(BaseModel):
    """A detected contact-sharing span in the submitted text."""

    category: ContactCategory
    value: str
    start: int
    end: int


class DetectResponse(BaseModel):
    """Schema for contact detection report."""

    has_contact: bool
    contact_count: int
    categories: list[ContactCategory]
    details: list[ContactSpan]


class ContactRuleResponse(BaseModel):
    """Schema for a detection rule, exposed for introspection."""

    category: ContactCategory
    priority: int
    description: str
    pattern: str


# Message schemas
class MessageCreate(BaseModel):
    """Schema for sending a message into a conversation."""

    sender_id: uuid.UUID
    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Trim and bound the message body."""
        return _check_message_body(v)


class MessageUpdate(BaseModel):
    """Schema for editing a message."""

    content: str

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Trim and bound the message body."""
        return _check_message_body(v)


class MessageResponse(BaseModel):
    """Schema for message response."""

    id: uuid.UUID
    conversation_id: uuid.UUID
    sender_id: uuid.UUID
    content: str
    was_sanitized: bool
    is_edited: bool
    created_at: datetime
    edited_at: datetime | None

    class Config:
        """Pydantic config."""

        from_attributes = True
