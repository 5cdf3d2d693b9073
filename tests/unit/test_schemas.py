"""Tests for request/response schemas."""

import uuid

import pytest
from pydantic import ValidationError

from content_sanitizer.compliance.patterns import ContactCategory
from content_sanitizer.shared.schemas import (
    DetectResponse,
    MessageCreate,
    MessageUpdate,
    SanitizeRequest,
    SanitizeResponse,
)


class TestMessageCreate:
    """Test message body validation."""

    def test_content_trimmed(self):
        """Test surrounding whitespace is removed."""
        message = MessageCreate(sender_id=uuid.uuid4(), content="  hello there  ")
        assert message.content == "hello there"

    def test_blank_content_rejected(self):
        """Test whitespace-only bodies are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            MessageCreate(sender_id=uuid.uuid4(), content="   ")

        assert "Message content is required" in str(exc_info.value)

    def test_too_long_content_rejected(self):
        """Test bodies over the limit are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            MessageCreate(sender_id=uuid.uuid4(), content="x" * 2001)

        assert "cannot exceed 2000 characters" in str(exc_info.value)

    def test_limit_applies_after_trim(self):
        """Test padding does not count toward the limit."""
        message = MessageCreate(sender_id=uuid.uuid4(), content="  " + "x" * 2000 + "  ")
        assert len(message.content) == 2000

    def test_invalid_sender_rejected(self):
        """Test sender_id must be a UUID."""
        with pytest.raises(ValidationError):
            MessageCreate(sender_id="not-a-uuid", content="hi")


class TestMessageUpdate:
    """Test message edit validation."""

    def test_content_trimmed(self):
        """Test edits are trimmed like new messages."""
        assert MessageUpdate(content=" edited ").content == "edited"

    def test_blank_content_rejected(self):
        """Test blank edits are rejected."""
        with pytest.raises(ValidationError):
            MessageUpdate(content="")


class TestSanitizerSchemas:
    """Test sanitizer request/response models."""

    def test_request_allows_empty(self):
        """Test an empty body is a valid sanitize request."""
        assert SanitizeRequest(content="").content == ""

    def test_request_requires_content(self):
        """Test content is required."""
        with pytest.raises(ValidationError):
            SanitizeRequest()

    def test_response_serializes_categories(self):
        """Test category keys serialize to their string values."""
        response = SanitizeResponse(
            content="x",
            sanitized=True,
            removed={ContactCategory.PHONE: 2},
        )
        assert response.model_dump(mode="json")["removed"] == {"phone": 2}

    def test_detect_response_from_strings(self):
        """Test categories given as strings are coerced to the enum."""
        response = DetectResponse(
            has_contact=True,
            contact_count=1,
            categories=["email"],
            details=[{"category": "email", "value": "a@b.io", "start": 0, "end": 6}],
        )
        assert response.categories == [ContactCategory.EMAIL]
        assert response.details[0].category == ContactCategory.EMAIL
