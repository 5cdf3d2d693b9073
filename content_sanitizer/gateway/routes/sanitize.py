"""REST endpoints exposing the sanitizer and its rule table."""

from fastapi import APIRouter

from content_sanitizer.gateway.sanitization import contact_detector, sanitize_content
from content_sanitizer.processing.sanitizer import content_sanitizer
from content_sanitizer.shared.schemas import (
    ContactRuleResponse,
    DetectResponse,
    SanitizeRequest,
    SanitizeResponse,
)

router = APIRouter()


@router.post("/sanitize", response_model=SanitizeResponse)
async def sanitize(request: SanitizeRequest) -> SanitizeResponse:
    """Replace contact-sharing spans with the placeholder."""
    result = sanitize_content(request.content)
    return SanitizeResponse(
        content=result.text,
        sanitized=result.was_sanitized,
        removed=result.removed,
    )


@router.post("/detect", response_model=DetectResponse)
async def detect(request: SanitizeRequest) -> DetectResponse:
    """Report contact-sharing spans without rewriting the text."""
    return DetectResponse(**contact_detector.detect(request.content).to_dict())


@router.get("/patterns", response_model=list[ContactRuleResponse])
async def list_patterns() -> list[ContactRuleResponse]:
    """List detection rules in application order."""
    return [
        ContactRuleResponse(
            category=rule.category,
            priority=rule.priority,
            description=rule.description,
            pattern=rule.pattern.pattern,
        )
        for rule in content_sanitizer.rules
    ]
