"""Instrumented entry point into the sanitizer for request handlers."""

import logging
import time

from content_sanitizer.compliance.contact_detector import ContactDetector
from content_sanitizer.processing.sanitizer import SanitizationResult, content_sanitizer
from content_sanitizer.shared.metrics import (
    CONTACT_SPANS_REMOVED_TOTAL,
    MESSAGES_SANITIZED_TOTAL,
    SANITIZE_DURATION_SECONDS,
)

logger = logging.getLogger(__name__)

contact_detector = ContactDetector(content_sanitizer.rules)


def sanitize_content(content: str) -> SanitizationResult:
    """Sanitize a message body, recording metrics and logging what was removed."""
    start = time.perf_counter()
    result = content_sanitizer.redact(content)
    SANITIZE_DURATION_SECONDS.observe(time.perf_counter() - start)

    if not result.was_sanitized:
        MESSAGES_SANITIZED_TOTAL.labels(outcome="clean").inc()
        return result

    MESSAGES_SANITIZED_TOTAL.labels(outcome="redacted").inc()
    for category, count in result.removed.items():
        CONTACT_SPANS_REMOVED_TOTAL.labels(category=category.value).inc(count)

    logger.info(
        f"Contact details removed: {result.removed_count} span(s) of types "
        f"{sorted(category.value for category in result.removed)}"
    )
    return result
