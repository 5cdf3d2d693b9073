"""Message content sanitizer.

Replaces every contact-sharing span with a fixed placeholder. The engine is a
pure function of its input: no logging, no metrics and no I/O happen here,
so it is safe to call from any thread or request.
"""

from collections import Counter
from dataclasses import dataclass, field

from ..compliance.patterns import (
    PLACEHOLDER,
    ContactCategory,
    ContactRule,
    build_pattern_set,
    ensure_placeholder_safe,
)
from ..shared.config import settings

# Upper bound on full pipeline passes. A replacement can expose text that an
# earlier rule already passed over; clean or once-redacted text settles in 1-2.
MAX_PASSES = 4


@dataclass(frozen=True)
class SanitizationResult:
    """Sanitized text plus how many spans each category replaced."""

    text: str | None
    removed: dict[ContactCategory, int] = field(default_factory=dict)

    @property
    def was_sanitized(self) -> bool:
        return bool(self.removed)

    @property
    def removed_count(self) -> int:
        return sum(self.removed.values())


class ContentSanitizer:
    """Apply the ordered rule set to message text."""

    def __init__(
        self,
        rules: tuple[ContactRule, ...] | None = None,
        extra_keywords: tuple[str, ...] | list[str] = (),
        placeholder: str = PLACEHOLDER,
    ):
        if rules is None:
            rules = build_pattern_set(extra_keywords=extra_keywords, placeholder=placeholder)
        else:
            ensure_placeholder_safe(rules, placeholder)
        self.rules = rules
        self.placeholder = placeholder

    def redact(self, text: str | None) -> SanitizationResult:
        """Sanitize text and report per-category replacement counts.

        Rules run in priority order, each on the previous rule's output. The
        whole pipeline repeats until the text stops changing so that
        sanitizing the result again is always a no-op.
        """
        if not text:
            return SanitizationResult(text=text)

        removed: Counter[ContactCategory] = Counter()
        current = text
        for _ in range(MAX_PASSES):
            previous = current
            for rule in self.rules:
                current, count = rule.sub(current, self.placeholder)
                if count:
                    removed[rule.category] += count
            if current == previous:
                break

        return SanitizationResult(text=current, removed=dict(removed))

    def sanitize(self, text: str | None) -> str | None:
        """Return text with contact details replaced; None and "" pass through."""
        return self.redact(text).text


content_sanitizer = ContentSanitizer(extra_keywords=settings.SANITIZER_EXTRA_KEYWORDS)


def sanitize(text: str | None) -> str | None:
    """Sanitize text with the process-wide rule set."""
    return content_sanitizer.sanitize(text)
