"""Contact-sharing detector: reports matched spans without rewriting the text."""

import logging

from .patterns import CONTACT_PATTERNS, ContactCategory, ContactRule

logger = logging.getLogger(__name__)


class ContactDetectionResult:
    """Result of contact-sharing detection."""

    def __init__(self):
        self.found: list[dict] = []
        self.has_contact: bool = False
        self.categories: set[ContactCategory] = set()

    def add_match(self, category: ContactCategory, value: str, start: int, end: int):
        self.found.append(
            {
                "category": category,
                "value": value,
                "start": start,
                "end": end,
            }
        )
        self.has_contact = True
        self.categories.add(category)

    def to_dict(self) -> dict:
        return {
            "has_contact": self.has_contact,
            "contact_count": len(self.found),
            "categories": sorted(category.value for category in self.categories),
            "details": [
                {**match, "category": match["category"].value} for match in self.found
            ],
        }


class ContactDetector:
    """Locate contact-sharing spans in the original text.

    Spans are claimed in rule priority order; a later match that overlaps an
    already claimed span is dropped, mirroring how the sanitizer's earlier
    passes consume text before later ones run. The report is advisory, the
    sanitizer's output is what gets stored.
    """

    def __init__(self, rules: tuple[ContactRule, ...] = CONTACT_PATTERNS):
        self.rules = rules

    def detect(self, text: str | None) -> ContactDetectionResult:
        """Detect all contact-sharing spans in the given text."""
        result = ContactDetectionResult()
        if not text:
            return result

        claimed: list[tuple[int, int]] = []
        for rule in self.rules:
            for start, end in rule.finditer(text):
                if any(start < c_end and c_start < end for c_start, c_end in claimed):
                    continue
                claimed.append((start, end))
                result.add_match(
                    category=rule.category,
                    value=text[start:end],
                    start=start,
                    end=end,
                )

        result.found.sort(key=lambda match: match["start"])

        if result.has_contact:
            logger.debug(
                f"Contact details detected: {len(result.found)} span(s) of types "
                f"{sorted(category.value for category in result.categories)}"
            )

        return result

    def has_contact(self, text: str | None) -> bool:
        """Quick check if text contains any contact-sharing span."""
        if not text:
            return False
        for rule in self.rules:
            if next(rule.finditer(text), None) is not None:
                return True
        return False
