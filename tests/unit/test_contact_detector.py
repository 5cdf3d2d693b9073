"""Tests for the contact-sharing detector."""

from content_sanitizer.compliance.contact_detector import ContactDetector
from content_sanitizer.compliance.patterns import ContactCategory, build_pattern_set


class TestContactDetector:
    """Test span detection on the original text."""

    def setup_method(self):
        """Setup test fixtures."""
        self.detector = ContactDetector()

    def test_detect_email(self):
        """Test email detection reports value and offsets."""
        result = self.detector.detect("Contact me at test@example.com for details.")

        assert result.has_contact is True
        assert result.categories == {ContactCategory.EMAIL}
        assert result.found == [
            {
                "category": ContactCategory.EMAIL,
                "value": "test@example.com",
                "start": 14,
                "end": 30,
            }
        ]

    def test_detect_phone_and_phrase(self):
        """Test results are ordered by position."""
        result = self.detector.detect("Call me at 555-123-4567")

        assert [match["category"] for match in result.found] == [
            ContactCategory.KEYWORD,
            ContactCategory.PHONE,
        ]
        assert result.found[0]["value"] == "Call me"
        assert result.found[1]["value"] == "555-123-4567"

    def test_overlap_claimed_by_earlier_rule(self):
        """Test a keyword inside a handle wins over the handle."""
        result = self.detector.detect("@whatsapp.biz")

        assert len(result.found) == 1
        assert result.found[0]["category"] == ContactCategory.KEYWORD
        assert result.found[0]["value"] == "whatsapp"

    def test_clean_text(self):
        """Test clean text has no findings."""
        result = self.detector.detect("Looking forward to the collaboration!")

        assert result.has_contact is False
        assert result.found == []
        assert result.categories == set()

    def test_none_and_empty(self):
        """Test None and empty input are treated as clean."""
        assert self.detector.detect(None).has_contact is False
        assert self.detector.detect("").has_contact is False

    def test_has_contact(self):
        """Test the quick boolean check."""
        assert self.detector.has_contact("dm me") is True
        assert self.detector.has_contact("see you soon") is False
        assert self.detector.has_contact(None) is False

    def test_to_dict(self):
        """Test serialized report shape."""
        result = self.detector.detect("Check my IG @instastar or mail a@b.io")
        data = result.to_dict()

        assert data["has_contact"] is True
        assert data["contact_count"] == 2
        assert data["categories"] == ["email", "social_handle"]
        assert data["details"][0] == {
            "category": "social_handle",
            "value": "@instastar",
            "start": 12,
            "end": 22,
        }

    def test_custom_rules(self):
        """Test a detector built from a custom rule set."""
        detector = ContactDetector(build_pattern_set(extra_keywords=["kik"]))
        result = detector.detect("Find me on Kik")

        assert result.categories == {ContactCategory.KEYWORD}
        assert result.found[0]["value"] == "Kik"
