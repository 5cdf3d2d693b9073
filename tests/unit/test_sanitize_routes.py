"""Tests for sanitize, detect and pattern endpoints."""

PLACEHOLDER = "[Contact details removed. Continue discussion after acceptance.]"


class TestSanitizeEndpoint:
    """Test POST /api/v1/sanitize."""

    async def test_sanitize_email(self, client):
        """Test an email is replaced and reported."""
        response = await client.post(
            "/api/v1/sanitize",
            json={"content": "Contact me at test@example.com for details."},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["content"] == f"Contact me at {PLACEHOLDER} for details."
        assert data["sanitized"] is True
        assert data["removed"] == {"email": 1}

    async def test_sanitize_clean(self, client):
        """Test clean content is returned unchanged."""
        text = "Hello, I am interested in your services."
        response = await client.post("/api/v1/sanitize", json={"content": text})

        assert response.status_code == 200
        assert response.json() == {"content": text, "sanitized": False, "removed": {}}

    async def test_sanitize_empty(self, client):
        """Test empty content passes through."""
        response = await client.post("/api/v1/sanitize", json={"content": ""})

        assert response.status_code == 200
        assert response.json()["content"] == ""
        assert response.json()["sanitized"] is False

    async def test_sanitize_mixed(self, client):
        """Test all four categories are counted."""
        response = await client.post(
            "/api/v1/sanitize",
            json={"content": "Email me at t@t.com or call 555-555-5555. @someuser on telegram."},
        )

        assert response.json()["removed"] == {
            "phone": 1,
            "email": 1,
            "keyword": 1,
            "social_handle": 1,
        }

    async def test_sanitize_missing_content(self, client):
        """Test validation errors are flattened."""
        response = await client.post("/api/v1/sanitize", json={})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail[0]["field"] == "content"
        assert "msg" in detail[0]


class TestDetectEndpoint:
    """Test POST /api/v1/detect."""

    async def test_detect_spans(self, client):
        """Test spans are reported against the original text."""
        response = await client.post("/api/v1/detect", json={"content": "Call me at 555-123-4567"})

        assert response.status_code == 200
        data = response.json()
        assert data["has_contact"] is True
        assert data["contact_count"] == 2
        assert data["categories"] == ["keyword", "phone"]
        assert data["details"][1] == {
            "category": "phone",
            "value": "555-123-4567",
            "start": 11,
            "end": 23,
        }

    async def test_detect_clean(self, client):
        """Test clean text reports nothing."""
        response = await client.post("/api/v1/detect", json={"content": "Sounds great!"})

        assert response.json() == {
            "has_contact": False,
            "contact_count": 0,
            "categories": [],
            "details": [],
        }


class TestPatternsEndpoint:
    """Test GET /api/v1/patterns."""

    async def test_list_patterns(self, client):
        """Test rules are listed in application order."""
        response = await client.get("/api/v1/patterns")

        assert response.status_code == 200
        rules = response.json()
        assert [rule["category"] for rule in rules] == [
            "phone",
            "email",
            "email",
            "keyword",
            "social_handle",
        ]
        assert all(rule["pattern"] for rule in rules)
        assert [rule["priority"] for rule in rules] == sorted(rule["priority"] for rule in rules)
