"""Prometheus metrics definitions for the content sanitizer service."""

from prometheus_client import Counter, Histogram

# --- HTTP Metrics ---

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# --- Sanitizer Metrics ---

CONTACT_SPANS_REMOVED_TOTAL = Counter(
    "contact_spans_removed_total",
    "Total contact-sharing spans replaced with the placeholder",
    ["category"],
)

MESSAGES_SANITIZED_TOTAL = Counter(
    "messages_sanitized_total",
    "Total message bodies passed through the sanitizer",
    ["outcome"],  # outcome: clean/redacted
)

SANITIZE_DURATION_SECONDS = Histogram(
    "sanitize_duration_seconds",
    "Time spent sanitizing a single message body",
    buckets=(0.00005, 0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.005, 0.01),
)
