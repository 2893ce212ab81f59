"""Logging helpers with sensitive data redaction."""

import re

# Query parameters that must never reach the logs
SENSITIVE_PARAMS = [
    "appid",
    "api_key",
    "apikey",
    "key",
    "token",
    "secret",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"([?&]){param}=([^&\s\"]+)"
        redacted = re.sub(pattern, rf"\g<1>{param}=***REDACTED***", redacted)
    return redacted
