import re

# (prefix)(secret) pairs; only the secret group is replaced
SECRET_PATTERNS = [
    r"(x-goog-api-key:\s*)([a-zA-Z0-9\-_]+)",
    r"([?&]key=)([a-zA-Z0-9\-_]+)",
    r"(api_key\s*[:=]\s*)(['\"]?[a-zA-Z0-9\-\._~+/=]+['\"]?)",
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
]

# Google API keys are recognisable on their own
_GOOGLE_KEY_PATTERN = r"AIza[0-9A-Za-z\-_]{35}"


def redact_text(text: str) -> str:
    """
    Redacts secrets from a string using regex patterns.
    """
    if not text:
        return text

    redacted_text = re.sub(_GOOGLE_KEY_PATTERN, "[REDACTED]", text)
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)
    return redacted_text
