"""Commit-message rules — text oriented rather than token oriented.

These never apply to file content. ``\\b`` anchors match the word boundaries
``grep -E`` uses, and the scanner evaluates them one line at a time.
"""

from commitguard.rules.models import Rule

PRIVATE_IP = Rule(
    id="PRIVATE_IP",
    name="Private IP Address",
    description="Detects RFC 1918 addresses (10/8, 172.16/12, 192.168/16).",
    category="network",
    scope="message",
    pattern=(
        r"10\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}"
        r"|172\.(?:1[6-9]|2[0-9]|3[01])\.[0-9]{1,3}\.[0-9]{1,3}"
        r"|192\.168\.[0-9]{1,3}\.[0-9]{1,3}"
    ),
)

PASSWORD_ASSIGNMENT = Rule(
    id="PASSWORD_ASSIGNMENT",
    name="Password or Credential",
    description="Detects password/secret/token/key followed by : or = and a value.",
    category="credential",
    scope="message",
    ignore_case=True,
    pattern=r"\b(?:password|passwd|pwd|secret|credential|token|key)\s*[:=]\s*\S{8,}",
)

CREDENTIAL_ASSIGNMENT = Rule(
    id="CREDENTIAL_ASSIGNMENT",
    name="API Key or Token",
    description="Detects api_key/access_token/secret_key/auth_token assignments.",
    category="credential",
    scope="message",
    ignore_case=True,
    pattern=(
        r"\b(?:api[_-]?key|access[_-]?token|secret[_-]?key|auth[_-]?token)"
        r"\s*[:=]\s*\S{16,}"
    ),
)

HIGH_ENTROPY_BLOB = Rule(
    id="HIGH_ENTROPY_BLOB",
    name="High-Entropy String",
    description="Detects word-bounded base64-looking runs of 32+ characters.",
    category="generic",
    scope="message",
    pattern=r"\b[a-zA-Z0-9+/=]{32,}\b",
)

EMAIL_ADDRESS = Rule(
    id="EMAIL_ADDRESS",
    name="Email Address",
    description="Detects email addresses; only ever a warning.",
    category="identity",
    scope="message",
    pattern=r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b",
)

ALL_MESSAGE_RULES = [
    PRIVATE_IP,
    PASSWORD_ASSIGNMENT,
    CREDENTIAL_ASSIGNMENT,
    HIGH_ENTROPY_BLOB,
    EMAIL_ADDRESS,
]
