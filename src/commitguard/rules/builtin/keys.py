"""Private key and generic high-entropy blob rules."""

from commitguard.rules.models import Rule

PRIVATE_KEY = Rule(
    id="PRIVATE_KEY",
    name="Private Key",
    description="Detects PEM-encoded private keys (RSA, EC, DSA, OpenSSH).",
    category="key",
    pattern=r"-----BEGIN (?:RSA |EC |DSA |OPENSSH )?PRIVATE KEY-----",
)

BASE64_BLOB = Rule(
    id="BASE64_BLOB",
    name="Base64 Blob",
    description="Detects long base64-looking runs; reported only when entropy is high.",
    category="generic",
    pattern=r"[a-zA-Z0-9+/=]{40,}",
)
