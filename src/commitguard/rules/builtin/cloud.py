"""Cloud provider credential rules."""

from commitguard.rules.models import Rule

AWS_ACCESS_KEY = Rule(
    id="AWS_ACCESS_KEY",
    name="AWS Access Key ID",
    description="Detects long-term (AKIA) and temporary (ASIA) AWS access key IDs.",
    category="cloud",
    pattern=r"(?:AKIA|ASIA)[0-9A-Z]{16}",
)

GOOGLE_API_KEY = Rule(
    id="GOOGLE_API_KEY",
    name="Google API Key",
    description="Detects Google API keys (AIza prefix).",
    category="cloud",
    pattern=r"AIza[0-9A-Za-z_-]{35}",
)

GOOGLE_OAUTH_TOKEN = Rule(
    id="GOOGLE_OAUTH_TOKEN",
    name="Google OAuth Token",
    description="Detects Google OAuth access (ya29.) and refresh (1//) tokens.",
    category="cloud",
    pattern=r"(?:ya29\.|1//)[a-zA-Z0-9_-]+",
)
