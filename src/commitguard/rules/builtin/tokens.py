"""Token detection rules — Stripe, GitHub, Slack, OpenAI-style, JWT."""

from commitguard.rules.models import Rule

STRIPE_KEY = Rule(
    id="STRIPE_KEY",
    name="Stripe API Key",
    description="Detects Stripe secret and publishable keys, live and test.",
    category="token",
    pattern=r"[sp]k_(?:live|test)_[a-zA-Z0-9]{24,}",
)

GENERIC_SK_SECRET = Rule(
    id="GENERIC_SK_SECRET",
    name="sk- Secret Key",
    description="Detects sk- prefixed secret keys (OpenAI and similar providers).",
    category="token",
    pattern=r"sk-[a-zA-Z0-9]{32,}",
)

SLACK_TOKEN = Rule(
    id="SLACK_TOKEN",
    name="Slack Token",
    description="Detects Slack bot/user/app tokens.",
    category="token",
    pattern=r"xox[baprs]-[0-9]{10,13}-[0-9]{10,13}-[a-zA-Z0-9]{24,}",
)

GITHUB_TOKEN = Rule(
    id="GITHUB_TOKEN",
    name="GitHub Token",
    description="Detects GitHub tokens (ghp_, gho_, ghu_, ghs_, ghr_ prefixed).",
    category="token",
    pattern=r"gh[pousr]_[a-zA-Z0-9]{36}",
)

JWT = Rule(
    id="JWT",
    name="JSON Web Token",
    description="Detects JWTs (eyJ... three-part base64url tokens).",
    category="token",
    pattern=r"eyJ[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]{10,}",
)
