"""Built-in rules — aggregate all categories."""

from commitguard.rules.builtin.cloud import (
    AWS_ACCESS_KEY,
    GOOGLE_API_KEY,
    GOOGLE_OAUTH_TOKEN,
)
from commitguard.rules.builtin.keys import BASE64_BLOB, PRIVATE_KEY
from commitguard.rules.builtin.message import ALL_MESSAGE_RULES
from commitguard.rules.builtin.tokens import (
    GENERIC_SK_SECRET,
    GITHUB_TOKEN,
    JWT,
    SLACK_TOKEN,
    STRIPE_KEY,
)
from commitguard.rules.models import Rule

# Registration order breaks ties when two rules match the same span.
ALL_FILE_RULES: list[Rule] = [
    STRIPE_KEY,
    GOOGLE_API_KEY,
    AWS_ACCESS_KEY,
    GENERIC_SK_SECRET,
    SLACK_TOKEN,
    GITHUB_TOKEN,
    BASE64_BLOB,
    JWT,
    PRIVATE_KEY,
    GOOGLE_OAUTH_TOKEN,
]

ALL_BUILTIN_RULES: list[Rule] = [*ALL_FILE_RULES, *ALL_MESSAGE_RULES]

__all__ = ["ALL_BUILTIN_RULES", "ALL_FILE_RULES", "ALL_MESSAGE_RULES"]
