"""Starter .commitguard.toml template written by ``commitguard init``."""

DEFAULT_TOML = """\
# commitguard configuration
version = "1.0"

[scan]
entropy_threshold = 8     # staged files: flag generic matches with more distinct chars than this
min_length = 16           # candidates shorter than this never pass the entropy gate
max_pattern_chars = 50
max_context_chars = 100

[message]
entropy_threshold = 10    # commit messages use a stricter gate
min_length = 16
max_ips = 5
max_emails = 3

[output]
format = "terminal"       # terminal | json
show_summary = true
redact = false

[rules]
# enable = ["AWS_ACCESS_KEY", "PRIVATE_KEY"]   # empty = all enabled
# disable = ["BASE64_BLOB"]

[ignore]
# paths = ["tests/fixtures/*", "docs/*"]

[allowlist]
# patterns = ["dummy_secret", "fake-token"]

[ci]
# annotation_format = "github"   # github | none
"""
