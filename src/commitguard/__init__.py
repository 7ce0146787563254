"""commitguard — keep secrets out of staged files and commit messages."""

__version__ = "0.3.0"
