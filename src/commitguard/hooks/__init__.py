"""Git hook installation and the pre-commit runner."""
