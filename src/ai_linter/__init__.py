"""AI-agent driven code linter."""

__version__ = "0.1.0"
