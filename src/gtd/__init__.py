"""GTD - Getting Things Done to-do list."""

__version__ = "0.1.0"
