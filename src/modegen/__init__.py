"""modegen — build the .roomodes configuration from *-mode.md documents."""

__version__ = "0.1.0"
