"""afwkd - REST daemon and CLI for AFWK structure management."""

__version__ = "0.1.0"
