"""Transaction feed assembly and classification service."""

__version__ = "1.0.0"
