"""File upload service with request validation and pluggable storage."""

__version__ = "1.0.0"
