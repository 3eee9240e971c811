"""Export account domain entities for use across the application."""

from .user import UserRecord

__all__ = ["UserRecord"]
