"""Service layer public API."""

from __future__ import annotations

from .user_service import UserService

__all__ = ["UserService"]
