"""Record storage for the user service."""

from __future__ import annotations

from .user_store import UserStore

__all__ = ["UserStore"]
