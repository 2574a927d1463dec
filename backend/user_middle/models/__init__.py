"""Domain records exposed by the user service."""

from __future__ import annotations

from .user import User, UserDetails, UserType

__all__ = ["User", "UserDetails", "UserType"]
