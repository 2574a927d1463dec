"""Convenience exports for application schemas."""

from __future__ import annotations

from .user import UserDetailsSchema, UserSchema

__all__ = ["UserDetailsSchema", "UserSchema"]
