"""Seed records loaded into the user store at start-up."""

from __future__ import annotations

from .seed_data import DEFAULT_USERS, SeedError, initial_users, load_seed_file

__all__ = ["DEFAULT_USERS", "SeedError", "initial_users", "load_seed_file"]
