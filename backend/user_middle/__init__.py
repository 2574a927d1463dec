"""Expose the application factory at package level.

Provide convenient access to :func:`user_middle.factory.create_app` so callers
can ``from user_middle import create_app`` (or point ``flask --app`` at the
package) without traversing the package structure.
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
