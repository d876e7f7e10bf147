"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import RegisterSchema, flatten_errors

__all__ = [
    "RegisterSchema",
    "flatten_errors",
]
