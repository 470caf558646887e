"""Helpers shared by uploadref CLI commands."""

from .messages import error, success, warn

__all__ = ["error", "success", "warn"]
