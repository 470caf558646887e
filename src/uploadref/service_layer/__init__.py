"""Service layer: use-case level validation built on the domain and interfaces."""

from .validator import FileValidator

__all__ = ["FileValidator"]
