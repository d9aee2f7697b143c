"""Database entity models, one module per table."""

from .films import Film

__all__ = ["Film"]
