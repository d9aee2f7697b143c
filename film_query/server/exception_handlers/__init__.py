"""
Exception handlers for the Film Query server.

This package contains the exception-to-HTTP mapping and a setup function to
register it with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
