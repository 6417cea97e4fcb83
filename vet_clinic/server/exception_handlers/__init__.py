"""
Exception handlers for the Vet Clinic Records server.

This package contains custom exception handlers for the repository error
taxonomy, request validation and HTTP errors, plus a global fallback handler,
and a setup function to register them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
