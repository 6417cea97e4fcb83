"""
Core utilities and configuration for Vet Clinic Records.

This package provides core functionality including logging configuration,
the repository error taxonomy, database setup and the data access layer.
"""

from vet_clinic.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
