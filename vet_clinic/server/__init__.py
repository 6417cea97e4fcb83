"""
Vet Clinic Server Package.

This package contains the web server implementation for Vet Clinic Records.
It renders repository results as JSON envelopes and maps repository errors to
HTTP status codes.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Mapping of repository errors to HTTP responses.
    services: FastAPI dependency providing the repository bundle.
"""
