"""Vet Clinic Records.

This package contains the data-management backend used by a veterinary clinic
to keep track of owners, their pets and each pet's medical visit history.

High-level architecture
-----------------------

- ``vet_clinic.core``:

  - Logging configuration and the repository error taxonomy.
  - SQLModel entities for the ``owners``, ``pets`` and ``medical_records``
    tables.
  - One async repository per entity sharing a common contract: lookup,
    full listing, create, update, delete, substring search, count and
    pagination.
  - Pydantic I/O schemas that define the HTTP contract and gate malformed
    input before a repository is invoked.

- ``vet_clinic.server``:

  - FastAPI application, routers and exception handlers that render the
    repository results and map repository errors to HTTP status codes.

Typical workflow
----------------

1. Build a session factory with ``vet_clinic.core.database.create_engine`` and
   ``create_sessionmaker``.
2. Construct the repositories with ``build_repositories(session_factory=...)``.
3. Call the repository coroutines; each one acquires its own session from the
   pool and releases it on every exit path.
"""

__version__ = "0.1.0"
