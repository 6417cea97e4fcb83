"""Shared test configuration.

The server settings are built at import time, so the database URL is pointed at
in-memory SQLite before any ``vet_clinic`` module is imported.
"""

from __future__ import annotations

import os

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("VET_CLINIC_ENABLE_FILE_LOGGING", "false")
