"""Integration test configuration.

Integration tests need PostgreSQL at DATABASE__URL with migrations applied
(``python scripts/run_migrations.py``). They are skipped when it is not
reachable.
"""

import socket

import pytest
from sqlalchemy.engine import make_url

from guard.config import Settings


def _database_reachable() -> bool:
    url = make_url(Settings().database.url)
    try:
        address = (url.host or "localhost", url.port or 5432)
        with socket.create_connection(address, timeout=1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    if _database_reachable():
        return

    skip = pytest.mark.skip(reason="PostgreSQL not reachable at DATABASE__URL")
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip)
