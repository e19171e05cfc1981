"""
Core configuration
"""

import pytest

from evently.config.settings import Settings


@pytest.fixture(scope="session")
def database_file(tmp_path_factory):
    yield tmp_path_factory.mktemp("database") / "evently.db"


@pytest.fixture(scope="session")
def server_settings(database_file):
    yield Settings(
        database_type="sqlite",
        database_db=str(database_file),
        database_echo=False,
    )


@pytest.fixture(scope="session")
def database(server_settings: Settings):
    manager = server_settings.sync_manager()
    manager.create_all()
    yield
    manager.drop_all()
