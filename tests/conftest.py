"""Shared pytest configuration and fixtures for sheetlite tests."""

import pytest

from sheetlite import Client, SqliteDriver
from tests.helpers.memory_driver import MemoryDriver


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Include tests marked @pytest.mark.slow (e.g. live Google Sheets)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped unless --run-slow)")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip = pytest.mark.skip(reason="slow test, pass --run-slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "sheets.db")


@pytest.fixture
def driver(db_path):
    driver = SqliteDriver(db_path)
    yield driver
    driver.close()


@pytest.fixture
def client(driver) -> Client:
    return Client(driver)


@pytest.fixture
def memory_driver() -> MemoryDriver:
    return MemoryDriver()


@pytest.fixture
def seat_rows() -> list:
    return [
        ["SeatNo", "Name", "Present"],
        [1, "Alice", True],
        [2, "Bob", False],
        [3, "Charlie", True],
    ]
