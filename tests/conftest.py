"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

USER_1 = {
    "id": "user-1",
    "name": "Michael1",
    "email": "michaeldouglasdev1@gmail.com",
    "age": 28,
}


@pytest.fixture
def user_one() -> dict[str, Any]:
    """The first record of the reference dataset, as GraphQL returns it."""
    return dict(USER_1)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
