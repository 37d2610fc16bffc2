"""
Shared pytest fixtures and configuration for pagewindow tests.

This module provides row factories, mocked query collaborators and a
mocked boto3 DynamoDB client.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel


class User(BaseModel):
    email: str
    username: str
    age: int


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")


@pytest.fixture
def make_rows():
    """Returns a factory building n simple row dicts."""

    def _make_rows(n: int) -> list[dict[str, Any]]:
        return [{"id": i} for i in range(1, n + 1)]

    return _make_rows


@pytest.fixture
def mock_query(make_rows):
    """
    Creates a mocked query collaborator.

    execute() returns 5 rows by default; tests override return_value
    to simulate what the store hands back for the over-fetch window.
    """
    query = MagicMock()
    query.execute.return_value = make_rows(5)
    return query


@pytest.fixture
def mock_client():
    """
    Creates a fully mocked boto3 DynamoDB client.

    The paginator yields nothing until a test sets its pages.
    """
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = []
    return client


@pytest.fixture
def user_model():
    return User


@pytest.fixture
def dynamo_user_items() -> list[dict[str, Any]]:
    """Users in DynamoDB JSON format, as returned by Scan/Query."""
    return [
        {
            "email": {"S": f"user{i}@example.com"},
            "username": {"S": f"user{i}"},
            "age": {"N": str(20 + i)},
        }
        for i in range(1, 8)
    ]
