"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_tree():
    """Sample nested tree for testing."""
    return {
        "users": {
            "user1": {
                "name": "Alice",
                "email": "alice@example.com",
                "profile": {
                    "age": 30,
                    "city": "New York"
                }
            },
            "user2": {
                "name": "Bob",
                "email": "bob@example.com",
                "profile": {
                    "age": 25,
                    "city": "San Francisco"
                }
            }
        },
        "settings": {
            "theme": "dark",
            "notifications": True
        },
        "version": 2
    }


@pytest.fixture
def sample_flat():
    """The flat form of sample_tree."""
    return {
        "users.user1.name": "Alice",
        "users.user1.email": "alice@example.com",
        "users.user1.profile.age": 30,
        "users.user1.profile.city": "New York",
        "users.user2.name": "Bob",
        "users.user2.email": "bob@example.com",
        "users.user2.profile.age": 25,
        "users.user2.profile.city": "San Francisco",
        "settings.theme": "dark",
        "settings.notifications": True,
        "version": 2
    }


@pytest.fixture
def deep_tree():
    """A single chain of nested maps twenty levels deep."""
    tree = {"leaf": "bottom"}
    for i in reversed(range(20)):
        tree = {f"l{i}": tree}
    return tree
