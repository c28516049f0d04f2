"""
Pytest fixtures for the users test suite.

Fixture Hierarchy:
- test_user: Standard active user (password: DEFAULT_PASSWORD)
- superuser: Staff + superuser account
- superuser_client: Django test client logged in as superuser
"""

from django.contrib.auth import get_user_model
from django.test import Client

import pytest

from users.tests.factories import DEFAULT_PASSWORD, SuperUserFactory, UserFactory

User = get_user_model()


@pytest.fixture
def password() -> str:
    return DEFAULT_PASSWORD


@pytest.fixture
def test_user(db):
    """
    Standard test user - reusable across all tests.

    Email: testuser@example.com
    Password: DEFAULT_PASSWORD
    """
    return UserFactory(email="testuser@example.com")


@pytest.fixture
def superuser(db):
    return SuperUserFactory(email="root@example.com")


@pytest.fixture
def superuser_client(superuser) -> Client:
    client = Client()
    client.force_login(superuser)
    return client
