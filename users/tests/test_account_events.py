"""Tests for the structured log events emitted on account creation and login."""

from django.contrib.auth import get_user_model

import pytest
from structlog.testing import capture_logs

from users.backends import EmailBackend

User = get_user_model()

PASSWORD = "correct-horse-battery-staple"


def _leaks(logs: list[dict], secret: str) -> bool:
    return any(secret in str(value) for entry in logs for value in entry.values())


@pytest.mark.models
@pytest.mark.django_db
class TestUserCreatedEvent:
    def test_create_user_logs_event(self) -> None:
        with capture_logs() as logs:
            user = User.objects.create_user(email="logged@example.com", password=PASSWORD)

        events = [e for e in logs if e["event"] == "user_created"]
        assert len(events) == 1
        assert events[0]["user_id"] == user.pk
        assert events[0]["is_staff"] is False
        assert events[0]["is_superuser"] is False
        assert not _leaks(logs, PASSWORD)

    def test_create_superuser_logs_flags(self) -> None:
        with capture_logs() as logs:
            user = User.objects.create_superuser(email="boss@example.com", password=PASSWORD)

        [event] = [e for e in logs if e["event"] == "user_created"]
        assert event["user_id"] == user.pk
        assert event["is_staff"] is True
        assert event["is_superuser"] is True
        assert not _leaks(logs, PASSWORD)

    def test_rejected_creation_logs_nothing(self) -> None:
        with capture_logs() as logs, pytest.raises(ValueError):
            User.objects.create_user(email="  ", password=PASSWORD)

        assert [e for e in logs if e["event"] == "user_created"] == []


@pytest.mark.integration
@pytest.mark.django_db
class TestAuthenticationFailedEvent:
    @pytest.fixture
    def account(self):
        return User.objects.create_user(email="member@example.com", password=PASSWORD)

    def _failures(self, logs: list[dict]) -> list[dict]:
        return [e for e in logs if e["event"] == "authentication_failed"]

    def test_unknown_email(self, account) -> None:
        with capture_logs() as logs:
            user = EmailBackend().authenticate(
                None, username="ghost@example.com", password=PASSWORD
            )

        assert user is None
        [event] = self._failures(logs)
        assert event["reason"] == "unknown_email"
        assert "user_id" not in event
        assert not _leaks(logs, PASSWORD)

    def test_bad_password(self, account) -> None:
        wrong = "not-the-password-123"
        with capture_logs() as logs:
            user = EmailBackend().authenticate(None, username=account.email, password=wrong)

        assert user is None
        [event] = self._failures(logs)
        assert event["reason"] == "bad_password"
        assert event["user_id"] == account.pk
        assert not _leaks(logs, wrong)

    def test_inactive_user(self, account) -> None:
        account.is_active = False
        account.save()

        with capture_logs() as logs:
            user = EmailBackend().authenticate(None, username=account.email, password=PASSWORD)

        assert user is None
        [event] = self._failures(logs)
        assert event["reason"] == "inactive"
        assert event["user_id"] == account.pk
        assert not _leaks(logs, PASSWORD)

    def test_success_logs_no_failure(self, account) -> None:
        with capture_logs() as logs:
            user = EmailBackend().authenticate(None, username=account.email, password=PASSWORD)

        assert user == account
        assert self._failures(logs) == []
        assert not _leaks(logs, PASSWORD)
