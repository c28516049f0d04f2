"""
Authentication backend for email logins.

The submitted identifier is normalized exactly the way
``CustomUserManager.create_user`` normalizes it before storage, so a login
with a differently-cased domain still finds the account.
"""

from typing import Any

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.http import HttpRequest

import structlog

logger = structlog.get_logger(__name__)


class EmailBackend(ModelBackend):
    def authenticate(
        self,
        request: HttpRequest | None,
        username: str | None = None,
        password: str | None = None,
        **kwargs: Any,
    ):
        UserModel = get_user_model()
        if username is None:
            username = kwargs.get(UserModel.USERNAME_FIELD)
        if username is None or password is None:
            return None

        email = UserModel._default_manager.normalize_email(username)
        try:
            user = UserModel._default_manager.get_by_natural_key(email)
        except UserModel.DoesNotExist:
            # Run the hasher once to reduce the timing difference between
            # an existing and a nonexistent account.
            UserModel().set_password(password)
            logger.info("authentication_failed", reason="unknown_email")
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            logger.debug("authentication_succeeded", user_id=user.pk)
            return user

        logger.info(
            "authentication_failed",
            user_id=user.pk,
            reason="inactive" if not self.user_can_authenticate(user) else "bad_password",
        )
        return None
