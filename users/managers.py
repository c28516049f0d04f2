from typing import Any

from django.contrib.auth.base_user import BaseUserManager
from django.utils.translation import gettext_lazy as _

import structlog

logger = structlog.get_logger(__name__)


class CustomUserManager(BaseUserManager):
    """
    Manager for a user model where the email address is the unique identifier
    for authentication instead of a username.
    """

    def create_user(self, email: str | None, password: str | None = None, **extra_fields: Any):
        """
        Create and save a user with the given email and password.

        Raises:
            ValueError: If the email is missing or blank.
        """
        # normalize_email only strips values that contain an "@"
        email = self.normalize_email(email).strip()
        if not email:
            raise ValueError(_("The email address must be set"))

        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)

        logger.info(
            "user_created",
            user_id=user.pk,
            is_staff=user.is_staff,
            is_superuser=user.is_superuser,
        )
        return user

    def create_superuser(self, email: str | None, password: str | None = None, **extra_fields: Any):
        """
        Create and save a superuser with the given email and password.

        Raises:
            ValueError: If is_staff or is_superuser is explicitly set to anything but True.
        """
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError(_("Superuser must have is_staff=True."))
        if extra_fields.get("is_superuser") is not True:
            raise ValueError(_("Superuser must have is_superuser=True."))

        return self.create_user(email, password, **extra_fields)
