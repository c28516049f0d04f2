import os
from typing import Any

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError, CommandParser

import structlog

logger = structlog.get_logger(__name__)

User = get_user_model()


class Command(BaseCommand):
    help = (
        "Creates a superuser from DJANGO_SUPERUSER_EMAIL/DJANGO_SUPERUSER_PASSWORD "
        "unless an account with that email exists"
    )

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--email", help="Overrides DJANGO_SUPERUSER_EMAIL")
        parser.add_argument("--password", help="Overrides DJANGO_SUPERUSER_PASSWORD")

    def handle(self, *args: Any, **options: Any) -> None:
        email = options.get("email") or os.environ.get("DJANGO_SUPERUSER_EMAIL")
        password = options.get("password") or os.environ.get("DJANGO_SUPERUSER_PASSWORD")

        if not email or not password:
            raise CommandError(
                "A superuser email and password are required. "
                "Pass --email/--password or set "
                "DJANGO_SUPERUSER_EMAIL and DJANGO_SUPERUSER_PASSWORD."
            )

        email = User.objects.normalize_email(email).strip()
        if not email:
            raise CommandError("The superuser email must not be blank.")

        existing = User.objects.filter(email=email).first()
        if existing is not None:
            if existing.is_superuser:
                self.stdout.write(f"Superuser already exists: {email}")
            else:
                # Never promote an existing account implicitly
                logger.warning("superuser_email_taken", user_id=existing.pk)
                self.stdout.write(
                    self.style.WARNING(
                        f"Account already exists but is not a superuser: {email} (left unchanged)"
                    )
                )
            return

        user = User.objects.create_superuser(email, password)
        logger.info("superuser_ensured", user_id=user.pk)
        self.stdout.write(self.style.SUCCESS(f"Created superuser: {email}"))
