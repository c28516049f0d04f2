"""
Custom Django system checks for the users application.

These run with `manage.py check` and on server startup to catch a project
that is not wired up for email logins: a different AUTH_USER_MODEL, a user
model keyed on something other than a unique email, or a missing backend.

The checks are registered when UsersConfig.ready() imports this module.
"""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.checks import Error, Tags, Warning, register
from django.core.exceptions import FieldDoesNotExist

EXPECTED_USER_MODEL = "users.CustomUser"
EXPECTED_USERNAME_FIELD = "email"
EMAIL_BACKEND = "users.backends.EmailBackend"


def check_identifying_field(user_model) -> list[Error]:
    """
    Verify that a user model is keyed on a unique email field.

    Returns:
        List of Error objects, empty if the model is configured correctly.
    """
    label = user_model._meta.label
    if user_model.USERNAME_FIELD != EXPECTED_USERNAME_FIELD:
        return [
            Error(
                f"{label}.USERNAME_FIELD is '{user_model.USERNAME_FIELD}', "
                f"expected '{EXPECTED_USERNAME_FIELD}'",
                hint=f"Set USERNAME_FIELD = '{EXPECTED_USERNAME_FIELD}' on the user model.",
                obj=user_model,
                id="users.E002",
            )
        ]

    try:
        field = user_model._meta.get_field(EXPECTED_USERNAME_FIELD)
    except FieldDoesNotExist:
        field = None

    if field is None or not field.unique:
        return [
            Error(
                f"{label}.{EXPECTED_USERNAME_FIELD} must be unique "
                "to be used as the login identifier",
                hint="Declare the field with unique=True and add a migration.",
                obj=user_model,
                id="users.E003",
            )
        ]

    return []


@register(Tags.models)
def check_auth_user_model(app_configs, **kwargs):
    """
    Verify that the project uses the email-keyed user model.

    Returns:
        List of Error objects if AUTH_USER_MODEL or its identifying field is wrong.
    """
    if settings.AUTH_USER_MODEL != EXPECTED_USER_MODEL:
        return [
            Error(
                f"AUTH_USER_MODEL is '{settings.AUTH_USER_MODEL}', "
                f"expected '{EXPECTED_USER_MODEL}'",
                hint=f"Set AUTH_USER_MODEL = '{EXPECTED_USER_MODEL}' in settings.",
                id="users.E001",
            )
        ]

    return check_identifying_field(get_user_model())


@register(Tags.security)
def check_email_backend_installed(app_configs, **kwargs):
    """
    Warn when logins would skip email normalization.

    Returns:
        List of Warning objects if EmailBackend is not configured.
    """
    if EMAIL_BACKEND not in settings.AUTHENTICATION_BACKENDS:
        return [
            Warning(
                f"{EMAIL_BACKEND} is not in AUTHENTICATION_BACKENDS",
                hint="Logins will be case-sensitive on the email domain.",
                id="users.W001",
            )
        ]

    return []
