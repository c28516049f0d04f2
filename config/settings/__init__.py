"""
Settings module for the email-login project.

Usage:
    Development: DJANGO_SETTINGS_MODULE=config.settings.development
    Testing: DJANGO_SETTINGS_MODULE=config.settings.testing
    Production: DJANGO_SETTINGS_MODULE=config.settings.production

Default: development (set in manage.py)
"""
