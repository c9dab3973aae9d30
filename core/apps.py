"""Core application configuration."""

import os

from django.apps import AppConfig
from django.db.models.signals import post_migrate


def _create_admin_user(sender, **kwargs):
    """Ensure the default back-office account exists.

    Username and password come from ``DJANGO_ADMIN_USER`` and
    ``DJANGO_ADMIN_PASSWORD`` (both default to ``admin``).
    """

    from django.contrib.auth import get_user_model

    User = get_user_model()
    username = os.getenv("DJANGO_ADMIN_USER", "admin")
    if not User.objects.filter(username=username).exists():
        User.objects.create_superuser(
            username, email="", password=os.getenv("DJANGO_ADMIN_PASSWORD", "admin")
        )


class CoreConfig(AppConfig):
    """Login, logout and health endpoints."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self):  # pragma: no cover - executed via Django startup
        post_migrate.connect(
            _create_admin_user, dispatch_uid="core.create_admin_user"
        )
