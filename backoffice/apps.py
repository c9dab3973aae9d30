from django.apps import AppConfig


class BackofficeConfig(AppConfig):
    """Orders dashboard and expense ledger backed by Supabase."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "backoffice"
