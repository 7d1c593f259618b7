from django.apps import AppConfig


class SentinelConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "wst_core.sentinel"
