from django.conf import settings

from config.settings import settings_module


def test_env_picks_settings_module(monkeypatch):
    monkeypatch.delenv("DJANGO_ENV", raising=False)
    assert settings_module() == "config.settings.local"

    monkeypatch.setenv("DJANGO_ENV", "PROD")
    assert settings_module() == "config.settings.prod"

    monkeypatch.setenv("DJANGO_ENV", "test")
    assert settings_module() == "config.settings.test"

    monkeypatch.setenv("DJANGO_ENV", "staging")
    assert settings_module() == "config.settings.local"


def test_pytest_runs_on_sqlite_test_settings():
    assert settings.SETTINGS_MODULE == "config.settings.test"
    assert settings.DATABASES["default"]["ENGINE"] == "django.db.backends.sqlite3"
