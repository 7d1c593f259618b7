import os


def settings_module() -> str:
    """
    Dotted path of the settings module picked by DJANGO_ENV (local, prod or test).
    Each module imports on its own, so pytest can point straight at config.settings.test.
    """
    env = os.getenv("DJANGO_ENV", "local").lower()
    if env not in ("local", "prod", "test"):
        env = "local"
    return f"config.settings.{env}"
