# lambda/vanity_connect/config.py
import os

TABLE_NAME_VAR = "TABLE_NAME"


class ConfigurationError(RuntimeError):
    """A required setting is missing from the function environment."""


def table_name() -> str:
    name = os.getenv(TABLE_NAME_VAR, "").strip()
    if not name:
        raise ConfigurationError(f"{TABLE_NAME_VAR} env var is not set")
    return name


def env() -> str:
    return os.getenv("ENV", "dev")


def cors_allow_origin() -> str:
    return os.getenv("CORS_ALLOW_ORIGIN", "*")
