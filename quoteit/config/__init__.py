"""Configuration package."""

from quoteit.config.settings import (
    DEFAULT_DATA_DIR_NAME,
    EnvironmentSetupError,
    QuoteItSettings,
    get_settings,
    resolve_store_path,
)

__all__ = [
    "DEFAULT_DATA_DIR_NAME",
    "EnvironmentSetupError",
    "QuoteItSettings",
    "get_settings",
    "resolve_store_path",
]
