"""
Configuration Management for quote-it

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The only thing worth configuring is where the store lives
and how chatty the logs are. Everything else is fixed by the CLI.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATA_DIR_NAME = ".quote-it"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EnvironmentSetupError(Exception):
    """
    The local environment could not be prepared for the store.

    The message always names the step that failed (home directory
    resolution, directory creation, file creation).
    """
    pass


class QuoteItSettings(BaseSettings):
    """
    Application settings.

    Loads overrides from QUOTE_IT_* environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUOTE_IT_",
        extra="ignore"
    )

    data_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding the store (defaults to ~/.quote-it)"
    )
    db_filename: str = Field(
        default="quotes.db",
        min_length=1,
        description="Name of the store file inside data_dir"
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for log lines written to stderr"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    def resolve_data_dir(self) -> Path:
        """Get the store directory, falling back to the user's home."""
        if self.data_dir is not None:
            return self.data_dir
        try:
            home = Path.home()
        except RuntimeError as e:
            raise EnvironmentSetupError(
                f"Could not resolve home directory: {e}"
            ) from e
        return home / DEFAULT_DATA_DIR_NAME


def resolve_store_path(settings: QuoteItSettings) -> Path:
    """
    Get the store file path, creating the directory and file if absent.

    Existing files and directories are left untouched.

    Raises:
        EnvironmentSetupError: If any step fails
    """
    data_dir = settings.resolve_data_dir()

    if not data_dir.exists():
        try:
            data_dir.mkdir(parents=True)
        except OSError as e:
            raise EnvironmentSetupError(
                f"Failed to create quotes directory {data_dir}: {e}"
            ) from e

    store_path = data_dir / settings.db_filename

    if not store_path.exists():
        try:
            store_path.touch()
        except OSError as e:
            raise EnvironmentSetupError(
                f"Quote file creation failed for {store_path}: {e}"
            ) from e

    return store_path


@lru_cache()
def get_settings() -> QuoteItSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return QuoteItSettings()
