"""
Configuration settings for the application.
"""

import os
import tempfile
from typing import Optional

from dotenv import load_dotenv

from src.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

ENV_PREFIX = "BENCH_INSTALL_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def default_log_path() -> str:
    """Well-known location of the append-only install log."""
    return os.path.join(tempfile.gettempdir(), "gpu-bench-installer", "install.log")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_path: str = os.path.expanduser(
            self._get_env("LOG_PATH", default_log_path())
        )
        self.winget_source: str = self._get_env("WINGET_SOURCE", "winget")
        self.winget_path: Optional[str] = self._get_env("WINGET_PATH", "") or None
        self.download_dir: str = os.path.expanduser(
            self._get_env("DOWNLOAD_DIR", tempfile.gettempdir())
        )
        self.download_timeout: Optional[float] = self._get_positive_float(
            "DOWNLOAD_TIMEOUT"
        )
        self.keep_downloads: bool = self._get_bool("KEEP_DOWNLOADS", False)
        self.user_agent: str = self._get_env(
            "USER_AGENT", "gpu-bench-installer/0.1 (+https://localhost)"
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable, raise error if unparseable."""
        raw = os.getenv(ENV_PREFIX + key)
        if raw is None:
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"Environment variable {ENV_PREFIX + key} must be a boolean, got {raw!r}"
        )

    def _get_positive_float(self, key: str) -> Optional[float]:
        """Get an optional positive number, raise error if invalid."""
        raw = (os.getenv(ENV_PREFIX + key) or "").strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {ENV_PREFIX + key} must be a number, got {raw!r}"
            )
        if value <= 0:
            raise ConfigurationError(
                f"Environment variable {ENV_PREFIX + key} must be greater than zero"
            )
        return value


# Global settings instance
settings = Settings()
