"""
Tests for the environment-driven Settings.
"""

import os
import tempfile

import pytest

from src.config.settings import Settings, default_log_path
from src.exceptions import ConfigurationError

ENV_KEYS = [
    "BENCH_INSTALL_LOG_PATH",
    "BENCH_INSTALL_WINGET_SOURCE",
    "BENCH_INSTALL_WINGET_PATH",
    "BENCH_INSTALL_DOWNLOAD_DIR",
    "BENCH_INSTALL_DOWNLOAD_TIMEOUT",
    "BENCH_INSTALL_KEEP_DOWNLOADS",
    "BENCH_INSTALL_USER_AGENT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.log_path == default_log_path()
        assert settings.winget_source == "winget"
        assert settings.winget_path is None
        assert settings.download_dir == tempfile.gettempdir()
        assert settings.download_timeout is None
        assert settings.keep_downloads is False
        assert settings.user_agent.startswith("gpu-bench-installer/")

    def test_default_log_path_is_well_known(self):
        assert default_log_path() == os.path.join(
            tempfile.gettempdir(), "gpu-bench-installer", "install.log"
        )

    def test_overrides(self, clean_env, tmp_path):
        clean_env.setenv("BENCH_INSTALL_LOG_PATH", str(tmp_path / "run.log"))
        clean_env.setenv("BENCH_INSTALL_WINGET_SOURCE", "msstore")
        clean_env.setenv("BENCH_INSTALL_WINGET_PATH", "C:/tools/winget.exe")
        clean_env.setenv("BENCH_INSTALL_DOWNLOAD_TIMEOUT", "90")
        clean_env.setenv("BENCH_INSTALL_KEEP_DOWNLOADS", "yes")

        settings = Settings()

        assert settings.log_path == str(tmp_path / "run.log")
        assert settings.winget_source == "msstore"
        assert settings.winget_path == "C:/tools/winget.exe"
        assert settings.download_timeout == 90.0
        assert settings.keep_downloads is True

    def test_invalid_bool(self, clean_env):
        clean_env.setenv("BENCH_INSTALL_KEEP_DOWNLOADS", "maybe")

        with pytest.raises(ConfigurationError, match="must be a boolean"):
            Settings()

    @pytest.mark.parametrize(
        "value, message", [("soon", "must be a number"), ("0", "greater than zero")]
    )
    def test_invalid_timeout(self, clean_env, value, message):
        clean_env.setenv("BENCH_INSTALL_DOWNLOAD_TIMEOUT", value)

        with pytest.raises(ConfigurationError, match=message):
            Settings()
