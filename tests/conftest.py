"""
Pytest configuration and shared fixtures.
"""

import io
import subprocess
import zipfile
from unittest.mock import MagicMock

import pytest

from src.config.settings import Settings
from src.container import DependencyContainer
from src.entities.AppDescriptor import AppDescriptor


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def sample_apps():
    """
    A small catalog covering every kind of entry.

    Returns:
        List of AppDescriptor entities
    """
    return [
        AppDescriptor(name="GPU-Z", package_id="TechPowerUp.GPU-Z"),
        AppDescriptor(
            name="Afterburner",
            package_id="Guru3D.Afterburner",
            version="4.6.5",
            fallback_url="https://example.com/afterburner.zip",
            silent_args="/S",
        ),
        AppDescriptor(
            name="Superposition",
            fallback_url="https://example.com/superposition.exe",
            silent_args="/VERYSILENT",
        ),
    ]


@pytest.fixture
def completed():
    """
    Factory for subprocess results.

    Returns:
        Callable building a CompletedProcess
    """

    def _make(returncode: int = 0, stdout: str = "", stderr: str = ""):
        return subprocess.CompletedProcess(
            args=[], returncode=returncode, stdout=stdout, stderr=stderr
        )

    return _make


@pytest.fixture
def zip_bytes():
    """
    Factory building an in-memory ZIP archive.

    Returns:
        Callable taking {member_name: size_in_bytes} and returning the archive bytes
    """

    def _make(members: dict[str, int]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_STORED) as zf:
            for name, size in members.items():
                zf.writestr(name, b"\0" * size)
        return buffer.getvalue()

    return _make


@pytest.fixture
def dependency_container(mock_logger, tmp_path, monkeypatch):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    monkeypatch.setenv("BENCH_INSTALL_DOWNLOAD_DIR", str(tmp_path / "downloads"))
    monkeypatch.setenv("BENCH_INSTALL_LOG_PATH", str(tmp_path / "install.log"))
    container = DependencyContainer(Settings())
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
