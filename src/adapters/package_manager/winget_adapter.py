"""
winget adapter implementation for package manager operations.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from typing_extensions import override

from src.exceptions import PackageManagerError
from src.ports.package_manager.package_manager_port import PackageManagerPort

NON_INTERACTIVE_FLAGS = [
    "--silent",
    "--accept-package-agreements",
    "--accept-source-agreements",
    "--disable-interactivity",
]

# UnicodeDecodeError is a ValueError
_RUN_ERRORS = (PackageManagerError, OSError, subprocess.SubprocessError, ValueError)

ELLIPSES = ("\u2026", "...")


def id_matches(token: str, package_id: str) -> bool:
    """Exact, case-insensitive id match; accepts ids the table cut short with an ellipsis."""
    token = token.lower()
    wanted = package_id.lower()
    if token == wanted:
        return True
    for ellipsis in ELLIPSES:
        if token.endswith(ellipsis):
            prefix = token[: -len(ellipsis)]
            return bool(prefix) and wanted.startswith(prefix)
    return False


class WingetPackageManager(PackageManagerPort):
    """Windows Package Manager (winget) implementation of the package manager port."""

    def __init__(
        self,
        source: str = "winget",
        executable: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            source: Trusted source every query and install is scoped to
            executable: Explicit path to winget (discovered when None)
            logger: Logger instance to use for logging
        """
        self.source = source
        self._explicit_executable = executable
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._available: Optional[bool] = None

    def _find_executable(self) -> Optional[str]:
        """Locate winget on PATH, then in the per-user WindowsApps folder."""
        if self._explicit_executable:
            return self._explicit_executable
        found = shutil.which("winget")
        if found:
            return found
        local_appdata = os.environ.get("LOCALAPPDATA")
        if local_appdata:
            candidate = Path(local_appdata) / "Microsoft" / "WindowsApps" / "winget.exe"
            if candidate.exists():
                return str(candidate)
        return None

    def _executable(self) -> str:
        exe = self._find_executable()
        if not exe:
            raise PackageManagerError("winget executable not found")
        return exe

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        cmd = [self._executable(), *args]
        self._logger.debug(f"Running: {' '.join(cmd)}")
        return subprocess.run(
            cmd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )

    @override
    def is_available(self) -> bool:
        if self._available is None:
            try:
                result = self._run(["--version"])
                self._available = result.returncode == 0
            except _RUN_ERRORS as e:
                self._logger.debug(f"winget availability check failed: {e}")
                self._available = False
        return self._available

    @override
    def is_installed(self, package_id: str) -> bool:
        args = [
            "list",
            "--id",
            package_id,
            "--exact",
            "--source",
            self.source,
            "--accept-source-agreements",
            "--disable-interactivity",
        ]
        try:
            result = self._run(args)
        except _RUN_ERRORS as e:
            self._logger.warning(f"Could not query install state of {package_id}: {e}")
            return False

        if result.returncode != 0:
            return False
        for line in (result.stdout or "").splitlines():
            if any(id_matches(token, package_id) for token in line.split()):
                return True
        return False

    def _install_args(self, package_id: str, version: Optional[str]) -> list[str]:
        args = [
            "install",
            "--id",
            package_id,
            "--exact",
            "--source",
            self.source,
            *NON_INTERACTIVE_FLAGS,
        ]
        if version:
            args.extend(["--version", version])
        return args

    def _attempt_install(self, package_id: str, version: Optional[str]) -> bool:
        label = f"{package_id} {version}" if version else f"{package_id} (latest)"
        try:
            result = self._run(self._install_args(package_id, version))
        except _RUN_ERRORS as e:
            self._logger.warning(f"winget install of {label} could not run: {e}")
            return False

        if result.returncode == 0:
            self._logger.info(f"winget installed {label}")
            return True
        self._logger.warning(
            f"winget install of {label} failed with exit code {result.returncode}"
        )
        return False

    @override
    def install(self, package_id: str, version: Optional[str] = None) -> bool:
        if self._attempt_install(package_id, version):
            return True
        if not version:
            return False
        # Pinned version rejected: one unpinned retry, never a loop.
        self._logger.info(f"Retrying {package_id} without version pin")
        return self._attempt_install(package_id, None)
