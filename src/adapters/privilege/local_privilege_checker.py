import ctypes
import logging
import os
import shutil
from typing import Optional

from src.entities.Privilege import PrivilegeStatus
from src.ports.privilege.privilege_port import PrivilegeCheckerPort


class LocalPrivilegeChecker(PrivilegeCheckerPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def check(self) -> PrivilegeStatus:
        if os.name == "nt":
            return self._check_windows()
        return self._check_posix()

    def _check_windows(self) -> PrivilegeStatus:
        try:
            is_admin = bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
        except (AttributeError, OSError) as e:
            self._logger.warning(f"Cannot determine administrator status: {e}")
            return PrivilegeStatus.CANNOT_ELEVATE
        if is_admin:
            return PrivilegeStatus.ALREADY_PRIVILEGED
        # UAC can always be requested from an interactive session
        return PrivilegeStatus.NEEDS_ELEVATION

    def _check_posix(self) -> PrivilegeStatus:
        geteuid = getattr(os, "geteuid", None)
        if geteuid is not None and geteuid() == 0:
            return PrivilegeStatus.ALREADY_PRIVILEGED
        if shutil.which("sudo"):
            return PrivilegeStatus.NEEDS_ELEVATION
        return PrivilegeStatus.CANNOT_ELEVATE
