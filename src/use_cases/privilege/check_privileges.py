import logging
from typing import Optional

from src.entities.Privilege import PrivilegeStatus
from src.ports.privilege.privilege_port import PrivilegeCheckerPort


class CheckPrivilegesUseCase:
    def __init__(
        self,
        checker: PrivilegeCheckerPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._checker = checker
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> PrivilegeStatus:
        try:
            status = self._checker.check()
        except Exception as e:
            self._logger.error(f"Privilege check failed: {e}")
            return PrivilegeStatus.CANNOT_ELEVATE
        if status.is_privileged:
            self._logger.info(f"Privileges: {status.describe()}")
        else:
            self._logger.warning(f"Privileges: {status.describe()}")
        return status
