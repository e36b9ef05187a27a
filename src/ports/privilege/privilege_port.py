from abc import ABC, abstractmethod

from src.entities.Privilege import PrivilegeStatus


class PrivilegeCheckerPort(ABC):
    @abstractmethod
    def check(self) -> PrivilegeStatus:
        """Report whether the process is elevated, or whether it could be."""
        raise NotImplementedError
