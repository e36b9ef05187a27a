"""
Package manager port interface defining the contract for package installs.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PackageManagerPort(ABC):
    """Port interface for system package manager operations."""

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check whether the package manager command-line interface is reachable.

        Returns:
            True if the package manager can be invoked, False otherwise
        """
        pass

    @abstractmethod
    def is_installed(self, package_id: str) -> bool:
        """
        Check whether a package is installed, matching the id exactly.

        Args:
            package_id: Identifier in the package manager namespace

        Returns:
            True only on a successful, non-empty exact match
        """
        pass

    @abstractmethod
    def install(self, package_id: str, version: Optional[str] = None) -> bool:
        """
        Install a package, optionally pinned to an exact version.

        A rejected pinned install is retried once without the version.

        Args:
            package_id: Identifier in the package manager namespace
            version: Exact version to pin, None for the latest

        Returns:
            True if one of the attempts succeeded, False otherwise
        """
        pass
