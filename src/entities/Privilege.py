"""
Privilege precondition domain entity.
"""

from enum import Enum


class PrivilegeStatus(str, Enum):
    """Result of the one-time privilege check performed at startup."""

    ALREADY_PRIVILEGED = "already_privileged"
    NEEDS_ELEVATION = "needs_elevation"
    CANNOT_ELEVATE = "cannot_elevate"

    @property
    def is_privileged(self) -> bool:
        return self is PrivilegeStatus.ALREADY_PRIVILEGED

    def describe(self) -> str:
        if self is PrivilegeStatus.ALREADY_PRIVILEGED:
            return "running with administrative privileges"
        if self is PrivilegeStatus.NEEDS_ELEVATION:
            return "not elevated; re-run as administrator for machine-wide installs"
        return "not elevated and no elevation mechanism is available"
