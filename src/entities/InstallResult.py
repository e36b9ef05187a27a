"""
Installation outcome domain entities.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class InstallStatus(str, Enum):
    SUCCESS = "success"
    ALREADY_INSTALLED = "already_installed"
    FAILURE = "failure"


class InstallMethod(str, Enum):
    PACKAGE_MANAGER = "package_manager"
    URL_FALLBACK = "url_fallback"
    NONE = "none"


@dataclass(frozen=True)
class InstallResult:
    """Outcome of resolving a single catalog entry."""

    name: str
    status: InstallStatus
    method: InstallMethod = InstallMethod.NONE
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status in (InstallStatus.SUCCESS, InstallStatus.ALREADY_INSTALLED)

    def status_line(self) -> str:
        """One-line, human-readable status for console and log."""
        if self.status is InstallStatus.ALREADY_INSTALLED:
            return f"{self.name}: already present"
        if self.status is InstallStatus.SUCCESS:
            via = "package manager" if self.method is InstallMethod.PACKAGE_MANAGER else "direct download"
            return f"{self.name}: installed via {via}"
        suffix = f" ({self.message})" if self.message else ""
        return f"{self.name}: failed{suffix}"


@dataclass
class RunSummary:
    """Aggregated outcome of a whole catalog run."""

    results: list[InstallResult] = field(default_factory=list)
    package_manager_available: bool = False
    log_path: Optional[str] = None

    def add(self, result: InstallResult) -> None:
        self.results.append(result)

    def count(self, status: InstallStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def all_succeeded(self) -> bool:
        return all(r.succeeded for r in self.results)

    @property
    def failed_names(self) -> list[str]:
        return [r.name for r in self.results if not r.succeeded]

    def outcomes(self) -> list[tuple[str, InstallStatus]]:
        """Ordered (name, status) pairs, convenient for comparing runs."""
        return [(r.name, r.status) for r in self.results]

    def __str__(self) -> str:
        return (
            f"RunSummary(installed={self.count(InstallStatus.SUCCESS)}, "
            f"already_present={self.count(InstallStatus.ALREADY_INSTALLED)}, "
            f"failed={self.count(InstallStatus.FAILURE)})"
        )
