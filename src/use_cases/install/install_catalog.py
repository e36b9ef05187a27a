"""
Use case for installing every application of the catalog.
"""

import logging
from typing import Iterable, Optional

from src.entities.InstallResult import InstallStatus, RunSummary
from src.ports.catalog.catalog_port import CatalogPort
from src.ports.package_manager.package_manager_port import PackageManagerPort
from src.use_cases.install.install_application import InstallApplicationUseCase


class InstallCatalogUseCase:
    """Run the installation workflow over the catalog, one entry at a time."""

    def __init__(
        self,
        catalog: CatalogPort,
        package_manager: PackageManagerPort,
        install_application: InstallApplicationUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            catalog: Ordered applications to install
            package_manager: Adapter checked once for availability
            install_application: Per-entry installation use case
            logger: Logger instance to use for logging
        """
        self._catalog = catalog
        self._package_manager = package_manager
        self._install_application = install_application
        self._logger = logger or logging.getLogger(__name__)

    def _check_package_manager(self) -> bool:
        try:
            available = self._package_manager.is_available()
        except Exception as e:
            self._logger.warning(f"Package manager availability check failed: {e}")
            available = False
        if available:
            self._logger.info("Package manager available")
        else:
            self._logger.warning(
                "Package manager not available; only entries with a download URL can be installed"
            )
        return available

    def execute(
        self, only: Optional[Iterable[str]] = None, log_path: Optional[str] = None
    ) -> RunSummary:
        """
        Install the catalog entries in order.

        Args:
            only: Restrict the run to these application names
            log_path: Log file location reported in the summary

        Returns:
            RunSummary with one result per processed entry

        Raises:
            CatalogError: If a requested name is not in the catalog
        """
        catalog = self._catalog.select(only) if only else self._catalog
        summary = RunSummary(
            package_manager_available=self._check_package_manager(),
            log_path=log_path,
        )

        for app in catalog.descriptors():
            summary.add(
                self._install_application.execute(
                    app, summary.package_manager_available
                )
            )

        self._logger.info(
            f"Finished: {summary.count(InstallStatus.SUCCESS)} installed, "
            f"{summary.count(InstallStatus.ALREADY_INSTALLED)} already present, "
            f"{summary.count(InstallStatus.FAILURE)} failed"
        )
        if log_path:
            self._logger.info(f"Log file: {log_path}")
        return summary
