"""
Dependency injection container for managing application dependencies.
"""

import logging

from src.adapters.catalog.static_catalog import StaticCatalog
from src.adapters.installer.url_installer_adapter import UrlFallbackInstaller
from src.adapters.package_manager.winget_adapter import WingetPackageManager
from src.adapters.privilege.local_privilege_checker import LocalPrivilegeChecker
from src.config.catalog import DEFAULT_CATALOG
from src.config.settings import Settings, settings as default_settings
from src.ports.catalog.catalog_port import CatalogPort
from src.ports.installer.url_installer_port import UrlInstallerPort
from src.ports.package_manager.package_manager_port import PackageManagerPort
from src.ports.privilege.privilege_port import PrivilegeCheckerPort
from src.use_cases.install.install_application import InstallApplicationUseCase
from src.use_cases.install.install_catalog import InstallCatalogUseCase
from src.use_cases.privilege.check_privileges import CheckPrivilegesUseCase
from src.utils.run_log import LOGGER_NAME


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings | None = None):
        self._instances = {}
        self._settings = settings or default_settings
        self._logger = logging.getLogger(LOGGER_NAME)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_catalog(self) -> CatalogPort:
        """
        Get the application catalog.

        Returns:
            CatalogPort implementation
        """
        if "catalog" not in self._instances:
            self._instances["catalog"] = StaticCatalog(DEFAULT_CATALOG, self._logger)
        return self._instances["catalog"]

    def get_package_manager(self) -> PackageManagerPort:
        """
        Get package manager adapter instance.

        Returns:
            PackageManagerPort implementation
        """
        if "package_manager" not in self._instances:
            self._instances["package_manager"] = WingetPackageManager(
                source=self._settings.winget_source,
                executable=self._settings.winget_path,
                logger=self._logger,
            )
        return self._instances["package_manager"]

    def get_url_installer(self) -> UrlInstallerPort:
        """
        Get direct-download installer instance.

        Returns:
            UrlInstallerPort implementation
        """
        if "url_installer" not in self._instances:
            self._instances["url_installer"] = UrlFallbackInstaller(
                download_dir=self._settings.download_dir,
                user_agent=self._settings.user_agent,
                timeout=self._settings.download_timeout,
                keep_downloads=self._settings.keep_downloads,
                logger=self._logger,
            )
        return self._instances["url_installer"]

    def get_privilege_checker(self) -> PrivilegeCheckerPort:
        if "privilege_checker" not in self._instances:
            self._instances["privilege_checker"] = LocalPrivilegeChecker(self._logger)
        return self._instances["privilege_checker"]

    def get_install_application_use_case(self) -> InstallApplicationUseCase:
        """
        Get install application use case with injected dependencies.

        Returns:
            Configured InstallApplicationUseCase
        """
        if "install_application_use_case" not in self._instances:
            self._instances["install_application_use_case"] = (
                InstallApplicationUseCase(
                    self.get_package_manager(),
                    self.get_url_installer(),
                    self._logger,
                )
            )
        return self._instances["install_application_use_case"]

    def get_install_catalog_use_case(self) -> InstallCatalogUseCase:
        """
        Get install catalog use case with injected dependencies.

        Returns:
            Configured InstallCatalogUseCase
        """
        if "install_catalog_use_case" not in self._instances:
            self._instances["install_catalog_use_case"] = InstallCatalogUseCase(
                self.get_catalog(),
                self.get_package_manager(),
                self.get_install_application_use_case(),
                self._logger,
            )
        return self._instances["install_catalog_use_case"]

    def get_check_privileges_use_case(self) -> CheckPrivilegesUseCase:
        if "check_privileges_use_case" not in self._instances:
            self._instances["check_privileges_use_case"] = CheckPrivilegesUseCase(
                self.get_privilege_checker(), self._logger
            )
        return self._instances["check_privileges_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
