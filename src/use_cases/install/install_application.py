"""
Use case for installing a single catalog entry.
"""

import logging
from typing import Optional

from src.entities.AppDescriptor import AppDescriptor
from src.entities.InstallResult import InstallMethod, InstallResult, InstallStatus
from src.ports.installer.url_installer_port import UrlInstallerPort
from src.ports.package_manager.package_manager_port import PackageManagerPort


class InstallApplicationUseCase:
    """Resolve one application: package manager first, direct download second."""

    def __init__(
        self,
        package_manager: PackageManagerPort,
        url_installer: UrlInstallerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            package_manager: Adapter for package manager operations
            url_installer: Adapter for direct-download installs
            logger: Logger instance to use for logging
        """
        self._package_manager = package_manager
        self._url_installer = url_installer
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, app: AppDescriptor, package_manager_available: bool
    ) -> InstallResult:
        """
        Install an application unless it is already present.

        Never raises: every failure of either strategy is logged and turned
        into a FAILURE result.

        Args:
            app: Descriptor of the application to install
            package_manager_available: Result of the one-time availability check

        Returns:
            InstallResult describing the outcome
        """
        self._logger.info(f"Processing {app.name}")
        use_package_manager = package_manager_available and app.has_package

        if use_package_manager and self._already_installed(app):
            result = InstallResult(
                app.name, InstallStatus.ALREADY_INSTALLED, InstallMethod.PACKAGE_MANAGER
            )
            self._logger.info(result.status_line())
            return result

        if use_package_manager and self._install_with_package_manager(app):
            return self._success(app, InstallMethod.PACKAGE_MANAGER)

        if app.has_fallback and self._install_from_url(app):
            return self._success(app, InstallMethod.URL_FALLBACK)

        result = InstallResult(
            app.name,
            InstallStatus.FAILURE,
            message=self._reason(app, use_package_manager),
        )
        self._logger.error(result.status_line())
        return result

    def _already_installed(self, app: AppDescriptor) -> bool:
        try:
            return self._package_manager.is_installed(app.package_id)
        except Exception as e:
            self._logger.warning(f"Install check for {app.name} failed: {e}")
            return False

    def _install_with_package_manager(self, app: AppDescriptor) -> bool:
        try:
            return self._package_manager.install(app.package_id, app.version)
        except Exception as e:
            self._logger.warning(f"Package manager install of {app.name} failed: {e}")
            return False

    def _install_from_url(self, app: AppDescriptor) -> bool:
        try:
            return self._url_installer.install_from_url(
                app.fallback_url, app.silent_args, app.expected_filename
            )
        except Exception as e:
            self._logger.warning(f"Direct download install of {app.name} failed: {e}")
            return False

    def _success(self, app: AppDescriptor, method: InstallMethod) -> InstallResult:
        result = InstallResult(app.name, InstallStatus.SUCCESS, method)
        self._logger.info(result.status_line())
        return result

    @staticmethod
    def _reason(app: AppDescriptor, tried_package_manager: bool) -> str:
        if not app.is_actionable:
            return "no package id or download URL"
        if app.has_fallback:
            return "direct download install failed"
        if tried_package_manager:
            return "package manager install failed"
        return "package manager unavailable and no download URL"
