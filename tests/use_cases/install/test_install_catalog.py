"""
Tests for the InstallCatalogUseCase.
"""

from unittest.mock import MagicMock

import pytest

from src.adapters.catalog.static_catalog import StaticCatalog
from src.entities.AppDescriptor import AppDescriptor
from src.entities.InstallResult import InstallStatus
from src.exceptions import CatalogError, DownloadError
from src.ports.installer.url_installer_port import UrlInstallerPort
from src.ports.package_manager.package_manager_port import PackageManagerPort
from src.use_cases.install.install_application import InstallApplicationUseCase
from src.use_cases.install.install_catalog import InstallCatalogUseCase


@pytest.fixture
def package_manager():
    pm = MagicMock(spec=PackageManagerPort)
    pm.is_available.return_value = True
    pm.is_installed.return_value = False
    pm.install.return_value = True
    return pm


@pytest.fixture
def url_installer():
    installer = MagicMock(spec=UrlInstallerPort)
    installer.install_from_url.return_value = True
    return installer


def _use_case(apps, package_manager, url_installer, logger):
    return InstallCatalogUseCase(
        StaticCatalog(apps, logger),
        package_manager,
        InstallApplicationUseCase(package_manager, url_installer, logger),
        logger,
    )


class TestInstallCatalogUseCase:
    """Test cases for the InstallCatalogUseCase."""

    def test_installs_every_entry_in_order(self, sample_apps, package_manager, url_installer, mock_logger):
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute()

        assert [r.name for r in summary.results] == ["GPU-Z", "Afterburner", "Superposition"]
        assert summary.all_succeeded
        assert summary.package_manager_available
        package_manager.is_available.assert_called_once()

    def test_already_installed_entries_issue_no_installs(self, package_manager, url_installer, mock_logger):
        apps = [
            AppDescriptor(name="GPU-Z", package_id="TechPowerUp.GPU-Z"),
            AppDescriptor(name="CPU-Z", package_id="CPUID.CPU-Z", version="2.10"),
        ]
        package_manager.is_installed.return_value = True
        use_case = _use_case(apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute()

        assert summary.count(InstallStatus.ALREADY_INSTALLED) == 2
        package_manager.install.assert_not_called()
        url_installer.install_from_url.assert_not_called()

    def test_transport_error_does_not_stop_the_run(self, package_manager, url_installer, mock_logger):
        apps = [
            AppDescriptor(name="First", fallback_url="https://example.com/first.exe"),
            AppDescriptor(name="Second", fallback_url="https://example.com/second.exe"),
            AppDescriptor(name="Third", package_id="Vendor.Third"),
        ]
        url_installer.install_from_url.side_effect = [DownloadError("offline"), True]
        use_case = _use_case(apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute()

        assert summary.outcomes() == [
            ("First", InstallStatus.FAILURE),
            ("Second", InstallStatus.SUCCESS),
            ("Third", InstallStatus.SUCCESS),
        ]
        assert url_installer.install_from_url.call_count == 2
        package_manager.install.assert_called_once_with("Vendor.Third", None)

    def test_package_manager_error_does_not_stop_the_run(self, package_manager, url_installer, mock_logger):
        apps = [
            AppDescriptor(name="First", package_id="Vendor.First"),
            AppDescriptor(name="Second", package_id="Vendor.Second"),
        ]
        package_manager.install.side_effect = [RuntimeError("winget crashed"), True]
        use_case = _use_case(apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute()

        assert summary.failed_names == ["First"]
        assert package_manager.install.call_count == 2

    def test_unavailable_package_manager(self, sample_apps, package_manager, url_installer, mock_logger):
        package_manager.is_available.return_value = False
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute()

        assert not summary.package_manager_available
        assert summary.outcomes() == [
            ("GPU-Z", InstallStatus.FAILURE),
            ("Afterburner", InstallStatus.SUCCESS),
            ("Superposition", InstallStatus.SUCCESS),
        ]
        package_manager.install.assert_not_called()
        mock_logger.warning.assert_any_call(
            "Package manager not available; only entries with a download URL can be installed"
        )

    def test_availability_check_error_means_unavailable(self, sample_apps, package_manager, url_installer, mock_logger):
        package_manager.is_available.side_effect = OSError("no such file")
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute()

        assert not summary.package_manager_available
        package_manager.is_installed.assert_not_called()

    def test_only_restricts_the_run(self, sample_apps, package_manager, url_installer, mock_logger):
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute(only=["superposition"])

        assert [r.name for r in summary.results] == ["Superposition"]
        package_manager.install.assert_not_called()

    def test_only_with_unknown_name(self, sample_apps, package_manager, url_installer, mock_logger):
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        with pytest.raises(CatalogError):
            use_case.execute(only=["Nope"])

        package_manager.is_available.assert_not_called()

    def test_repeated_runs_are_identical(self, sample_apps, package_manager, url_installer, mock_logger):
        package_manager.is_installed.side_effect = lambda pid: pid == "TechPowerUp.GPU-Z"
        package_manager.install.return_value = False
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        first = use_case.execute()
        second = use_case.execute()

        assert first.outcomes() == second.outcomes()
        assert first.outcomes() == [
            ("GPU-Z", InstallStatus.ALREADY_INSTALLED),
            ("Afterburner", InstallStatus.SUCCESS),
            ("Superposition", InstallStatus.SUCCESS),
        ]

    def test_summary_notice(self, sample_apps, package_manager, url_installer, mock_logger):
        use_case = _use_case(sample_apps, package_manager, url_installer, mock_logger)

        summary = use_case.execute(log_path="/var/log/bench.log")

        assert summary.log_path == "/var/log/bench.log"
        mock_logger.info.assert_any_call("Finished: 3 installed, 0 already present, 0 failed")
        mock_logger.info.assert_any_call("Log file: /var/log/bench.log")
