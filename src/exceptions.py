"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CatalogError(BaseAppError):
    """Exception raised when the application catalog is invalid."""

    pass


class PackageManagerError(BaseAppError):
    """Exception raised when the package manager cannot be used."""

    pass


class InstallerError(BaseAppError):
    """Exception raised for direct-download installer errors."""

    pass


class DownloadError(InstallerError):
    """Exception raised when an installer artifact cannot be downloaded."""

    pass


class InstallerResolutionError(InstallerError):
    """Exception raised when no installer can be found in a downloaded archive."""

    pass
