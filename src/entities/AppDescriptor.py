"""
Application descriptor domain entity.
"""

from dataclasses import dataclass
from typing import Any, Optional


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class AppDescriptor:
    """
    One entry of the installation catalog.

    Attributes:
        name: Display label of the application
        package_id: Identifier in the package manager namespace (None if not packaged)
        version: Exact version to pin (None installs the latest)
        fallback_url: Direct download URL used when the package manager cannot help
        silent_args: Command-line flags that make the fallback installer non-interactive
        expected_filename: Filename to store the download under instead of the URL's
    """

    name: str
    package_id: Optional[str] = None
    version: Optional[str] = None
    fallback_url: Optional[str] = None
    silent_args: Optional[str] = None
    expected_filename: Optional[str] = None

    def __post_init__(self) -> None:
        name = _clean(self.name)
        if not name:
            raise ValueError("Application name must be a non-empty string")

        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "name", name)
        for field_name in (
            "package_id",
            "version",
            "fallback_url",
            "silent_args",
            "expected_filename",
        ):
            object.__setattr__(self, field_name, _clean(getattr(self, field_name)))

    @property
    def has_package(self) -> bool:
        return self.package_id is not None

    @property
    def has_fallback(self) -> bool:
        return self.fallback_url is not None

    @property
    def is_actionable(self) -> bool:
        """True when at least one install strategy can be attempted."""
        return self.has_package or self.has_fallback

    def get_details(self) -> dict[str, Any]:
        """
        Get the descriptor as a plain dictionary.

        Returns:
            Dictionary with descriptor information
        """
        return {
            "name": self.name,
            "package_id": self.package_id,
            "version": self.version,
            "fallback_url": self.fallback_url,
            "silent_args": self.silent_args,
            "expected_filename": self.expected_filename,
        }

    def __str__(self) -> str:
        parts = [f"name='{self.name}'"]
        if self.package_id:
            parts.append(f"package_id='{self.package_id}'")
        if self.version:
            parts.append(f"version='{self.version}'")
        if self.fallback_url:
            parts.append(f"fallback_url='{self.fallback_url}'")
        return f"AppDescriptor({', '.join(parts)})"
