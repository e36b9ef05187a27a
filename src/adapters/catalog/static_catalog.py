"""
Static, in-memory catalog adapter.
"""

import logging
from typing import Iterable, Iterator, Optional

from typing_extensions import override

from src.entities.AppDescriptor import AppDescriptor
from src.exceptions import CatalogError
from src.ports.catalog.catalog_port import CatalogPort


class StaticCatalog(CatalogPort):
    """Read-only catalog backed by an ordered tuple of descriptors."""

    def __init__(
        self,
        entries: Iterable[AppDescriptor],
        logger: Optional[logging.Logger] = None,
        strict: bool = True,
    ):
        """
        Initialize the catalog and validate its entries.

        Args:
            entries: Descriptors in installation order
            logger: Logger instance to use for logging
            strict: Reject entries that have neither a package id nor a fallback URL

        Raises:
            CatalogError: If an entry is invalid
        """
        self._logger = logger or logging.getLogger(__name__)
        self._strict = strict
        self._entries: tuple[AppDescriptor, ...] = self._validate(entries)

    def _validate(self, entries: Iterable[AppDescriptor]) -> tuple[AppDescriptor, ...]:
        validated: list[AppDescriptor] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, AppDescriptor):
                raise CatalogError(
                    f"Catalog entry #{index} is not an AppDescriptor: {entry!r}"
                )
            if not entry.is_actionable:
                if self._strict:
                    raise CatalogError(
                        f"Catalog entry #{index} ({entry.name}) has neither a package id nor a fallback URL"
                    )
                self._logger.warning(
                    f"Catalog entry {entry.name} cannot be installed: no package id or fallback URL"
                )
            validated.append(entry)
        return tuple(validated)

    @override
    def descriptors(self) -> Iterator[AppDescriptor]:
        return iter(self._entries)

    @override
    def select(self, names: Iterable[str]) -> "StaticCatalog":
        wanted = {n.strip().lower() for n in names if n and n.strip()}
        if not wanted:
            raise CatalogError("No application names given")
        known = {d.name.lower() for d in self._entries}
        unknown = sorted(wanted - known)
        if unknown:
            raise CatalogError(f"Unknown application(s): {', '.join(unknown)}")
        return StaticCatalog(
            [d for d in self._entries if d.name.lower() in wanted],
            logger=self._logger,
            strict=self._strict,
        )

    def __len__(self) -> int:
        return len(self._entries)
