"""
Catalog port interface defining the contract for application catalogs.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

from src.entities.AppDescriptor import AppDescriptor


class CatalogPort(ABC):
    """Port interface for the ordered list of applications to install."""

    @abstractmethod
    def descriptors(self) -> Iterator[AppDescriptor]:
        """
        Iterate over the catalog in insertion order.

        Every call returns a fresh iterator over the same sequence.

        Returns:
            Iterator of AppDescriptor entities
        """
        pass

    @abstractmethod
    def select(self, names: Iterable[str]) -> "CatalogPort":
        """
        Restrict the catalog to the given application names.

        Args:
            names: Display names to keep (case-insensitive)

        Returns:
            A catalog holding the matching entries, in catalog order

        Raises:
            CatalogError: If a name is not part of the catalog
        """
        pass

    def names(self) -> list[str]:
        """
        Get the display names in catalog order.

        Returns:
            List of application names
        """
        return [d.name for d in self.descriptors()]
