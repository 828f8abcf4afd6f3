"""Local package database interface."""

from abc import ABC, abstractmethod


class PackageDatabase(ABC):
    """Abstract interface for querying installed packages."""

    @abstractmethod
    def query_version(self, package_name: str) -> str | None:
        """Return the installed upstream version (without pkgrel), or None.

        None means the package is not installed or the database could not be
        queried; callers treat both the same way.
        """
        ...
