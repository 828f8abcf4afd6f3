"""Build recipe source interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class RecipeFetcher(ABC):
    """Abstract interface for fetching a package's AUR recipe files."""

    @abstractmethod
    def fetch(self, package_name: str, dest: Path) -> None:
        """Check out the recipe repository for package_name into dest.

        Args:
            package_name: AUR package name, e.g. "davinci-resolve"
            dest: Directory to create; must not exist yet

        Raises:
            FetchError: If the recipe could not be fetched
        """
        ...
