"""makepkg toolchain interfaces."""

from abc import ABC, abstractmethod
from pathlib import Path


class Builder(ABC):
    """Abstract interface for building a package from a recipe directory."""

    @abstractmethod
    def build(self, build_dir: Path, *, install: bool) -> None:
        """Build the package in build_dir, answering prompts automatically.

        Args:
            build_dir: Directory holding PKGBUILD and its sources
            install: Install the result (and its dependencies) when True;
                only produce the package file when False

        Raises:
            BuildError: If the build tool exits non-zero
        """
        ...


class ChecksumHelper(ABC):
    """Abstract interface for regenerating a recipe's checksum arrays."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the helper can be run on this system."""
        ...

    @abstractmethod
    def refresh(self, build_dir: Path) -> None:
        """Recompute every checksum in build_dir/PKGBUILD from local sources.

        Raises:
            RuntimeError: If the helper fails
        """
        ...
