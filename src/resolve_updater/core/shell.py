"""Lookup of external tools on PATH."""

import shutil
from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for inspecting the user's environment."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of an executable, or None if not on PATH."""
        ...


class RealShell(Shell):
    """Production implementation backed by shutil.which()."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
