"""Preflight checks for the external toolchain."""

import logging

from resolve_updater.core.context import UpdaterContext
from resolve_updater.core.errors import DependencyMissingError

logger = logging.getLogger(__name__)

REQUIRED_TOOLS = ("pacman", "makepkg", "git")

# Packages providing each tool, for the hint shown when one is missing.
TOOL_PACKAGES = {
    "pacman": "pacman",
    "makepkg": "base-devel",
    "git": "git",
    "updpkgsums": "pacman-contrib",
}


def install_hint(tool: str) -> str:
    """How to get a missing tool on Arch Linux."""
    return f"Install it with: sudo pacman -S --needed {TOOL_PACKAGES.get(tool, tool)}"


def ensure_required_tools(ctx: UpdaterContext) -> None:
    """Fail unless every required external tool is on PATH.

    Every missing tool is reported before failing, not just the first one.

    Raises:
        DependencyMissingError: If any required tool is missing
    """
    missing = [tool for tool in REQUIRED_TOOLS if ctx.shell.get_installed_tool_path(tool) is None]
    if missing:
        raise DependencyMissingError(missing, hints=[install_hint(tool) for tool in missing])

    if ctx.shell.get_installed_tool_path("updpkgsums") is None:
        logger.debug("updpkgsums not found; checksums will be patched directly")
