"""Production package database implementation using pacman."""

import logging
import subprocess

from resolve_updater.core.package_db.abc import PackageDatabase

logger = logging.getLogger(__name__)


def parse_pacman_query(output: str) -> str | None:
    """Extract the version token from `pacman -Q` output.

    >>> parse_pacman_query("davinci-resolve 18.6.2-1\\n")
    '18.6.2'
    """
    parts = output.split()
    if len(parts) < 2:
        return None
    return parts[1].split("-", 1)[0] or None


class RealPackageDatabase(PackageDatabase):
    """Queries the pacman database via `pacman -Q`."""

    def query_version(self, package_name: str) -> str | None:
        try:
            result = subprocess.run(
                ["pacman", "-Q", package_name],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("pacman not found while querying %s", package_name)
            return None

        if result.returncode != 0:
            logger.debug("pacman -Q %s exited with %d", package_name, result.returncode)
            return None
        return parse_pacman_query(result.stdout)
