"""Production recipe fetcher using a shallow git clone from the AUR."""

from pathlib import Path

from resolve_updater.core.errors import FetchError
from resolve_updater.core.recipe.abc import RecipeFetcher
from resolve_updater.core.subprocess import run_subprocess_with_context

AUR_BASE_URL = "https://aur.archlinux.org"


class RealRecipeFetcher(RecipeFetcher):
    """Clones https://aur.archlinux.org/<package>.git with --depth 1."""

    def fetch(self, package_name: str, dest: Path) -> None:
        try:
            run_subprocess_with_context(
                ["git", "clone", "--depth", "1", f"{AUR_BASE_URL}/{package_name}.git", str(dest)],
                operation_context=f"clone AUR recipe for {package_name}",
            )
        except RuntimeError as e:
            raise FetchError(f"Failed to fetch PKGBUILD from AUR\n{e}") from e
