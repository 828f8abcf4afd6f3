"""Bring the AUR recipe in line with the downloaded release zip.

The AUR PKGBUILD usually trails Blackmagic's releases. Rather than waiting
for the maintainer, the recipe is fetched fresh on every run and its pkgver,
pkgrel and zip checksum are rewritten to match what was downloaded.
"""

import hashlib
import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from resolve_updater.core.context import UpdaterContext
from resolve_updater.core.errors import FetchError, MissingArtifactError
from resolve_updater.core.recipe.pkgbuild import (
    find_checksum_token,
    read_field,
    replace_checksum_token,
    set_field,
)

logger = logging.getLogger(__name__)

RECIPE_FILENAME = "PKGBUILD"
ARTIFACT_PATTERN = "*.zip"
CLONE_DIRNAME = "_aur_pkg"
INITIAL_PKGREL = "1"

_HASH_CHUNK_SIZE = 1024 * 1024


class ChecksumStatus(Enum):
    """How the recipe's zip checksum was brought up to date."""

    HELPER = "helper"  # updpkgsums regenerated every checksum
    REPLACED = "replaced"  # first hash in sha256sums swapped in place
    UNRESOLVED = "unresolved"  # no hash token found; recipe needs manual fixing


@dataclass(frozen=True)
class RecipeSyncResult:
    """Outcome of sync_recipe()."""

    recipe_path: Path
    previous_version: str | None
    version_rewritten: bool
    artifact_sha256: str
    checksum_status: ChecksumStatus


def sha256_of(path: Path) -> str:
    """Hex SHA-256 digest of a file, read in chunks."""
    digest = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def clean_build_dir(build_dir: Path) -> None:
    """Remove everything in build_dir except downloaded zips."""
    for entry in build_dir.iterdir():
        if entry.is_file() and entry.match(ARTIFACT_PATTERN):
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def fetch_recipe(ctx: UpdaterContext, build_dir: Path) -> Path:
    """Check out the AUR recipe and copy its files into build_dir.

    Only top-level, non-hidden regular files are copied, so the clone's .git
    directory and .SRCINFO stay behind. The clone itself is removed.

    Returns:
        Path to the PKGBUILD in build_dir

    Raises:
        FetchError: If cloning fails or no PKGBUILD results
    """
    package_name = ctx.settings.edition.package_name
    clone_dir = build_dir / CLONE_DIRNAME
    try:
        ctx.recipe_fetcher.fetch(package_name, clone_dir)
        if clone_dir.is_dir():
            for entry in clone_dir.iterdir():
                if entry.is_file() and not entry.name.startswith("."):
                    shutil.copy2(entry, build_dir / entry.name)
    finally:
        if clone_dir.exists():
            shutil.rmtree(clone_dir)

    recipe_path = build_dir / RECIPE_FILENAME
    if not recipe_path.is_file():
        raise FetchError("Failed to fetch PKGBUILD from AUR")
    return recipe_path


def align_recipe_version(ctx: UpdaterContext, recipe_path: Path, target_version: str) -> str | None:
    """Rewrite pkgver (and reset pkgrel) when the recipe targets another version.

    Returns:
        The pkgver the recipe declared before any rewrite

    Raises:
        FetchError: If the recipe has no top-level pkgver line to rewrite
    """
    text = recipe_path.read_text(encoding="utf-8")
    recipe_version = read_field(text, "pkgver")
    if recipe_version == target_version:
        return recipe_version

    ctx.feedback.warning(f"AUR PKGBUILD is for {recipe_version}, but latest is {target_version}")
    ctx.feedback.warning(f"Updating pkgver in PKGBUILD to {target_version}")
    text = set_field(text, "pkgver", target_version)
    if read_field(text, "pkgver") != target_version:
        raise FetchError(f"No top-level pkgver assignment to update in {recipe_path}")
    text = set_field(text, "pkgrel", INITIAL_PKGREL)
    recipe_path.write_text(text, encoding="utf-8")
    logger.debug("Rewrote pkgver %s -> %s in %s", recipe_version, target_version, recipe_path)
    return recipe_version


def update_recipe_checksum(ctx: UpdaterContext, recipe_path: Path, new_hash: str) -> ChecksumStatus:
    """Make the recipe's checksum match the downloaded zip.

    Prefers updpkgsums; when it is unavailable or fails, the first hash of
    the sha256sums array is replaced directly. The direct replacement assumes
    the zip is the first source entry.
    """
    if ctx.checksum_helper.is_available():
        try:
            ctx.checksum_helper.refresh(recipe_path.parent)
        except RuntimeError as e:
            logger.debug("updpkgsums failed: %s", e)
            ctx.feedback.warning("updpkgsums failed, updating sha256sums directly")
        else:
            ctx.feedback.success("Updated sha256sums via updpkgsums")
            return ChecksumStatus.HELPER

    text = recipe_path.read_text(encoding="utf-8")
    old_hash = find_checksum_token(text)
    updated = replace_checksum_token(text, new_hash)
    if updated is None:
        ctx.feedback.warning(
            "Could not auto-update sha256sum. You may need to run 'updpkgsums' manually."
        )
        return ChecksumStatus.UNRESOLVED

    recipe_path.write_text(updated, encoding="utf-8")
    logger.debug("Replaced sha256sum %s with %s", old_hash, new_hash)
    ctx.feedback.success(f"Updated zip sha256sum: {new_hash[:16]}...")
    return ChecksumStatus.REPLACED


def sync_recipe(ctx: UpdaterContext, target_version: str, artifact_path: Path) -> RecipeSyncResult:
    """Prepare the build directory so makepkg builds target_version.

    Steps: clear stale recipe files (keeping zips), fetch a fresh recipe,
    align pkgver/pkgrel, confirm the zip is present, update its checksum.

    Raises:
        FetchError: If the recipe could not be fetched or has no pkgver to align
        MissingArtifactError: If the expected zip is not in the build dir
    """
    build_dir = ctx.settings.build_dir

    ctx.feedback.info("Fetching latest PKGBUILD from AUR...")
    clean_build_dir(build_dir)
    recipe_path = fetch_recipe(ctx, build_dir)

    previous_version = align_recipe_version(ctx, recipe_path, target_version)

    if not artifact_path.is_file():
        raise MissingArtifactError(f"Zip file not found: {artifact_path}")

    ctx.feedback.info("Generating sha256sums...")
    new_hash = sha256_of(artifact_path)
    status = update_recipe_checksum(ctx, recipe_path, new_hash)

    return RecipeSyncResult(
        recipe_path=recipe_path,
        previous_version=previous_version,
        version_rewritten=previous_version != target_version,
        artifact_sha256=new_hash,
        checksum_status=status,
    )
