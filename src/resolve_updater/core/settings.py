"""Updater settings data structures and loading.

Provides immutable settings loaded from ~/.resolve-updater/config.toml.
The file is optional; every key has a default.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from resolve_updater.core.errors import SettingsError

HOME_ENV_VAR = "RESOLVE_UPDATER_HOME"


@dataclass(frozen=True)
class Edition:
    """One installable flavour of DaVinci Resolve."""

    package_name: str
    product_label: str
    artifact_prefix: str
    launch_command: str

    def artifact_name(self, version: str) -> str:
        """Name of the zip Blackmagic serves for this edition and version."""
        return f"{self.artifact_prefix}_{version}_Linux.zip"


EDITIONS: dict[str, Edition] = {
    "free": Edition(
        package_name="davinci-resolve",
        product_label="DaVinci Resolve",
        artifact_prefix="DaVinci_Resolve",
        launch_command="davinci-resolve",
    ),
    "studio": Edition(
        package_name="davinci-resolve-studio",
        product_label="DaVinci Resolve Studio",
        artifact_prefix="DaVinci_Resolve_Studio",
        launch_command="davinci-resolve",
    ),
}


@dataclass(frozen=True)
class UpdaterSettings:
    """Immutable updater settings.

    Loaded once at CLI entry point and stored in UpdaterContext.
    """

    edition: Edition
    home: Path
    build_dir: Path
    registration_path: Path
    settings_path: Path


def default_home() -> Path:
    """Directory holding registration info, settings and the build dir."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".resolve-updater"


def load_settings(home: Path) -> UpdaterSettings:
    """Load settings from <home>/config.toml, falling back to defaults.

    Raises:
        SettingsError: If the file is not valid TOML or holds invalid values
    """
    settings_path = home / "config.toml"
    data: dict[str, object] = {}
    if settings_path.exists():
        try:
            data = tomllib.loads(settings_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise SettingsError(f"Invalid TOML in {settings_path}: {e}") from e

    edition_key = data.get("edition", "free")
    if not isinstance(edition_key, str) or edition_key not in EDITIONS:
        choices = ", ".join(sorted(EDITIONS))
        raise SettingsError(
            f"Unknown edition {edition_key!r} in {settings_path} (expected one of: {choices})"
        )

    build_dir_value = data.get("build_dir")
    if build_dir_value is None:
        build_dir = home / "build"
    elif isinstance(build_dir_value, str) and build_dir_value:
        build_dir = Path(build_dir_value).expanduser()
    else:
        raise SettingsError(f"'build_dir' in {settings_path} must be a non-empty string")

    return UpdaterSettings(
        edition=EDITIONS[edition_key],
        home=home,
        build_dir=build_dir,
        registration_path=home / "registration.conf",
        settings_path=settings_path,
    )
