"""Tests for settings loading."""

from pathlib import Path

import pytest

from resolve_updater.core.errors import SettingsError
from resolve_updater.core.settings import EDITIONS, HOME_ENV_VAR, default_home, load_settings


def test_defaults_without_settings_file(tmp_path: Path) -> None:
    settings = load_settings(tmp_path)

    assert settings.edition == EDITIONS["free"]
    assert settings.build_dir == tmp_path / "build"
    assert settings.registration_path == tmp_path / "registration.conf"
    assert settings.settings_path == tmp_path / "config.toml"


def test_studio_edition_and_custom_build_dir(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        f'edition = "studio"\nbuild_dir = "{tmp_path / "elsewhere"}"\n', encoding="utf-8"
    )

    settings = load_settings(tmp_path)

    assert settings.edition.package_name == "davinci-resolve-studio"
    assert settings.build_dir == tmp_path / "elsewhere"


def test_unknown_edition_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text('edition = "lite"\n', encoding="utf-8")

    with pytest.raises(SettingsError, match="Unknown edition"):
        load_settings(tmp_path)


def test_non_string_build_dir_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("build_dir = 42\n", encoding="utf-8")

    with pytest.raises(SettingsError, match="build_dir"):
        load_settings(tmp_path)


def test_invalid_toml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("edition = \n", encoding="utf-8")

    with pytest.raises(SettingsError, match="Invalid TOML"):
        load_settings(tmp_path)


def test_home_can_be_overridden_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))

    assert default_home() == tmp_path


def test_default_home_is_under_user_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HOME_ENV_VAR, raising=False)

    assert default_home() == Path.home() / ".resolve-updater"


def test_artifact_names() -> None:
    assert EDITIONS["free"].artifact_name("19.0.1") == "DaVinci_Resolve_19.0.1_Linux.zip"
    assert EDITIONS["studio"].artifact_name("18.6") == "DaVinci_Resolve_Studio_18.6_Linux.zip"
