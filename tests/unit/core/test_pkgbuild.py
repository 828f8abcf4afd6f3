"""Tests for PKGBUILD field editing."""

from resolve_updater.core.recipe.pkgbuild import (
    find_checksum_token,
    read_field,
    replace_checksum_token,
    set_field,
)

OLD_HASH = "a" * 64
DESKTOP_HASH = "b" * 64
NEW_HASH = "0123456789abcdef" * 4

PKGBUILD = f"""# Maintainer: someone
pkgname=davinci-resolve
_pkgname=resolve
pkgver=18.6.2
pkgrel=3
pkgdesc='Professional A/V post-production software suite from Blackmagic Design'
source=("local://DaVinci_Resolve_${{pkgver}}_Linux.zip"
        "davinci-resolve.desktop")
sha256sums=('{OLD_HASH}'
            '{DESKTOP_HASH}')

package() {{
    echo "pkgver=ignored inside a function"
}}
"""


def test_read_field() -> None:
    assert read_field(PKGBUILD, "pkgver") == "18.6.2"
    assert read_field(PKGBUILD, "pkgrel") == "3"


def test_read_field_strips_quotes() -> None:
    assert read_field("pkgver='19.0'\n", "pkgver") == "19.0"
    assert read_field('pkgver="19.0"\n', "pkgver") == "19.0"


def test_read_field_missing_returns_none() -> None:
    assert read_field(PKGBUILD, "epoch") is None


def test_read_field_does_not_match_prefixed_keys() -> None:
    assert read_field("_pkgver=1\n", "pkgver") is None


def test_set_field_rewrites_only_that_assignment() -> None:
    updated = set_field(PKGBUILD, "pkgver", "19.0.1")

    assert read_field(updated, "pkgver") == "19.0.1"
    assert updated == PKGBUILD.replace("pkgver=18.6.2\n", "pkgver=19.0.1\n")
    # Indented text inside functions is not a top-level assignment.
    assert 'echo "pkgver=ignored inside a function"' in updated


def test_set_field_absent_key_is_noop() -> None:
    assert set_field(PKGBUILD, "epoch", "1") == PKGBUILD


def test_find_checksum_token_returns_first_hash() -> None:
    assert find_checksum_token(PKGBUILD) == OLD_HASH


def test_replace_checksum_token_changes_exactly_one_token() -> None:
    updated = replace_checksum_token(PKGBUILD, NEW_HASH)

    assert updated is not None
    assert updated == PKGBUILD.replace(OLD_HASH, NEW_HASH, 1)
    assert DESKTOP_HASH in updated
    assert OLD_HASH not in updated
    assert len(updated) == len(PKGBUILD)


def test_replace_checksum_token_on_single_line_array() -> None:
    text = f"sha256sums=('{OLD_HASH}' 'SKIP')\n"

    assert replace_checksum_token(text, NEW_HASH) == f"sha256sums=('{NEW_HASH}' 'SKIP')\n"


def test_replace_checksum_token_ignores_hashes_outside_array() -> None:
    text = f"# upstream hash {OLD_HASH}\nsha256sums=('{DESKTOP_HASH}')\n"

    updated = replace_checksum_token(text, NEW_HASH)

    assert updated == f"# upstream hash {OLD_HASH}\nsha256sums=('{NEW_HASH}')\n"


def test_replace_checksum_token_without_hash_returns_none() -> None:
    assert replace_checksum_token("sha256sums=('SKIP'\n            'SKIP')\n", NEW_HASH) is None


def test_replace_checksum_token_without_array_returns_none() -> None:
    assert replace_checksum_token("pkgver=1\n", NEW_HASH) is None
    assert find_checksum_token("pkgver=1\n") is None


def test_longer_hex_runs_are_not_treated_as_sha256() -> None:
    text = f"sha256sums=('{'c' * 128}')\n"

    assert find_checksum_token(text) is None
