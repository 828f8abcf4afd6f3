"""Tests for installed and latest version lookup."""

import pytest

from resolve_updater.core.errors import NetworkError
from resolve_updater.core.vendor.types import VersionDescriptor
from resolve_updater.core.versions import (
    NOT_INSTALLED,
    get_installed_version,
    get_latest_version,
    parse_latest_version_document,
)
from tests.fakes.package_db import FakePackageDatabase
from tests.fakes.vendor import FakeVendorApi, latest_version_document


def test_display_version_omits_zero_release() -> None:
    assert VersionDescriptor(18, 6, 0, "id").display_version == "18.6"


def test_display_version_includes_nonzero_release() -> None:
    assert VersionDescriptor(19, 0, 1, "id").display_version == "19.0.1"


def test_installed_version_from_package_db() -> None:
    db = FakePackageDatabase({"davinci-resolve": "18.6.2"})

    assert get_installed_version(db, "davinci-resolve") == "18.6.2"
    assert db.queries == ["davinci-resolve"]


def test_installed_version_sentinel_when_absent() -> None:
    assert get_installed_version(FakePackageDatabase(), "davinci-resolve") == NOT_INSTALLED
    assert NOT_INSTALLED == "none"


def test_parse_latest_version_document() -> None:
    descriptor = parse_latest_version_document(latest_version_document(19, 0, 1, "dl-42"))

    assert descriptor == VersionDescriptor(major=19, minor=0, release=1, download_id="dl-42")


def test_parse_accepts_numeric_strings() -> None:
    document = '{"linux": {"major": "18", "minor": "6", "releaseNum": "0", "downloadId": "x"}}'

    assert parse_latest_version_document(document).display_version == "18.6"


@pytest.mark.parametrize(
    "document",
    [
        "",
        "   \n",
        '{"error": "product not found"}',
        "not json at all",
        '{"mac": {"major": 18}}',
        '{"linux": {"major": 18, "minor": 6}}',
        '{"linux": {"major": "eighteen", "minor": 6, "releaseNum": 0, "downloadId": "x"}}',
        '{"linux": null}',
    ],
)
def test_parse_rejects_unusable_documents(document: str) -> None:
    with pytest.raises(NetworkError):
        parse_latest_version_document(document)


def test_get_latest_version_queries_linux_endpoint() -> None:
    vendor = FakeVendorApi(latest_document=latest_version_document(18, 6, 0))

    descriptor = get_latest_version(vendor, "davinci-resolve-studio")

    assert descriptor.display_version == "18.6"
    assert vendor.latest_calls == [("davinci-resolve-studio", "linux")]


def test_get_latest_version_empty_response_is_network_error() -> None:
    with pytest.raises(NetworkError, match="latest version"):
        get_latest_version(FakeVendorApi(latest_document=""), "davinci-resolve")
