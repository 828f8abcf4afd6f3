"""Installed and latest version lookup."""

import json
import logging

from resolve_updater.core.errors import NetworkError
from resolve_updater.core.package_db.abc import PackageDatabase
from resolve_updater.core.vendor.abc import VendorApi
from resolve_updater.core.vendor.types import VersionDescriptor

logger = logging.getLogger(__name__)

NOT_INSTALLED = "none"
PLATFORM = "linux"


def get_installed_version(package_db: PackageDatabase, package_name: str) -> str:
    """Installed version of package_name, or NOT_INSTALLED.

    Never raises: a failed query is treated like an absent package.
    """
    version = package_db.query_version(package_name)
    if version is None:
        return NOT_INSTALLED
    return version


def parse_latest_version_document(document: str) -> VersionDescriptor:
    """Parse the support API's latest-stable-version response.

    Expected shape::

        {"linux": {"major": 19, "minor": 0, "releaseNum": 1, "downloadId": "..."}}

    Raises:
        NetworkError: If the body is empty, reports an error, or lacks fields
    """
    if not document.strip() or "error" in document:
        raise NetworkError("Failed to query Blackmagic API for latest version")

    try:
        data = json.loads(document)
        platform = data[PLATFORM]
        return VersionDescriptor(
            major=int(platform["major"]),
            minor=int(platform["minor"]),
            release=int(platform["releaseNum"]),
            download_id=str(platform["downloadId"]),
        )
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise NetworkError(f"Unexpected response from Blackmagic API: {e}") from e


def get_latest_version(vendor: VendorApi, package_name: str) -> VersionDescriptor:
    """Ask Blackmagic for the newest Linux release of package_name."""
    document = vendor.get_latest_version_document(package_name, PLATFORM)
    descriptor = parse_latest_version_document(document)
    logger.debug(
        "Latest %s is %s (download id %s)",
        package_name,
        descriptor.display_version,
        descriptor.download_id,
    )
    return descriptor
