"""Registration handshake and artifact download."""

import logging
from pathlib import Path

from resolve_updater.cli.output import format_size
from resolve_updater.core.context import UpdaterContext
from resolve_updater.core.errors import DownloadError, RegistrationError
from resolve_updater.core.registration import RegistrationProfile
from resolve_updater.core.vendor.abc import VendorApi

logger = logging.getLogger(__name__)

# Substrings Blackmagic puts in rejected registration responses.
REJECTION_MARKERS = ("Error", "Bad Request")


def request_download_url(
    vendor: VendorApi,
    download_id: str,
    profile: RegistrationProfile,
    product_label: str,
) -> str:
    """Exchange registration info for a signed download URL.

    Raises:
        RegistrationError: If the response is empty or reports a rejection
    """
    payload = profile.to_registration_payload(product_label)
    response = vendor.request_download_url(download_id, payload).strip()
    if not response or any(marker in response for marker in REJECTION_MARKERS):
        raise RegistrationError(f"Failed to get download URL: {response}")
    return response


def download_artifact(
    ctx: UpdaterContext,
    version: str,
    download_id: str,
    profile: RegistrationProfile,
    *,
    force: bool,
) -> Path:
    """Make sure the release zip for version is in the build directory.

    An existing zip is reused unless force is set; in that case nothing is
    sent to Blackmagic at all.

    Returns:
        Path to the zip

    Raises:
        RegistrationError: If no download URL was issued
        DownloadError: If the zip is missing after the transfer
    """
    edition = ctx.settings.edition
    zip_name = edition.artifact_name(version)
    zip_path = ctx.settings.build_dir / zip_name

    if zip_path.exists() and not force:
        ctx.feedback.success(f"Zip already downloaded: {zip_name}")
        return zip_path

    ctx.feedback.info("Requesting download URL from Blackmagic...")
    url = request_download_url(ctx.vendor, download_id, profile, edition.product_label)
    logger.debug("Download URL issued for %s", zip_name)

    ctx.feedback.info(f"Downloading {zip_name} (~3GB)...")
    ctx.vendor.download_file(url, zip_path)

    if not zip_path.exists():
        raise DownloadError("Download failed")

    ctx.feedback.success(f"Downloaded: {zip_name} ({format_size(zip_path.stat().st_size)})")
    return zip_path
