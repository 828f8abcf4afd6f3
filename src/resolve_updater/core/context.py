"""Application context with dependency injection."""

from dataclasses import dataclass

from resolve_updater.core.build.abc import Builder, ChecksumHelper
from resolve_updater.core.build.real import RealBuilder, RealChecksumHelper
from resolve_updater.core.package_db.abc import PackageDatabase
from resolve_updater.core.package_db.real import RealPackageDatabase
from resolve_updater.core.recipe.abc import RecipeFetcher
from resolve_updater.core.recipe.real import RealRecipeFetcher
from resolve_updater.core.registration import FilesystemRegistrationStore, RegistrationStore
from resolve_updater.core.settings import UpdaterSettings, default_home, load_settings
from resolve_updater.core.shell import RealShell, Shell
from resolve_updater.core.user_feedback import InteractiveFeedback, UserFeedback
from resolve_updater.core.vendor.abc import VendorApi
from resolve_updater.core.vendor.real import RealVendorApi


@dataclass(frozen=True)
class UpdaterContext:
    """Immutable context holding all dependencies for an update run.

    Created at CLI entry point and threaded through every stage.
    Frozen to prevent accidental modification at runtime.
    """

    shell: Shell
    package_db: PackageDatabase
    vendor: VendorApi
    recipe_fetcher: RecipeFetcher
    checksum_helper: ChecksumHelper
    builder: Builder
    registration_store: RegistrationStore
    feedback: UserFeedback
    settings: UpdaterSettings


def create_context() -> UpdaterContext:
    """Create production context with real implementations.

    Raises:
        SettingsError: If the settings file is malformed
    """
    settings = load_settings(default_home())
    shell = RealShell()
    return UpdaterContext(
        shell=shell,
        package_db=RealPackageDatabase(),
        vendor=RealVendorApi(),
        recipe_fetcher=RealRecipeFetcher(),
        checksum_helper=RealChecksumHelper(shell),
        builder=RealBuilder(),
        registration_store=FilesystemRegistrationStore(settings.registration_path),
        feedback=InteractiveFeedback(),
        settings=settings,
    )
