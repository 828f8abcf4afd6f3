import logging
import os

import click

from resolve_updater.cli.ensure import ensure_required_tools
from resolve_updater.cli.output import render_banner, stderr_console, user_output
from resolve_updater.cli.registration import load_registration_profile
from resolve_updater.core.context import UpdaterContext, create_context
from resolve_updater.core.download import download_artifact
from resolve_updater.core.errors import UpdaterError
from resolve_updater.core.recipe.sync import sync_recipe
from resolve_updater.core.user_feedback import InteractiveFeedback
from resolve_updater.core.versions import get_installed_version, get_latest_version

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "RESOLVE_UPDATER_DEBUG"


class UpdaterCommand(click.Command):
    """Command whose usage errors exit with status 1 like every other failure."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _configure_logging(verbose: bool) -> None:
    if verbose or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def run_update(
    ctx: UpdaterContext,
    *,
    force: bool,
    check_only: bool,
    skip_install: bool,
    reconfigure: bool,
) -> None:
    """Run the update pipeline, stopping at the first failing stage.

    Raises:
        UpdaterError: From whichever stage failed
    """
    edition = ctx.settings.edition
    ensure_required_tools(ctx)

    profile = load_registration_profile(ctx, force_reconfigure=reconfigure)

    installed_version = get_installed_version(ctx.package_db, edition.package_name)
    ctx.feedback.info(f"Installed version: {installed_version}")

    ctx.feedback.info("Checking Blackmagic API for latest version...")
    latest = get_latest_version(ctx.vendor, edition.package_name)
    latest_version = latest.display_version
    ctx.feedback.success(f"Latest version: {latest_version}")

    if installed_version == latest_version and not force:
        ctx.feedback.success(f"Already on latest version ({installed_version}). Nothing to do.")
        if not check_only:
            user_output()
            user_output("Use --force to reinstall anyway.")
        return

    if installed_version != latest_version:
        ctx.feedback.info(f"Update available: {installed_version} → {latest_version}")

    if check_only:
        ctx.feedback.warning("Check-only mode. Exiting.")
        return

    build_dir = ctx.settings.build_dir
    build_dir.mkdir(parents=True, exist_ok=True)

    zip_path = download_artifact(ctx, latest_version, latest.download_id, profile, force=force)
    sync_recipe(ctx, latest_version, zip_path)

    ctx.feedback.info(f"Building package with makepkg in {build_dir} (this takes a while)...")
    ctx.builder.build(build_dir, install=not skip_install)

    if skip_install:
        ctx.feedback.success("Package built (not installed due to --skip-install)")
        return

    ctx.feedback.success("Package built and installed!")
    user_output()
    ctx.feedback.success(f"{edition.product_label} {latest_version} installed successfully!")
    ctx.feedback.info(f"Run '{edition.launch_command}' to launch.")


@click.command("resolve-updater", cls=UpdaterCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="resolve-updater")
@click.option("--force", is_flag=True, help="Update even if already on latest version.")
@click.option(
    "--check-only",
    is_flag=True,
    help="Just check for updates, don't download or install.",
)
@click.option("--skip-install", is_flag=True, help="Download and build but don't install.")
@click.option("--reconfigure", is_flag=True, help="Re-enter registration info.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(
    click_ctx: click.Context,
    force: bool,
    check_only: bool,
    skip_install: bool,
    reconfigure: bool,
    verbose: bool,
) -> None:
    """Update DaVinci Resolve on Arch Linux.

    Checks Blackmagic for a newer release, downloads it, patches the AUR
    PKGBUILD to match and builds it with makepkg.
    """
    _configure_logging(verbose)

    user_output()
    stderr_console().print(render_banner("DaVinci Resolve Updater for Arch Linux"))
    user_output()

    try:
        # Tests inject a context through obj
        if click_ctx.obj is None:
            click_ctx.obj = create_context()
        run_update(
            click_ctx.obj,
            force=force,
            check_only=check_only,
            skip_install=skip_install,
            reconfigure=reconfigure,
        )
    except UpdaterError as e:
        logger.debug("Update aborted", exc_info=True)
        # Settings errors surface before a context exists
        feedback = click_ctx.obj.feedback if click_ctx.obj is not None else InteractiveFeedback()
        feedback.error(str(e))
        raise SystemExit(1) from e


def main() -> None:
    """CLI entry point used by the `resolve-updater` console script."""
    cli()
