"""Interactive collection of registration info."""

import click

from resolve_updater.cli.output import render_setup_notice, stderr_console
from resolve_updater.core.context import UpdaterContext
from resolve_updater.core.registration import RegistrationProfile

# (field, prompt) in the order the user is asked.
PROMPTS = (
    ("first_name", "First name"),
    ("last_name", "Last name"),
    ("email", "Email"),
    ("phone", "Phone (digits only)"),
    ("country", "Country code (e.g., us, uk, de)"),
    ("state", "State/Province"),
    ("city", "City"),
    ("street", "Street address"),
)


def prompt_registration_profile() -> RegistrationProfile:
    """Ask for every registration field; empty answers are accepted here."""
    stderr_console().print(render_setup_notice("Blackmagic"))
    values = {
        field: click.prompt(label, default="", show_default=False, err=True)
        for field, label in PROMPTS
    }
    return RegistrationProfile(**values)


def load_registration_profile(ctx: UpdaterContext, *, force_reconfigure: bool) -> RegistrationProfile:
    """Return the saved profile, prompting for a new one when needed.

    Prompts when force_reconfigure is set or nothing has been saved yet. The
    new profile is validated before it is written.

    Raises:
        ValidationError: If a required field was left empty
    """
    store = ctx.registration_store
    if not force_reconfigure and store.exists():
        return store.load()

    profile = prompt_registration_profile()
    profile.validate()
    store.save(profile)
    ctx.feedback.success(f"Configuration saved to {store.path()}")
    return profile
