"""User-facing status lines with consistent styling."""

from abc import ABC, abstractmethod

import click

from resolve_updater.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing status output.

    Stages call ctx.feedback methods instead of printing so tests can capture
    what the user would have seen with a fake implementation.

    Four levels, each with its own prefix and color:
        info()    -> "[resolve-update] ..." (blue prefix)
        success() -> "[✓] ..." (green prefix)
        warning() -> "[!] ..." (yellow prefix)
        error()   -> "[✗] ..." (red prefix)
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a non-fatal problem the user may need to act on."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Colored status lines on stderr."""

    def info(self, message: str) -> None:
        user_output(click.style("[resolve-update]", fg="blue") + f" {message}")

    def success(self, message: str) -> None:
        user_output(click.style("[✓]", fg="green") + f" {message}")

    def warning(self, message: str) -> None:
        user_output(click.style("[!]", fg="yellow") + f" {message}")

    def error(self, message: str) -> None:
        user_output(click.style("[✗]", fg="red") + f" {message}")
