"""Error types raised by updater stages.

Every stage failure is an UpdaterError subclass. The CLI boundary turns them
into a red error line and exit code 1; nothing below it retries.
"""


class UpdaterError(Exception):
    """Base class for failures that abort an update run."""


class DependencyMissingError(UpdaterError):
    """A required external tool is not on PATH."""

    def __init__(self, tools: list[str], hints: list[str] | None = None) -> None:
        self.tools = tools
        lines = [f"Missing dependency: {', '.join(tools)}", *(hints or [])]
        super().__init__("\n".join(lines))


class ValidationError(UpdaterError):
    """Registration info is incomplete."""


class SettingsError(UpdaterError):
    """The settings file is malformed."""


class NetworkError(UpdaterError):
    """The version lookup returned nothing usable."""


class RegistrationError(UpdaterError):
    """The vendor refused to issue a download URL."""


class DownloadError(UpdaterError):
    """The transfer did not leave the expected file behind."""


class FetchError(UpdaterError):
    """The build recipe could not be fetched."""


class MissingArtifactError(UpdaterError):
    """The downloaded zip is not in the build directory."""


class BuildError(UpdaterError):
    """makepkg exited with a non-zero status."""

    def __init__(self, message: str, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(message)
