"""Registration profile data structures and persistence.

Blackmagic only hands out download URLs to registered users, so the updater
keeps the registration form values in a small key=value file. Values are
stored verbatim (no quoting, no shell evaluation) with owner-only permissions.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from pathlib import Path

from resolve_updater.core.errors import ValidationError

# Field name -> key used in the registration file and the vendor payload.
_FILE_KEYS = {
    "first_name": "firstname",
    "last_name": "lastname",
    "email": "email",
    "phone": "phone",
    "country": "country",
    "state": "state",
    "city": "city",
    "street": "street",
}

REQUIRED_FIELDS = ("first_name", "last_name", "email", "street")

_HEADER = (
    "# resolve-updater registration info (auto-generated)\n"
    "# Re-run with --reconfigure to change these values\n"
)


@dataclass(frozen=True)
class RegistrationProfile:
    """Values submitted on Blackmagic's download registration form."""

    first_name: str
    last_name: str
    email: str
    phone: str
    country: str
    state: str
    city: str
    street: str

    def missing_required_fields(self) -> list[str]:
        """Names of required fields that are empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def validate(self) -> None:
        """Raise ValidationError unless all required fields are filled in."""
        missing = self.missing_required_fields()
        if missing:
            labels = ", ".join(name.replace("_", " ") for name in missing)
            raise ValidationError(
                f"First name, last name, email, and street are required (missing: {labels})"
            )

    def to_registration_payload(self, product_label: str) -> dict[str, str]:
        """JSON body for the download registration request."""
        payload = {_FILE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}
        payload["product"] = product_label
        return payload


def format_registration_file(profile: RegistrationProfile) -> str:
    """Render a profile as key=value lines."""
    lines = [f"{_FILE_KEYS[f.name]}={getattr(profile, f.name)}" for f in fields(profile)]
    return _HEADER + "\n".join(lines) + "\n"


def parse_registration_file(content: str) -> RegistrationProfile:
    """Parse key=value lines back into a profile.

    Everything after the first "=" is the value, so values may themselves
    contain "=" or surrounding whitespace. Comments, blank lines and unknown
    keys are ignored; absent keys read as empty strings.
    """
    values: dict[str, str] = {}
    for line in content.split("\n"):
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        # First occurrence wins, matching the original `grep | cut` lookup.
        values.setdefault(key, value)

    return RegistrationProfile(
        **{name: values.get(key, "") for name, key in _FILE_KEYS.items()}
    )


class RegistrationStore(ABC):
    """Abstract interface for registration profile persistence.

    Provides dependency injection for profile access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if a saved profile exists."""
        ...

    @abstractmethod
    def load(self) -> RegistrationProfile:
        """Load the saved profile.

        Raises:
            FileNotFoundError: If no profile has been saved
        """
        ...

    @abstractmethod
    def save(self, profile: RegistrationProfile) -> None:
        """Persist the profile, replacing any previous one."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the profile (for messages)."""
        ...


class FilesystemRegistrationStore(RegistrationStore):
    """Production implementation backed by a 0600 key=value file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> RegistrationProfile:
        if not self._path.exists():
            raise FileNotFoundError(f"Registration info not found at {self._path}")
        return parse_registration_file(self._path.read_text(encoding="utf-8"))

    def save(self, profile: RegistrationProfile) -> None:
        """Write the profile with mode 0600.

        The file is created with restrictive permissions up front so the
        values are never readable by other users, even briefly.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(format_registration_file(profile))
        # O_CREAT mode is ignored for a pre-existing file.
        os.chmod(self._path, 0o600)

    def path(self) -> Path:
        return self._path


class InMemoryRegistrationStore(RegistrationStore):
    """Test implementation that keeps the profile in memory."""

    def __init__(self, profile: RegistrationProfile | None = None) -> None:
        """Initialize in-memory store.

        Args:
            profile: Initial saved profile (None = nothing saved yet)
        """
        self._profile = profile
        self.save_calls: list[RegistrationProfile] = []

    def exists(self) -> bool:
        return self._profile is not None

    def load(self) -> RegistrationProfile:
        if self._profile is None:
            raise FileNotFoundError(f"Registration info not found at {self.path()}")
        return self._profile

    def save(self, profile: RegistrationProfile) -> None:
        self._profile = profile
        self.save_calls.append(profile)

    def path(self) -> Path:
        return Path("/fake/resolve-updater/registration.conf")
