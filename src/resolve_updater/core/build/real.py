"""Production build toolchain using makepkg and updpkgsums."""

import logging
import subprocess
from pathlib import Path

from resolve_updater.core.build.abc import Builder, ChecksumHelper
from resolve_updater.core.errors import BuildError
from resolve_updater.core.shell import Shell
from resolve_updater.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

BUILD_AND_INSTALL_ARGS = ["-sric", "--noconfirm"]
BUILD_ONLY_ARGS = ["-sf", "--noconfirm"]


def makepkg_command(*, install: bool) -> list[str]:
    """makepkg invocation for the requested mode."""
    return ["makepkg", *(BUILD_AND_INSTALL_ARGS if install else BUILD_ONLY_ARGS)]


class RealBuilder(Builder):
    """Runs makepkg with `yes ""` piped to stdin.

    makepkg's own prompts are covered by --noconfirm; the piped answers
    cover prompts from scripts the PKGBUILD runs.
    """

    def build(self, build_dir: Path, *, install: bool) -> None:
        cmd = makepkg_command(install=install)
        logger.debug("Running %s in %s", " ".join(cmd), build_dir)

        answers: subprocess.Popen[bytes] | None = None
        try:
            answers = subprocess.Popen(["yes", ""], stdout=subprocess.PIPE)
            result = subprocess.run(cmd, cwd=build_dir, stdin=answers.stdout, check=False)
        except FileNotFoundError as e:
            missing = "yes" if answers is None else "makepkg"
            raise BuildError(f"{missing} not found", returncode=127) from e
        finally:
            if answers is not None:
                if answers.stdout is not None:
                    answers.stdout.close()
                answers.kill()
                answers.wait()

        if result.returncode != 0:
            raise BuildError(
                f"makepkg failed with exit code {result.returncode}",
                returncode=result.returncode,
            )


class RealChecksumHelper(ChecksumHelper):
    """Wraps updpkgsums from pacman-contrib."""

    def __init__(self, shell: Shell) -> None:
        self._shell = shell

    def is_available(self) -> bool:
        return self._shell.get_installed_tool_path("updpkgsums") is not None

    def refresh(self, build_dir: Path) -> None:
        run_subprocess_with_context(
            ["updpkgsums"],
            operation_context="update PKGBUILD checksums",
            cwd=build_dir,
        )
