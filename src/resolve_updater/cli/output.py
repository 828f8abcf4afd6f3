"""Output utilities for CLI commands with clear intent.

All user-facing text goes to stderr so stdout stays free for scripting.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a user-facing line to stderr."""
    click.echo(message, nl=nl, err=True)


def stderr_console() -> Console:
    """Console bound to stderr for panels and progress bars."""
    return Console(stderr=True)


def format_size(num_bytes: int) -> str:
    """Format a byte count the way `du -h` does.

    >>> format_size(3_328_599_654)
    '3.1G'
    """
    if num_bytes < 1024:
        return f"{num_bytes}B"
    size = num_bytes / 1024
    units = ["K", "M", "G", "T"]
    while size >= 1024 and len(units) > 1:
        size /= 1024
        units.pop(0)
    return f"{size:.1f}{units[0]}"


def render_banner(title: str) -> Panel:
    """Title box printed at the start of a run."""
    return Panel(Text(title, style="bold"), border_style="blue", expand=False)


def render_setup_notice(vendor: str) -> Panel:
    """Explain why registration info is collected before prompting for it."""
    lines = [
        f"{vendor} requires registration to download.",
        "This is the same info you'd enter on their site.",
        "It's saved locally and never shared elsewhere.",
    ]
    return Panel(
        Text("\n".join(lines)),
        title="First-time Setup: Registration Info",
        border_style="blue",
        expand=False,
    )
