"""Tests for CLI output helpers."""

import pytest

from resolve_updater.cli.output import format_size, render_setup_notice


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (0, "0B"),
        (1023, "1023B"),
        (1024, "1.0K"),
        (5 * 1024 * 1024, "5.0M"),
        (3_328_599_654, "3.1G"),
        (2 * 1024**4, "2.0T"),
    ],
)
def test_format_size(num_bytes: int, expected: str) -> None:
    assert format_size(num_bytes) == expected


def test_setup_notice_title() -> None:
    panel = render_setup_notice("Blackmagic")

    assert panel.title == "First-time Setup: Registration Info"
    assert "Blackmagic requires registration" in str(panel.renderable)
