"""Keep DaVinci Resolve up to date on Arch Linux."""

__version__ = "0.1.0"
