"""Command-line interface for spfx-upgrade."""

from .app import app, main

__all__ = ["app", "main"]
