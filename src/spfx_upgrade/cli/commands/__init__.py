"""CLI command implementations for spfx-upgrade."""
