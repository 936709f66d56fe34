"""Report rendering."""

from __future__ import annotations

from .renderer import OutputFormat, render_markdown, render_report

__all__ = ["OutputFormat", "render_markdown", "render_report"]
