"""Formatters turning report models into HTML and text."""

from evaldash.adapters.rendering.html import render_dashboard
from evaldash.adapters.rendering.text import (
    render_empty_window,
    render_record_line,
    render_synthesis,
)

__all__ = [
    "render_dashboard",
    "render_empty_window",
    "render_record_line",
    "render_synthesis",
]
