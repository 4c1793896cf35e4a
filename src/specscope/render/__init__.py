"""Markdown rendering of document trees."""

from specscope.render.flatten import (
    Renderer,
    render_file,
    render_markdown,
    render_section,
    render_text,
    select_tagged_lines,
)

__all__ = [
    "Renderer",
    "render_file",
    "render_markdown",
    "render_section",
    "render_text",
    "select_tagged_lines",
]
