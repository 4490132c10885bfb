"""Render API module."""

from .render_html import render_html
from .render_markdown import render_markdown

__all__ = ["render_html", "render_markdown"]
