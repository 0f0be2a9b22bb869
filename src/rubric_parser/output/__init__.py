"""Output rendering for parsed rubrics (HTML, terminal)."""

from .console import build_instructions_view, build_rubric_table
from .html import render_instructions_html, render_rubric_html

__all__ = [
    "build_instructions_view",
    "build_rubric_table",
    "render_instructions_html",
    "render_rubric_html",
]
