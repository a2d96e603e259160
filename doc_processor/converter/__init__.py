from .pipeline import convert_markdown, render_markdown, render_markdown_to_bytes
from .styles import DEFAULT_STYLES, StyleEntry, StyleSheet

__all__ = [
    "DEFAULT_STYLES",
    "StyleEntry",
    "StyleSheet",
    "convert_markdown",
    "render_markdown",
    "render_markdown_to_bytes",
]
