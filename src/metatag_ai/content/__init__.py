"""Content rendering and text extraction.

Public API:
- ContentExtractor
- ContentItem
- render_full
"""

from .extractor import ContentExtractor, html_to_text
from .models import ContentItem, Renderable, Renderer
from .render import render_full

__all__ = [
    "ContentExtractor",
    "ContentItem",
    "Renderable",
    "Renderer",
    "html_to_text",
    "render_full",
]
