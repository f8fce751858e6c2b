from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Comment

from metatag_ai import config
from metatag_ai import logger as logger_mod
from metatag_ai.errors import ExtractionError
from metatag_ai.helpers import collapse_whitespace, truncate_with_ellipsis

from .models import Renderable, Renderer
from .render import render_full

log = logger_mod.get_logger()


class ContentExtractor:
    """Reduce a content item's rendered display to plain text for prompting."""

    # Tags whose text never shows up on the page
    UNWANTED_TAGS = ["script", "style", "template", "noscript"]

    # Elements that break the text flow; inline tags join their neighbours as is
    BLOCK_TAGS = (
        "address article aside blockquote br dd div dl dt figcaption figure footer "
        "h1 h2 h3 h4 h5 h6 header hr li main nav ol p pre section table td th tr ul"
    ).split()

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        *,
        max_length: int = config.MAX_TEXT_LENGTH,
    ) -> None:
        self._render = renderer or render_full
        self._max_length = max_length

    def extract_text(self, item: Renderable) -> str:
        try:
            html = self._render(item)
        except Exception as e:  # noqa: BLE001
            log.error(f"Rendering failed for item {getattr(item, 'id', '?')}: {e}")
            raise ExtractionError() from e

        text = html_to_text(html or "")
        # Limit text length to avoid excessive API costs.
        return truncate_with_ellipsis(text, self._max_length)


def html_to_text(html: str) -> str:
    """Strip markup, decode entities and normalize whitespace."""
    if not html.strip():
        return ""

    soup = BeautifulSoup(html, "html.parser")

    for tag_name in ContentExtractor.UNWANTED_TAGS:
        for tag in soup.find_all(tag_name):
            tag.decompose()

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(ContentExtractor.BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")

    return collapse_whitespace(soup.get_text())
