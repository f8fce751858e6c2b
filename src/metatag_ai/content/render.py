from __future__ import annotations

from html import escape

from bs4 import BeautifulSoup

from .models import Renderable


def has_text(html: str) -> bool:
    if not html.strip():
        return False
    return bool(BeautifulSoup(html, "html.parser").get_text().strip())


def render_full(item: Renderable) -> str:
    """Render an item in its full display form: title heading, then body HTML.

    An item whose body carries no text renders as "", title or not.
    """
    body = item.body or ""
    if not has_text(body):
        return ""

    parts = []
    title = (item.title or "").strip()
    if title:
        parts.append(f"<h1>{escape(title)}</h1>")
    parts.append(f"<div class=\"content\">{body}</div>")
    return "<article>" + "\n".join(parts) + "</article>"
