from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol


class Renderable(Protocol):
    """Anything the default renderer can display."""

    id: str
    bundle: str
    title: str
    body: str


@dataclass(frozen=True)
class ContentItem:
    id: str
    bundle: str
    title: str = ""
    # HTML
    body: str = ""


Renderer = Callable[[Renderable], str]
