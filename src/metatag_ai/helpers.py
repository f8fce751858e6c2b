import re
from typing import Any

from metatag_ai import config

_WHITESPACE_RE = re.compile(r"\s+")


def safe_str(v: Any) -> str:
    """Best-effort stringify without turning missing values into the literal 'None'."""
    if v is None:
        return ""
    try:
        s = str(v)
    except Exception:
        return ""
    if s.strip().lower() == "none":
        return ""
    return s


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace (newlines included) with one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate_with_ellipsis(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters and mark the cut with an ellipsis.

    Text at or under the limit is returned untouched.
    """
    if len(text) <= limit:
        return text
    return text[:limit] + config.ELLIPSIS


def parse_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    return safe_str(v).strip().lower() in ("1", "true", "yes", "on")


def split_csv(v: Any) -> list[str]:
    """Split a comma separated value, dropping blanks."""
    return [part.strip() for part in safe_str(v).split(",") if part.strip()]
