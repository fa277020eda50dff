"""Text helpers for turning catalog content into schema.org values."""

import re
from typing import Optional

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")
_COMMA_SPACING = re.compile(r",\s+")


def strip_html(html: Optional[str]) -> str:
    """Return the visible text of an HTML fragment.

    Script and style bodies are dropped, entities are decoded and runs of
    whitespace collapse to a single space.
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "lxml")
    for tag in soup(["script", "style"]):
        tag.decompose()

    return _WHITESPACE.sub(" ", soup.get_text()).strip()


def normalize_option_list(value: Optional[str]) -> Optional[str]:
    """Remove the space after each comma: "S, M, L" becomes "S,M,L"."""
    if value is None:
        return None
    return _COMMA_SPACING.sub(",", value).strip()
