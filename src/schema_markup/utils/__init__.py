"""
Utility helpers shared by the schema builders.
"""

from .text import normalize_option_list, strip_html

__all__ = [
    "normalize_option_list",
    "strip_html",
]
