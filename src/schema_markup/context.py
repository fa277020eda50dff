"""
Page Context Classification.

Maps the page conditionals resolved by the host into the contexts that
decide which structured data is emitted.
"""

from enum import Enum

from schema_markup.models import PageFlags


class PageContext(Enum):
    """Classification of pages for structured data purposes."""
    HOME = "home"
    CATEGORY_LISTING = "category_listing"
    PRODUCT_DETAIL = "product_detail"
    OTHER = "other"


# Assembly order, also the reverse of classify() precedence
_ORDERED_CONTEXTS = (
    PageContext.HOME,
    PageContext.CATEGORY_LISTING,
    PageContext.PRODUCT_DETAIL,
)


def _matches(context: PageContext, flags: PageFlags) -> bool:
    if context is PageContext.HOME:
        return flags.is_front_page or flags.is_home
    if context is PageContext.CATEGORY_LISTING:
        return flags.is_product_category
    if context is PageContext.PRODUCT_DETAIL:
        return flags.supports_products and flags.is_product
    return False


def matching_contexts(flags: PageFlags) -> tuple[PageContext, ...]:
    """Return every context whose condition holds, in assembly order.

    Conditions are evaluated independently; a page flagged as both a
    listing and a product yields both contexts.
    """
    return tuple(c for c in _ORDERED_CONTEXTS if _matches(c, flags))


def classify(flags: PageFlags) -> PageContext:
    """Return the single most specific context for a page.

    Product pages win over listings, listings over the home page.
    """
    matches = matching_contexts(flags)
    if not matches:
        return PageContext.OTHER
    return matches[-1]
