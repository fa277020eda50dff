"""Breadcrumb trail sequencing for listing and product pages."""

import logging
from typing import Iterable, Optional, Union

from schema_markup.constants import DEFAULT_HOME_LABEL
from schema_markup.context import PageContext
from schema_markup.models import BreadcrumbItem, CategoryTerm, PostSummary, SiteInfo

logger = logging.getLogger(__name__)


def build_breadcrumbs(
    contexts: Union[PageContext, Iterable[PageContext]],
    site: SiteInfo,
    *,
    category: Optional[CategoryTerm] = None,
    product_category: Optional[CategoryTerm] = None,
    post: Optional[PostSummary] = None,
    home_label: str = DEFAULT_HOME_LABEL,
) -> list[BreadcrumbItem]:
    """Build the breadcrumb trail for a page.

    The trail always starts at the home page. Listings add their category;
    product pages add the product's first category when it has one, then
    the product itself. A page matching both contexts gets one combined
    trail. Positions are assigned here and are always 1..N.

    Args:
        contexts: Context, or every context the page matches
        site: Site identity (home URL)
        category: Category being listed, for CATEGORY_LISTING
        product_category: First category of the product, for PRODUCT_DETAIL
        post: Current product post, for PRODUCT_DETAIL
        home_label: Name of the first crumb

    Returns:
        Ordered breadcrumb items, empty for contexts without a trail
    """
    if isinstance(contexts, PageContext):
        contexts = (contexts,)
    active = set(contexts)

    is_listing = PageContext.CATEGORY_LISTING in active
    is_product = PageContext.PRODUCT_DETAIL in active
    if not (is_listing or is_product):
        return []

    steps: list[tuple[str, str]] = [(home_label, site.home_url)]

    if is_listing and category is not None:
        steps.append((category.name, category.permalink))

    if is_product:
        if product_category is not None:
            steps.append((product_category.name, product_category.permalink))
        if post is not None:
            steps.append((post.title, post.permalink))

    # Drop incomplete steps before numbering so positions never gap
    complete = [(name, url) for name, url in steps if name and url]
    if len(complete) < len(steps):
        logger.debug(f"Skipped {len(steps) - len(complete)} incomplete breadcrumb step(s)")

    return [
        BreadcrumbItem(position=index, name=name, url=url)
        for index, (name, url) in enumerate(complete, start=1)
    ]
