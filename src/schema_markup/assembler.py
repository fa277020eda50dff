"""
Page Assembler

Decides which schema fragments a page gets and builds them in a fixed
order:

    WebSite (home) -> ItemList, BreadcrumbList (category listing)
    -> Product, BreadcrumbList (product detail)

Each fragment is built in isolation. A builder that returns nothing or
raises is logged and skipped; the remaining fragments are still emitted.
"""

from functools import partial
from typing import Callable, List, Optional, Tuple
import logging

from schema_markup.breadcrumbs import build_breadcrumbs
from schema_markup.builders import (
    breadcrumb_schema,
    item_list_schema,
    product_schema,
    website_schema,
)
from schema_markup.config import MarkupConfig
from schema_markup.context import PageContext, matching_contexts
from schema_markup.emitter import JsonLdEmitter
from schema_markup.models import (
    FragmentType,
    PageData,
    PageFlags,
    PostSummary,
    SchemaFragment,
)

logger = logging.getLogger(__name__)

BuildStep = Tuple[FragmentType, Callable[[], Optional[SchemaFragment]]]


class PageAssembler:
    """Builds the structured data fragments for one page render."""

    def __init__(
        self,
        config: Optional[MarkupConfig] = None,
        emitter: Optional[JsonLdEmitter] = None,
    ):
        """
        Args:
            config: Store configuration. Defaults to MarkupConfig().
            emitter: Emitter used by render(). Defaults to one honouring
                config.pretty_print.
        """
        self.config = config or MarkupConfig()
        self.emitter = emitter or JsonLdEmitter(pretty=self.config.pretty_print)

    def assemble(self, flags: PageFlags, data: PageData) -> List[SchemaFragment]:
        """
        Build every fragment that applies to the page.

        Args:
            flags: Page conditionals resolved by the host
            data: Site, category and product data for the page

        Returns:
            Fragments in emission order
        """
        fragments: List[SchemaFragment] = []

        contexts = matching_contexts(flags)
        for context in contexts:
            for fragment_type, build in self._plan(context, contexts, data):
                fragment = self._run(fragment_type, build)
                if fragment is not None:
                    fragments.append(fragment)

        return fragments

    def render(self, flags: PageFlags, data: PageData) -> str:
        """Assemble the page's fragments and render them as script blocks."""
        return self.emitter.render(self.assemble(flags, data))

    def _plan(
        self,
        context: PageContext,
        contexts: Tuple[PageContext, ...],
        data: PageData,
    ) -> List[BuildStep]:
        """Builders for one context, in emission order.

        Breadcrumbs follow every matching context, so overlapping listing
        and product contexts share one trail.
        """
        if context is PageContext.HOME:
            return [(FragmentType.WEBSITE, partial(website_schema, data.site))]

        if context is PageContext.CATEGORY_LISTING:
            return [
                (
                    FragmentType.ITEM_LIST,
                    partial(
                        item_list_schema,
                        context,
                        data.category,
                        data.listing,
                        self.config.item_list_limit,
                    ),
                ),
                (FragmentType.BREADCRUMB_LIST, partial(self._breadcrumb_list, contexts, data)),
            ]

        if context is PageContext.PRODUCT_DETAIL:
            return [
                (FragmentType.PRODUCT, partial(product_schema, data.product, self.config)),
                (FragmentType.BREADCRUMB_LIST, partial(self._breadcrumb_list, contexts, data)),
            ]

        return []

    def _breadcrumb_list(
        self, contexts: Tuple[PageContext, ...], data: PageData
    ) -> Optional[SchemaFragment]:
        post = data.post
        if post is None and data.product is not None:
            post = PostSummary(title=data.product.name, permalink=data.product.permalink)

        items = build_breadcrumbs(
            contexts,
            data.site,
            category=data.category,
            product_category=data.product_category,
            post=post,
            home_label=self.config.home_label,
        )
        return breadcrumb_schema(items)

    def _run(
        self,
        fragment_type: FragmentType,
        build: Callable[[], Optional[SchemaFragment]],
    ) -> Optional[SchemaFragment]:
        try:
            fragment = build()
        except Exception as e:
            logger.warning(f"Failed to build {fragment_type.value} schema: {e}")
            return None

        if fragment is None:
            logger.debug(f"No {fragment_type.value} schema for this page")
        return fragment


def render_structured_data(
    flags: PageFlags,
    data: PageData,
    config: Optional[MarkupConfig] = None,
) -> str:
    """Render the JSON-LD script blocks for a page's <head>."""
    return PageAssembler(config).render(flags, data)
