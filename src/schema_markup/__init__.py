"""Schema.org JSON-LD markup for storefront pages."""

__version__ = "0.1.0"

from schema_markup.assembler import PageAssembler, render_structured_data
from schema_markup.breadcrumbs import build_breadcrumbs
from schema_markup.builders import (
    breadcrumb_schema,
    format_price,
    item_list_schema,
    product_schema,
    website_schema,
)
from schema_markup.config import MarkupConfig, ReturnPolicy, ShippingPolicy, load_config, settings
from schema_markup.context import PageContext, classify, matching_contexts
from schema_markup.emitter import JsonLdEmitter
from schema_markup.logging_config import get_logger, setup_logging
from schema_markup.models import (
    BreadcrumbItem,
    CategoryTerm,
    FragmentType,
    PageData,
    PageFlags,
    PostSummary,
    ProductAttributes,
    ProductDetail,
    ProductSummary,
    SchemaFragment,
    SiteInfo,
)

__all__ = [
    # Core
    "PageAssembler",
    "render_structured_data",
    "JsonLdEmitter",
    "PageContext",
    "classify",
    "matching_contexts",
    "build_breadcrumbs",
    # Builders
    "website_schema",
    "item_list_schema",
    "breadcrumb_schema",
    "product_schema",
    "format_price",
    # Models
    "SiteInfo",
    "CategoryTerm",
    "ProductSummary",
    "ProductAttributes",
    "ProductDetail",
    "PostSummary",
    "BreadcrumbItem",
    "PageFlags",
    "PageData",
    "FragmentType",
    "SchemaFragment",
    # Config
    "MarkupConfig",
    "ShippingPolicy",
    "ReturnPolicy",
    "load_config",
    "settings",
    "setup_logging",
    "get_logger",
]
