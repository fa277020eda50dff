"""
Schema Fragment Builders

Pure functions mapping site, category and product data into schema.org
records:
- WebSite with a sitelinks SearchAction
- ItemList of category products
- BreadcrumbList
- Product with Offer, shipping, return policy and AggregateRating

A builder that cannot produce a valid record returns None instead of a
partial one.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Sequence
import logging

from schema_markup.config import MarkupConfig
from schema_markup.constants import (
    DEFAULT_ITEM_LIST_LIMIT,
    FREE_RETURN,
    IN_STOCK,
    NEW_CONDITION,
    OUT_OF_STOCK,
    RETURN_BY_MAIL,
    RETURN_FINITE_WINDOW,
    SCHEMA_CONTEXT,
    SEARCH_QUERY_INPUT,
    SEARCH_TARGET_PATH,
    UNIT_CODE_DAY,
)
from schema_markup.context import PageContext
from schema_markup.models import (
    BreadcrumbItem,
    CategoryTerm,
    ProductDetail,
    ProductSummary,
    SchemaFragment,
    SiteInfo,
)
from schema_markup.utils import normalize_option_list, strip_html

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


def format_price(value: Any) -> Optional[str]:
    """Format a price with exactly two decimals, e.g. 499 -> "499.00".

    Returns None when the value is missing or not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite():
            return None
        # quantize raises when the rounded value exceeds the context precision
        return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"
    except InvalidOperation:
        return None


def _verbatim_number(value: Any) -> Optional[str]:
    """Return the number as the caller wrote it, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None

    text = str(value).strip()
    try:
        if not Decimal(text).is_finite():
            return None
    except InvalidOperation:
        return None
    return text


def website_schema(site: SiteInfo) -> SchemaFragment:
    """WebSite record with a search box action for the site search."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "url": site.home_url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": site.home_url.rstrip("/") + SEARCH_TARGET_PATH,
            "query-input": SEARCH_QUERY_INPUT,
        },
    }


def item_list_schema(
    context: PageContext,
    term: Optional[CategoryTerm],
    products: Sequence[ProductSummary],
    limit: int = DEFAULT_ITEM_LIST_LIMIT,
) -> Optional[SchemaFragment]:
    """ItemList of the first products of a category listing.

    Args:
        context: Current page context; anything but CATEGORY_LISTING yields None
        term: Category being listed
        products: Products in catalog order
        limit: Maximum number of list elements

    Returns:
        ItemList record, or None outside a category listing
    """
    if context is not PageContext.CATEGORY_LISTING or term is None:
        return None

    listed = [p for p in products if p.name and p.permalink][:limit]

    elements: List[Dict[str, Any]] = [
        {
            "@type": "Product",
            "position": position,
            "name": product.name,
            "url": product.permalink,
        }
        for position, product in enumerate(listed, start=1)
    ]

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "ItemList",
        "name": term.name,
        "itemListElement": elements,
    }


def breadcrumb_schema(items: Sequence[BreadcrumbItem]) -> Optional[SchemaFragment]:
    """BreadcrumbList from sequenced items; None for an empty trail."""
    if not items:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": item.position,
                "name": item.name,
                "item": item.url,
            }
            for item in items
        ],
    }


def shipping_details_schema(config: MarkupConfig, currency: str) -> Dict[str, Any]:
    """OfferShippingDetails for the store's flat shipping terms."""
    shipping = config.shipping
    return {
        "@type": "OfferShippingDetails",
        "shippingRate": {
            "@type": "MonetaryAmount",
            "value": shipping.rate,
            "currency": currency,
        },
        "shippingDestination": {
            "@type": "DefinedRegion",
            "addressCountry": shipping.country,
        },
        "deliveryTime": {
            "@type": "ShippingDeliveryTime",
            "handlingTime": {
                "@type": "QuantitativeValue",
                "minValue": shipping.handling_days_min,
                "maxValue": shipping.handling_days_max,
                "unitCode": UNIT_CODE_DAY,
            },
            "transitTime": {
                "@type": "QuantitativeValue",
                "minValue": shipping.transit_days_min,
                "maxValue": shipping.transit_days_max,
                "unitCode": UNIT_CODE_DAY,
            },
        },
    }


def return_policy_schema(config: MarkupConfig) -> Dict[str, Any]:
    """MerchantReturnPolicy for the store's mail-in return window."""
    policy: Dict[str, Any] = {
        "@type": "MerchantReturnPolicy",
        "applicableCountry": config.return_country,
        "returnPolicyCategory": RETURN_FINITE_WINDOW,
        "merchantReturnDays": config.returns.days,
        "returnMethod": RETURN_BY_MAIL,
        "returnFees": FREE_RETURN,
    }
    if config.returns.policy_url:
        policy["merchantReturnLink"] = config.returns.policy_url
    return policy


def offer_schema(product: ProductDetail, config: MarkupConfig) -> Optional[Dict[str, Any]]:
    """Offer for a product; None when price or currency is unknown."""
    price = format_price(product.price)
    if price is None or not product.currency:
        logger.debug(f"No offer for product {product.id}: price or currency missing")
        return None

    return {
        "@type": "Offer",
        "url": product.permalink,
        "priceCurrency": product.currency,
        "price": price,
        "priceValidUntil": config.price_valid_until.isoformat(),
        "availability": IN_STOCK if product.in_stock else OUT_OF_STOCK,
        "itemCondition": NEW_CONDITION,
        "shippingDetails": shipping_details_schema(config, product.currency),
        "hasMerchantReturnPolicy": return_policy_schema(config),
    }


def aggregate_rating_schema(product: ProductDetail) -> Optional[Dict[str, Any]]:
    """AggregateRating, only for products that have ratings."""
    if not product.rating_count or product.rating_count <= 0:
        return None

    rating_value = _verbatim_number(product.average_rating)
    if rating_value is None:
        return None

    return {
        "@type": "AggregateRating",
        "ratingValue": rating_value,
        "reviewCount": str(product.review_count),
    }


def product_schema(
    product: Optional[ProductDetail],
    config: Optional[MarkupConfig] = None,
) -> Optional[SchemaFragment]:
    """Product record for a product detail page.

    Args:
        product: Resolved product, or None when the page has none
        config: Store configuration (brand, material, shipping, returns)

    Returns:
        Product record, or None when the product is missing or incomplete
    """
    if not isinstance(product, ProductDetail):
        return None
    if not product.name or not product.permalink:
        logger.debug(f"Skipping Product schema for {product.id}: name or permalink missing")
        return None

    config = config or MarkupConfig()

    data: SchemaFragment = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "name": product.name,
    }

    if product.image_url:
        data["image"] = product.image_url

    description = strip_html(product.short_description)
    if description:
        data["description"] = description

    if product.sku:
        data["sku"] = product.sku

    data["brand"] = {"@type": "Brand", "name": config.brand_name}

    color = normalize_option_list(product.attributes.color)
    if color:
        data["color"] = color

    size = normalize_option_list(product.attributes.size)
    if size:
        data["size"] = size

    if config.material:
        data["material"] = config.material

    offers = offer_schema(product, config)
    if offers is not None:
        data["offers"] = offers

    rating = aggregate_rating_schema(product)
    if rating is not None:
        data["aggregateRating"] = rating

    return data
