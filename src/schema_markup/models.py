"""Data models for structured data assembly."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Sequence, Union


# A schema fragment is a plain JSON-serializable mapping with a single @type
SchemaFragment = dict[str, Any]

Number = Union[Decimal, int, float, str]


class FragmentType(Enum):
    """Schema.org types the engine emits."""
    WEBSITE = "WebSite"
    ITEM_LIST = "ItemList"
    BREADCRUMB_LIST = "BreadcrumbList"
    PRODUCT = "Product"


@dataclass(frozen=True)
class SiteInfo:
    """Site identity supplied by the host for the current request."""

    name: str
    home_url: str


@dataclass(frozen=True)
class CategoryTerm:
    """Snapshot of a product category."""

    slug: str
    name: str
    permalink: str


@dataclass(frozen=True)
class ProductSummary:
    """Product entry shown on a category listing."""

    id: Any
    name: str
    permalink: str


@dataclass(frozen=True)
class ProductAttributes:
    """Display attributes of a product (comma separated option lists)."""

    color: Optional[str] = None
    size: Optional[str] = None


@dataclass(frozen=True)
class ProductDetail:
    """Fully resolved product for a product detail page."""

    id: Any
    name: str
    permalink: str = ""
    image_url: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    attributes: ProductAttributes = field(default_factory=ProductAttributes)
    price: Optional[Number] = None
    currency: str = ""
    in_stock: bool = False
    rating_count: int = 0
    average_rating: Optional[Number] = None
    review_count: int = 0


@dataclass(frozen=True)
class PostSummary:
    """Title and permalink of the post being rendered."""

    title: str
    permalink: str


@dataclass(frozen=True)
class BreadcrumbItem:
    """One step of a breadcrumb trail. Positions start at 1."""

    position: int
    name: str
    url: str

    def __post_init__(self):
        if self.position < 1:
            raise ValueError(f"Breadcrumb position must be >= 1, got {self.position}")


@dataclass(frozen=True)
class PageFlags:
    """Page conditionals resolved by the host before assembly.

    supports_products tells whether the host runs a product catalog at all;
    is_product is only honoured when it is set.
    """

    is_front_page: bool = False
    is_home: bool = False
    is_product_category: bool = False
    is_product: bool = False
    supports_products: bool = True


@dataclass(frozen=True)
class PageData:
    """Everything the collaborators resolved for the current page."""

    site: SiteInfo
    category: Optional[CategoryTerm] = None
    listing: Sequence[ProductSummary] = ()
    product: Optional[ProductDetail] = None
    product_category: Optional[CategoryTerm] = None
    post: Optional[PostSummary] = None
