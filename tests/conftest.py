"""Shared fixtures for structured data tests."""

from decimal import Decimal

import pytest

from schema_markup.config import MarkupConfig
from schema_markup.models import (
    CategoryTerm,
    PageData,
    PostSummary,
    ProductAttributes,
    ProductDetail,
    ProductSummary,
    SiteInfo,
)


@pytest.fixture
def site():
    """Site identity of the storefront."""
    return SiteInfo(name="Libas", home_url="https://thelibas.com/")


@pytest.fixture
def category():
    """A product category."""
    return CategoryTerm(
        slug="sarees",
        name="Sarees",
        permalink="https://thelibas.com/product-category/sarees/",
    )


@pytest.fixture
def listing():
    """Three products of the category, in catalog order."""
    return [
        ProductSummary(
            id=i,
            name=f"Saree {i}",
            permalink=f"https://thelibas.com/product/saree-{i}/",
        )
        for i in range(1, 4)
    ]


@pytest.fixture
def product():
    """A rated, in-stock product."""
    return ProductDetail(
        id=101,
        name="Banarasi Silk Saree",
        permalink="https://thelibas.com/product/banarasi-silk-saree/",
        image_url="https://thelibas.com/wp-content/uploads/banarasi.jpg",
        short_description="<p>Handwoven <strong>pure silk</strong> saree.</p>",
        sku="LB-101",
        attributes=ProductAttributes(color="Red, Gold", size="S, M, L"),
        price=Decimal("4999"),
        currency="INR",
        in_stock=True,
        rating_count=3,
        average_rating=Decimal("4.67"),
        review_count=3,
    )


@pytest.fixture
def post():
    """The post backing the product page."""
    return PostSummary(
        title="Banarasi Silk Saree",
        permalink="https://thelibas.com/product/banarasi-silk-saree/",
    )


@pytest.fixture
def config():
    """Default store configuration."""
    return MarkupConfig()


@pytest.fixture
def page_data(site, category, listing, product, post):
    """Page data with every collaborator field resolved."""
    return PageData(
        site=site,
        category=category,
        listing=listing,
        product=product,
        product_category=category,
        post=post,
    )
