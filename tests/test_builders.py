# tests/test_builders.py
"""Tests for the schema fragment builders."""

from dataclasses import replace
from decimal import Decimal

import pytest

from schema_markup.builders import (
    breadcrumb_schema,
    format_price,
    item_list_schema,
    product_schema,
    website_schema,
)
from schema_markup.config import MarkupConfig, ReturnPolicy, ShippingPolicy
from schema_markup.context import PageContext
from schema_markup.models import (
    BreadcrumbItem,
    ProductAttributes,
    ProductSummary,
    SiteInfo,
)


class TestWebsiteSchema:
    """Test cases for website_schema()."""

    def test_search_action_target(self, site):
        """Test the search target is built from the home URL."""
        schema = website_schema(site)

        assert schema["@type"] == "WebSite"
        assert schema["name"] == "Libas"
        assert schema["url"] == "https://thelibas.com/"
        assert schema["potentialAction"] == {
            "@type": "SearchAction",
            "target": "https://thelibas.com/?s={search_term_string}",
            "query-input": "required name=search_term_string",
        }

    def test_home_without_trailing_slash(self):
        """Test no double or missing slash in the target."""
        schema = website_schema(SiteInfo(name="Libas", home_url="https://thelibas.com"))
        assert schema["potentialAction"]["target"] == "https://thelibas.com/?s={search_term_string}"


class TestItemListSchema:
    """Test cases for item_list_schema()."""

    def test_elements_numbered_in_order(self, category, listing):
        """Test list elements carry 1-based positions in input order."""
        schema = item_list_schema(PageContext.CATEGORY_LISTING, category, listing)

        assert schema["@type"] == "ItemList"
        assert schema["name"] == "Sarees"
        assert schema["itemListElement"][0] == {
            "@type": "Product",
            "position": 1,
            "name": "Saree 1",
            "url": "https://thelibas.com/product/saree-1/",
        }
        assert [e["position"] for e in schema["itemListElement"]] == [1, 2, 3]

    def test_truncates_to_ten(self, category):
        """Test 50 products yield exactly the first 10."""
        products = [
            ProductSummary(id=i, name=f"P{i}", permalink=f"https://thelibas.com/p/{i}/")
            for i in range(50)
        ]
        schema = item_list_schema(PageContext.CATEGORY_LISTING, category, products)

        elements = schema["itemListElement"]
        assert len(elements) == 10
        assert [e["position"] for e in elements] == list(range(1, 11))
        assert [e["name"] for e in elements] == [f"P{i}" for i in range(10)]

    def test_empty_listing(self, category):
        """Test a category with no products still yields a list."""
        schema = item_list_schema(PageContext.CATEGORY_LISTING, category, [])
        assert schema["itemListElement"] == []

    @pytest.mark.parametrize(
        "context", [PageContext.HOME, PageContext.PRODUCT_DETAIL, PageContext.OTHER]
    )
    def test_guard_outside_listing(self, category, listing, context):
        """Test nothing is produced outside a category listing."""
        assert item_list_schema(context, category, listing) is None

    def test_guard_without_term(self, listing):
        """Test nothing is produced without a category."""
        assert item_list_schema(PageContext.CATEGORY_LISTING, None, listing) is None

    def test_incomplete_products_skipped(self, category):
        """Test positions stay contiguous when a product lacks a URL."""
        products = [
            ProductSummary(id=1, name="A", permalink="https://thelibas.com/a/"),
            ProductSummary(id=2, name="B", permalink=""),
            ProductSummary(id=3, name="C", permalink="https://thelibas.com/c/"),
        ]
        schema = item_list_schema(PageContext.CATEGORY_LISTING, category, products)
        assert [(e["position"], e["name"]) for e in schema["itemListElement"]] == [(1, "A"), (2, "C")]


class TestBreadcrumbSchema:
    """Test cases for breadcrumb_schema()."""

    def test_list_items(self):
        """Test items map to ListItem records."""
        schema = breadcrumb_schema([
            BreadcrumbItem(1, "Home", "https://thelibas.com/"),
            BreadcrumbItem(2, "Sarees", "https://thelibas.com/product-category/sarees/"),
        ])

        assert schema["@type"] == "BreadcrumbList"
        assert schema["itemListElement"][1] == {
            "@type": "ListItem",
            "position": 2,
            "name": "Sarees",
            "item": "https://thelibas.com/product-category/sarees/",
        }

    def test_empty_trail(self):
        """Test an empty trail produces nothing."""
        assert breadcrumb_schema([]) is None


class TestFormatPrice:
    """Test cases for format_price()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (499, "499.00"),
            (499.5, "499.50"),
            ("499", "499.00"),
            (Decimal("1299.999"), "1300.00"),
            (Decimal("12345.6"), "12345.60"),
            ("0", "0.00"),
        ],
    )
    def test_two_decimals(self, value, expected):
        """Test prices always carry two decimals and no grouping."""
        assert format_price(value) == expected

    @pytest.mark.parametrize("value", [None, "", "free", "NaN", "inf", True])
    def test_underivable(self, value):
        """Test non-numeric prices yield None."""
        assert format_price(value) is None

    def test_beyond_decimal_precision(self):
        """Test a price too large to round to cents yields None."""
        assert format_price(10**27) is None
        assert format_price("1e30") is None


class TestProductSchema:
    """Test cases for product_schema()."""

    def test_core_fields(self, product, config):
        """Test product identity, brand and attributes."""
        schema = product_schema(product, config)

        assert schema["@context"] == "https://schema.org"
        assert schema["@type"] == "Product"
        assert schema["name"] == "Banarasi Silk Saree"
        assert schema["image"] == "https://thelibas.com/wp-content/uploads/banarasi.jpg"
        assert schema["description"] == "Handwoven pure silk saree."
        assert schema["sku"] == "LB-101"
        assert schema["brand"] == {"@type": "Brand", "name": "The Libas Collection"}
        assert schema["color"] == "Red,Gold"
        assert schema["size"] == "S,M,L"
        assert schema["material"] == "Silk"

    def test_offer(self, product, config):
        """Test offer price, availability and condition."""
        offers = product_schema(product, config)["offers"]

        assert offers["@type"] == "Offer"
        assert offers["url"] == product.permalink
        assert offers["priceCurrency"] == "INR"
        assert offers["price"] == "4999.00"
        assert offers["priceValidUntil"] == "2027-12-31"
        assert offers["availability"] == "https://schema.org/InStock"
        assert offers["itemCondition"] == "https://schema.org/NewCondition"

    def test_out_of_stock(self, product, config):
        """Test availability follows stock status."""
        schema = product_schema(replace(product, in_stock=False), config)
        assert schema["offers"]["availability"] == "https://schema.org/OutOfStock"

    def test_shipping_details(self, product, config):
        """Test free domestic shipping with 1-2 day handling and 3-5 day transit."""
        shipping = product_schema(product, config)["offers"]["shippingDetails"]

        assert shipping["shippingRate"] == {
            "@type": "MonetaryAmount",
            "value": "0.00",
            "currency": "INR",
        }
        assert shipping["shippingDestination"]["addressCountry"] == "IN"
        delivery = shipping["deliveryTime"]
        assert (delivery["handlingTime"]["minValue"], delivery["handlingTime"]["maxValue"]) == (1, 2)
        assert (delivery["transitTime"]["minValue"], delivery["transitTime"]["maxValue"]) == (3, 5)
        assert delivery["transitTime"]["unitCode"] == "DAY"

    def test_return_policy(self, product, config):
        """Test the 7-day mail return policy."""
        policy = product_schema(product, config)["offers"]["hasMerchantReturnPolicy"]

        assert policy["@type"] == "MerchantReturnPolicy"
        assert policy["merchantReturnDays"] == 7
        assert policy["returnMethod"] == "https://schema.org/ReturnByMail"
        assert policy["applicableCountry"] == "IN"
        assert "merchantReturnLink" not in policy

    def test_aggregate_rating_present(self, product, config):
        """Test ratings are emitted verbatim as strings."""
        rating = product_schema(product, config)["aggregateRating"]
        assert rating == {
            "@type": "AggregateRating",
            "ratingValue": "4.67",
            "reviewCount": "3",
        }

    def test_aggregate_rating_absent_without_ratings(self, product, config):
        """Test the rating key is absent, not null, when there are no ratings."""
        schema = product_schema(replace(product, rating_count=0), config)
        assert "aggregateRating" not in schema

    def test_aggregate_rating_absent_when_underivable(self, product, config):
        """Test a missing average drops the rating group."""
        schema = product_schema(replace(product, average_rating=None), config)
        assert "aggregateRating" not in schema

    def test_missing_price_drops_offer(self, product, config):
        """Test an underivable price omits the whole offer."""
        schema = product_schema(replace(product, price="n/a"), config)
        assert "offers" not in schema
        assert schema["name"] == product.name

    def test_oversized_price_drops_offer(self, product, config):
        """Test an unroundable price omits the offer but keeps the product."""
        schema = product_schema(replace(product, price=10**27), config)
        assert "offers" not in schema
        assert schema["name"] == product.name
        assert schema["aggregateRating"]["ratingValue"] == "4.67"

    def test_fractional_price(self, product, config):
        """Test 499.5 is emitted as 499.50."""
        schema = product_schema(replace(product, price=499.5), config)
        assert schema["offers"]["price"] == "499.50"

    def test_attributes_without_comma_space_unchanged(self, product, config):
        """Test already-normalized attributes pass through."""
        attrs = ProductAttributes(color="Blue", size="Free Size")
        schema = product_schema(replace(product, attributes=attrs), config)
        assert schema["color"] == "Blue"
        assert schema["size"] == "Free Size"

    def test_absent_attributes_omitted(self, product, config):
        """Test missing color and size are left out."""
        schema = product_schema(replace(product, attributes=ProductAttributes()), config)
        assert "color" not in schema
        assert "size" not in schema

    def test_missing_product(self, config):
        """Test no product yields nothing."""
        assert product_schema(None, config) is None

    def test_incomplete_product(self, product, config):
        """Test a product without a permalink yields nothing."""
        assert product_schema(replace(product, permalink=""), config) is None

    def test_configured_store_values(self, product):
        """Test brand, material, shipping and returns follow config."""
        config = MarkupConfig(
            brand_name="Acme",
            material=None,
            shipping=ShippingPolicy(country="US", transit_days_max=7),
            returns=ReturnPolicy(days=30, policy_url="https://acme.test/returns/"),
        )
        schema = product_schema(product, config)

        assert schema["brand"]["name"] == "Acme"
        assert "material" not in schema
        offers = schema["offers"]
        assert offers["shippingDetails"]["shippingDestination"]["addressCountry"] == "US"
        assert offers["shippingDetails"]["deliveryTime"]["transitTime"]["maxValue"] == 7
        policy = offers["hasMerchantReturnPolicy"]
        assert policy["merchantReturnDays"] == 30
        assert policy["applicableCountry"] == "US"
        assert policy["merchantReturnLink"] == "https://acme.test/returns/"

    def test_default_config(self, product):
        """Test the builder works without an explicit config."""
        assert product_schema(product)["brand"]["name"] == "The Libas Collection"
