# src/schema_markup/constants.py
"""Centralized constants for the structured data engine.

Fixed schema.org vocabulary lives here. Store-specific values that a site
owner may want to change (brand, material, shipping, returns) live in
config.py as MarkupConfig defaults.
"""

# =============================================================================
# Schema.org Vocabulary
# =============================================================================

SCHEMA_CONTEXT = "https://schema.org"

IN_STOCK = "https://schema.org/InStock"
OUT_OF_STOCK = "https://schema.org/OutOfStock"
NEW_CONDITION = "https://schema.org/NewCondition"

RETURN_FINITE_WINDOW = "https://schema.org/MerchantReturnFiniteReturnWindow"
RETURN_BY_MAIL = "https://schema.org/ReturnByMail"
FREE_RETURN = "https://schema.org/FreeReturn"

# UN/CEFACT unit code used by QuantitativeValue for days
UNIT_CODE_DAY = "DAY"


# =============================================================================
# Site Search
# =============================================================================

# Appended to the home URL (without trailing slash) for the SearchAction target
SEARCH_TARGET_PATH = "/?s={search_term_string}"

SEARCH_QUERY_INPUT = "required name=search_term_string"


# =============================================================================
# Listing and Breadcrumb Defaults
# =============================================================================

# Maximum products listed in a category ItemList
DEFAULT_ITEM_LIST_LIMIT = 10

# Label of the first breadcrumb
DEFAULT_HOME_LABEL = "Home"


# =============================================================================
# Store Defaults
# =============================================================================

DEFAULT_BRAND_NAME = "The Libas Collection"
DEFAULT_MATERIAL = "Silk"
DEFAULT_PRICE_VALID_UNTIL = "2027-12-31"
DEFAULT_SHIPPING_COUNTRY = "IN"
DEFAULT_SHIPPING_RATE = "0.00"

DEFAULT_HANDLING_DAYS_MIN = 1
DEFAULT_HANDLING_DAYS_MAX = 2
DEFAULT_TRANSIT_DAYS_MIN = 3
DEFAULT_TRANSIT_DAYS_MAX = 5

DEFAULT_RETURN_DAYS = 7
