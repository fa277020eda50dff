"""Store configuration for structured data markup.

Values that are constant for a storefront (brand, material, shipping and
return terms) are kept here instead of in the builders. The defaults
reproduce the live storefront's markup.
"""

from datetime import date
from pathlib import Path
from typing import Any, Optional
import json
import logging
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

from schema_markup.constants import (
    DEFAULT_BRAND_NAME,
    DEFAULT_HANDLING_DAYS_MAX,
    DEFAULT_HANDLING_DAYS_MIN,
    DEFAULT_HOME_LABEL,
    DEFAULT_ITEM_LIST_LIMIT,
    DEFAULT_MATERIAL,
    DEFAULT_PRICE_VALID_UNTIL,
    DEFAULT_RETURN_DAYS,
    DEFAULT_SHIPPING_COUNTRY,
    DEFAULT_SHIPPING_RATE,
    DEFAULT_TRANSIT_DAYS_MAX,
    DEFAULT_TRANSIT_DAYS_MIN,
)

load_dotenv()  # Loads variables from .env file

logger = logging.getLogger(__name__)

# Top-level key a shared YAML/JSON file may nest the markup settings under
CONFIG_FILE_SECTION = "schema_markup"


class Settings:
    """
    Process settings loaded from environment variables.
    """
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SCHEMA_CONFIG_FILE = os.getenv("SCHEMA_CONFIG_FILE")


settings = Settings()


class ShippingPolicy(BaseModel):
    """Flat-rate shipping terms published with every offer."""

    model_config = ConfigDict(frozen=True)

    country: str = Field(
        default=DEFAULT_SHIPPING_COUNTRY,
        min_length=2,
        max_length=2,
        description="ISO 3166-1 alpha-2 destination country"
    )

    rate: str = Field(
        default=DEFAULT_SHIPPING_RATE,
        description="Shipping cost, already formatted"
    )

    handling_days_min: int = Field(default=DEFAULT_HANDLING_DAYS_MIN, ge=0)
    handling_days_max: int = Field(default=DEFAULT_HANDLING_DAYS_MAX, ge=0)
    transit_days_min: int = Field(default=DEFAULT_TRANSIT_DAYS_MIN, ge=0)
    transit_days_max: int = Field(default=DEFAULT_TRANSIT_DAYS_MAX, ge=0)

    @model_validator(mode="after")
    def check_windows(self) -> "ShippingPolicy":
        if self.handling_days_min > self.handling_days_max:
            raise ValueError("handling_days_min must not exceed handling_days_max")
        if self.transit_days_min > self.transit_days_max:
            raise ValueError("transit_days_min must not exceed transit_days_max")
        return self


class ReturnPolicy(BaseModel):
    """Merchant return terms published with every offer."""

    model_config = ConfigDict(frozen=True)

    days: int = Field(
        default=DEFAULT_RETURN_DAYS,
        ge=0,
        description="Return window in days"
    )

    country: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=2,
        description="Applicable country. None means the shipping country."
    )

    policy_url: Optional[str] = Field(
        default=None,
        description="Absolute URL of the returns page, emitted as merchantReturnLink"
    )


class MarkupConfig(BaseModel):
    """
    Store-level configuration for the structured data builders.

    All fields are validated by Pydantic. Instances are frozen so a single
    config can be shared by concurrent renders.
    """

    model_config = ConfigDict(frozen=True)

    brand_name: str = Field(default=DEFAULT_BRAND_NAME, min_length=1)
    material: Optional[str] = Field(
        default=DEFAULT_MATERIAL,
        description="Product material. None omits the field."
    )
    price_valid_until: date = Field(default=date.fromisoformat(DEFAULT_PRICE_VALID_UNTIL))
    item_list_limit: int = Field(default=DEFAULT_ITEM_LIST_LIMIT, ge=1)
    home_label: str = Field(default=DEFAULT_HOME_LABEL, min_length=1)
    pretty_print: bool = False
    shipping: ShippingPolicy = Field(default_factory=ShippingPolicy)
    returns: ReturnPolicy = Field(default_factory=ReturnPolicy)

    @property
    def return_country(self) -> str:
        return self.returns.country or self.shipping.country

    @classmethod
    def from_env(cls) -> "MarkupConfig":
        """Load configuration from environment variables.

        Environment variables are prefixed with SCHEMA_,
        e.g. SCHEMA_BRAND_NAME="The Libas Collection"

        Returns:
            MarkupConfig with values from environment
        """
        values: dict[str, Any] = {}
        shipping: dict[str, Any] = {}
        returns: dict[str, Any] = {}

        _copy_env(values, "brand_name", "SCHEMA_BRAND_NAME")
        _copy_env(values, "material", "SCHEMA_MATERIAL")
        _copy_env(values, "price_valid_until", "SCHEMA_PRICE_VALID_UNTIL")
        _copy_env(values, "home_label", "SCHEMA_HOME_LABEL")
        _copy_env(values, "item_list_limit", "SCHEMA_ITEM_LIST_LIMIT", int)
        _copy_env(values, "pretty_print", "SCHEMA_PRETTY_PRINT", _parse_bool)
        _copy_env(shipping, "country", "SCHEMA_SHIPPING_COUNTRY")
        _copy_env(returns, "days", "SCHEMA_RETURN_DAYS", int)
        _copy_env(returns, "policy_url", "SCHEMA_RETURN_POLICY_URL")

        if shipping:
            values["shipping"] = shipping
        if returns:
            values["returns"] = returns

        return cls.model_validate(values)

    @classmethod
    def from_file(cls, path: str) -> "MarkupConfig":
        """Load configuration from a YAML or JSON file.

        The settings may sit at the top level or under a ``schema_markup``
        key. A missing file yields the defaults.
        Raises ValueError when the settings are not a mapping.

        Args:
            path: Path to a .yaml, .yml or .json file

        Returns:
            MarkupConfig with values from file
        """
        file_path = Path(path)

        if not file_path.exists():
            logger.info(f"Config file {file_path} not found, using defaults")
            return cls()

        with open(file_path, 'r') as f:
            if file_path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        if isinstance(data, dict):
            data = data.get(CONFIG_FILE_SECTION, data)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Config file {file_path} must contain a mapping of settings, "
                f"got {type(data).__name__}"
            )

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Convert the configuration to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    def save_to_file(self, path: str) -> None:
        """Save the configuration as JSON.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({CONFIG_FILE_SECTION: self.to_dict()}, f, indent=2)


def load_config() -> MarkupConfig:
    """Load the config file named by SCHEMA_CONFIG_FILE, else the environment."""
    if settings.SCHEMA_CONFIG_FILE:
        return MarkupConfig.from_file(settings.SCHEMA_CONFIG_FILE)
    return MarkupConfig.from_env()


def _copy_env(target: dict, key: str, env_key: str, convert=None) -> None:
    env_value = os.getenv(env_key)
    if env_value is None or env_value == "":
        return

    if convert is None:
        target[key] = env_value
        return

    try:
        target[key] = convert(env_value)
    except ValueError:
        logger.warning(f"Ignoring {env_key}={env_value!r}: not a valid value")


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(value)
