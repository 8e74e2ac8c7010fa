"""Canonical product models produced by the normalizer."""

import json
import re
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from config import OUT_OF_STOCK_KEYWORDS
from pricing import format_price

_RGB_RE = re.compile(r"rgb\([^()]+\)")


class VariantOption(BaseModel):
    """One selectable value of a variant group (a size "M", a color swatch)."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    selected: bool = False
    value: Optional[str] = None  # JSON fragment, URL, rgb() string or free text
    extra: Optional[dict[str, Any]] = None  # inStock / colorValue / rgbValue / imageUrl

    def _extra(self, key: str) -> tuple[bool, Any]:
        if self.extra is not None and key in self.extra:
            return True, self.extra[key]
        return False, None

    @property
    def is_in_stock(self) -> bool:
        for rule in STOCK_RULES:
            verdict = rule(self)
            if verdict is not None:
                return verdict
        # Pages omit stock data for available items more often than not
        return True

    @property
    def color_value(self) -> Any:
        found, color = self._extra("colorValue")
        return color if found else self.value

    @property
    def rgb_value(self) -> Any:
        found, rgb = self._extra("rgbValue")
        if found:
            return rgb
        if self.value:
            m = _RGB_RE.search(self.value)
            if m:
                return m.group(0)
        return None

    @property
    def image_url(self) -> Any:
        found, url = self._extra("imageUrl")
        if found:
            return url
        if self.value and self.value.startswith(("http", "//")):
            return self.value
        return None

    def to_document(self) -> dict:
        """Return the raw variant-entry form of this option."""
        doc: dict[str, Any] = {"text": self.text, "selected": self.selected}
        if self.value is not None:
            doc["value"] = self.value
        if self.extra:
            doc.update(self.extra)
        return doc


# --- Stock inference rules, evaluated in order; None means "no signal" ---

def _stock_from_extra(option: VariantOption) -> Optional[bool]:
    found, in_stock = option._extra("inStock")
    if found:
        return in_stock is True
    return None


def _stock_from_embedded_json(option: VariantOption) -> Optional[bool]:
    """Read inStock from a value like '{"inStock": false, "sku": "1"}'."""
    if not option.value or "inStock" not in option.value:
        return None
    try:
        data = json.loads(option.value)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data.get("inStock") is True


def _stock_from_keywords(option: VariantOption) -> Optional[bool]:
    if not option.value:
        return None
    lowered = option.value.lower()
    if any(keyword in lowered for keyword in OUT_OF_STOCK_KEYWORDS):
        return False
    return None


STOCK_RULES: tuple[Callable[[VariantOption], Optional[bool]], ...] = (
    _stock_from_extra,
    _stock_from_embedded_json,
    _stock_from_keywords,
)


class ProductRecord(BaseModel):
    """Validated view of one scraped product page."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_product_page: bool = False
    success: bool = False
    title: Optional[str] = None
    price: Optional[float] = None
    original_price: Optional[float] = None
    currency: Optional[str] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    sku: Optional[str] = None
    availability: Optional[str] = None
    brand: Optional[str] = None
    extraction_method: Optional[str] = None
    url: str = ""
    variants: Optional[dict[str, list[VariantOption]]] = None

    @property
    def formatted_price(self) -> str:
        return format_price(self.price, self.currency)

    @property
    def formatted_original_price(self) -> str:
        return format_price(self.original_price, self.currency)

    def to_document(self) -> dict:
        """Return the raw-document (camelCase) form of this record.

        Feeding the result back through normalize_product() gives an equal record.
        """
        doc = self.model_dump(by_alias=True, exclude_none=True, exclude={"variants"})
        if self.variants is not None:
            doc["variants"] = {
                group: [option.to_document() for option in options]
                for group, options in self.variants.items()
            }
        return doc
