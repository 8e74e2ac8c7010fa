"""Product document normalization: raw scraper JSON → ProductRecord."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from config import VARIANT_GROUPS
from models import ProductRecord, VariantOption
from normalization.coerce import flag, opt_str, parse_decimal
from normalization.rules import currency_override, infer_brand
from normalization.variants import assemble_group

logger = logging.getLogger(__name__)

_PASSTHROUGH_FIELDS = {
    "title": "title",
    "imageUrl": "image_url",
    "description": "description",
    "sku": "sku",
    "availability": "availability",
    "extractionMethod": "extraction_method",
}


def assemble_variants(raw_variants: Any) -> Optional[dict[str, list[VariantOption]]]:
    """Build the variants mapping from the raw `variants` object.

    Only recognized groups holding a list are kept; anything else is skipped.
    """
    if not isinstance(raw_variants, Mapping):
        logger.warning(f"Ignoring variants of type {type(raw_variants).__name__}")
        return None

    variants: dict[str, list[VariantOption]] = {}
    for group in VARIANT_GROUPS:
        if group not in raw_variants:
            continue
        entries = raw_variants[group]
        if not isinstance(entries, list):
            logger.warning(f"[{group}] Expected a list, got {type(entries).__name__}")
            continue
        variants[group] = assemble_group(group, entries).options
    return variants


def normalize_product(raw: Any) -> ProductRecord:
    """Build a ProductRecord from one raw scraper document.

    Never raises: malformed fields degrade to their defaults, malformed variant
    entries are dropped, and a non-mapping document gives an empty record.
    """
    if not isinstance(raw, Mapping):
        logger.error(f"Expected a JSON object, got {type(raw).__name__}")
        return ProductRecord()

    url = opt_str(raw, "url") or ""

    variants = None
    if "variants" in raw:
        variants = assemble_variants(raw["variants"])

    brand = opt_str(raw, "brand")
    if brand is None:
        brand = infer_brand(url)
        if brand:
            logger.info(f"Brand inferred from URL: {brand}")

    currency = opt_str(raw, "currency")
    forced = currency_override(url)
    if forced:
        if currency != forced:
            logger.info(f"Currency override for {url}: {currency} → {forced}")
        currency = forced

    fields = {attr: opt_str(raw, key) for key, attr in _PASSTHROUGH_FIELDS.items()}

    record = ProductRecord(
        is_product_page=flag(raw, "isProductPage"),
        success=flag(raw, "success"),
        price=parse_decimal(raw.get("price")),
        original_price=parse_decimal(raw.get("originalPrice")),
        currency=currency,
        brand=brand,
        url=url,
        variants=variants,
        **fields,
    )

    if variants:
        counts = ", ".join(f"{g}={len(opts)}" for g, opts in variants.items())
        logger.debug(f"Normalized {url or '<no url>'} ({counts})")
    return record
