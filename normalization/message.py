"""Decode messages posted by the in-page product extractor."""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from log_config import VERBOSE
from models import ProductRecord
from normalization.coerce import parse_decimal
from normalization.product import normalize_product

logger = logging.getLogger(__name__)

# Messages longer than this are logged as head/tail only
_PREVIEW_LIMIT = 1000


@dataclass
class DecodedMessage:
    product: Optional[ProductRecord] = None
    navigated_url: Optional[str] = None


def _preview(message: str) -> str:
    if len(message) > _PREVIEW_LIMIT:
        return f"{message[:100]}...{message[-100:]}"
    return message


def _parse_legacy(message: str, current_url: str) -> Optional[ProductRecord]:
    """Parse the older 'price|title' format."""
    parts = message.split("|")
    if len(parts) < 2:
        return None
    price = parse_decimal(parts[0])
    if price is None:
        return None
    return ProductRecord(
        is_product_page=True,
        success=True,
        title=parts[1],
        price=price,
        url=current_url,
    )


def decode_message(message: str, current_url: str = "") -> DecodedMessage:
    """Turn one extractor message into a product and/or a navigation event.

    The product is only returned for successful product-page extractions.
    """
    logger.log(VERBOSE, f"Raw message ({len(message)} chars): {_preview(message)}")

    try:
        data = json.loads(message)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Message is not JSON ({e}), trying legacy format")
        data = None

    if not isinstance(data, dict):
        return DecodedMessage(product=_parse_legacy(message, current_url))

    result = DecodedMessage()
    if data.get("isProductPage") is True:
        product = normalize_product(data)
        if product.success:
            result.product = product
        else:
            logger.debug("Product extraction reported failure, ignoring")
    else:
        logger.debug("Not a product page")

    url = data.get("url")
    if data.get("navigated") is True and isinstance(url, str):
        result.navigated_url = url
    return result
