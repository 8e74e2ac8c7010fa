"""Normalization of scraped product documents into canonical records."""

from normalization.message import DecodedMessage, decode_message
from normalization.product import normalize_product
from normalization.variants import assemble_group, normalize_variant

__all__ = [
    "DecodedMessage",
    "assemble_group",
    "decode_message",
    "normalize_product",
    "normalize_variant",
]
