"""URL-keyed site heuristics: brand fallback and currency overrides."""

from typing import Optional
from urllib.parse import urlparse

from config import BRAND_MARKERS, CURRENCY_OVERRIDES


def _split_url(url: str) -> tuple[str, list[str]]:
    """Return (lower-cased host, path segments), tolerating a missing scheme."""
    lowered = url.strip().lower()
    if "//" not in lowered:
        lowered = "//" + lowered
    try:
        parsed = urlparse(lowered)
        host = parsed.hostname or ""
    except ValueError:
        return "", []
    segments = [s for s in parsed.path.split("/") if s]
    return host, segments


def infer_brand(url: str) -> Optional[str]:
    """Return the brand implied by a known site marker in the URL."""
    lowered = url.lower()
    for marker, brand in BRAND_MARKERS:
        if marker in lowered:
            return brand
    return None


def currency_override(url: str) -> Optional[str]:
    """Return the forced currency for storefronts that mis-report it.

    'https://us.louisvuitton.com/eng-us/item' → 'USD'
    'https://eu.louisvuitton.com/eng-e1/item' → None
    """
    host, segments = _split_url(url)
    if not host:
        return None
    for rule in CURRENCY_OVERRIDES:
        suffix = rule["host_suffix"]
        if host != suffix and not host.endswith("." + suffix):
            continue
        if host.startswith(rule["host_prefix"]) or rule["path_segment"] in segments:
            return rule["currency"]
    return None
