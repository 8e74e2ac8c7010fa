"""Supported-retailer URL handling: validation, matching and search links."""

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlparse

from config import DEFAULT_SEARCH_PATH, PRODUCT_URL_PATTERNS, RETAIL_SITES, SEARCH_PATHS

logger = logging.getLogger(__name__)

_PRODUCT_URL_RES = [re.compile(p) for p in PRODUCT_URL_PATTERNS]
_GENERIC_SECOND_LEVEL = {"com", "co", "net", "org"}


@dataclass
class UrlCheck:
    is_valid: bool = False
    normalized_url: str = ""
    retailer_name: str = ""
    error_message: str = ""
    is_product_page: bool = False


def _host(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def _strip_www(domain: str) -> str:
    return domain[4:] if domain.startswith("www.") else domain


def domains_match(a: str, b: str) -> bool:
    """Compare two hosts, ignoring www., subdomains and regional TLDs.

    'www.zara.com' ~ 'zara.com', 'm.zara.com' ~ 'www.zara.com',
    'www.gucci.com' ~ 'www.gucci.com.tr'
    """
    norm_a, norm_b = _strip_www(a.lower()), _strip_www(b.lower())
    if norm_a == norm_b:
        return True
    if a.lower().endswith("." + norm_b) or b.lower().endswith("." + norm_a):
        return True

    # Regional variant: gucci.com vs gucci.com.tr
    label_a, label_b = _site_label(norm_a), _site_label(norm_b)
    return bool(label_a) and label_a == label_b


def _site_label(domain: str) -> str:
    """'www.gucci.com.tr' → 'gucci', 'shop.mango.com' → 'mango'."""
    parts = domain.split(".")
    if len(parts) < 2:
        return ""
    parts = parts[:-1]
    if len(parts) >= 2 and parts[-1] in _GENERIC_SECOND_LEVEL:
        parts = parts[:-1]
    return parts[-1]


def find_retailer(domain: str) -> Optional[dict]:
    """Return the RETAIL_SITES entry serving this host, or None."""
    for site in RETAIL_SITES:
        site_domain = _host(site["url"])
        if site_domain and domains_match(domain, site_domain):
            return site
    return None


def looks_like_product_page(url: str) -> bool:
    """Guess from the URL path alone whether this is a product detail page."""
    return any(p.search(url) for p in _PRODUCT_URL_RES)


def process_url(text: str) -> UrlCheck:
    """Validate user-entered URL text against the supported retailers."""
    result = UrlCheck(normalized_url=text)

    if not text.strip():
        result.error_message = "Please enter a product URL"
        return result

    url = text.strip()
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    result.normalized_url = url

    domain = _host(url)
    if not domain:
        result.error_message = "Invalid URL format"
        return result

    result.is_product_page = looks_like_product_page(url)

    site = find_retailer(domain)
    if site is None:
        logger.debug(f"No retailer for {domain}")
        result.error_message = "This site is not supported. Please use one of the listed retailers."
        return result

    result.is_valid = True
    result.retailer_name = site["name"]
    return result


def search_url(retailer_name: str, query: str) -> str:
    """Build the retailer's site-search URL for a query ('' if unknown)."""
    site = next((s for s in RETAIL_SITES if s["name"] == retailer_name), None)
    if site is None:
        return ""
    base_url = site["url"].rstrip("/")
    path = SEARCH_PATHS.get(_host(site["url"]), DEFAULT_SEARCH_PATH)
    return base_url + path.format(q=quote(query, safe=""))
