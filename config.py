"""Site tables and settings for the product normalizer."""

import os


def _env_int(name: str, default: int) -> int:
    """Read an integer setting; a missing or non-numeric value gives default."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Env-driven settings (read after load_dotenv() in cli.py)
LOG_LEVEL = os.getenv("NORMALIZER_LOG_LEVEL", "INFO")
LOG_MAX_LENGTH = _env_int("NORMALIZER_LOG_MAX_LENGTH", 500)
LOG_CATEGORIES = [
    c.strip()
    for c in os.getenv("NORMALIZER_LOG_CATEGORIES", "product,webview,retailer").split(",")
    if c.strip()
]

# Variant groups the scraper may emit, in output order
VARIANT_GROUPS = ("colors", "sizes", "otherOptions")

# Variant keys captured verbatim into VariantOption.extra
VARIANT_EXTRA_KEYS = ("inStock", "colorValue", "rgbValue", "imageUrl")

# Lower-case substrings in a variant value that mean "not purchasable"
OUT_OF_STOCK_KEYWORDS = (
    "unavailable",
    "out of stock",
    "out-of-stock",
    "disabled",
    "sold out",
)

# URL substring -> brand, used only when the page reported no brand.
# First match wins.
BRAND_MARKERS: list[tuple[str, str]] = [
    ("zara.com", "Zara"),
    ("stradivarius.com", "Stradivarius"),
    ("louisvuitton.com", "Louis Vuitton"),
]

# Storefronts known to mis-report currency. A rule matches when the host
# ends with host_suffix and either starts with host_prefix or has path_segment
# in its path.
CURRENCY_OVERRIDES: list[dict] = [
    {
        "name": "louis_vuitton_us",
        "host_suffix": "louisvuitton.com",
        "host_prefix": "us.",
        "path_segment": "eng-us",
        "currency": "USD",
    },
]

# Display conventions per currency. "default" covers TRY and unknown codes.
CURRENCY_FORMATS = {
    "USD": {"symbol": "$", "position": "prefix", "thousands": ",", "decimal": "."},
    "EUR": {"symbol": "€", "position": "suffix", "thousands": ".", "decimal": ","},
    "GBP": {"symbol": "£", "position": "prefix", "thousands": ",", "decimal": "."},
    "default": {"symbol": " ₺", "position": "suffix", "thousands": ".", "decimal": ","},
}

RETAIL_SITES = [
    {"name": "Gucci", "url": "https://www.gucci.com/tr/en_gb/"},
    {"name": "Louis Vuitton", "url": "https://us.louisvuitton.com/eng-us/homepage"},
    {"name": "Zara", "url": "https://www.zara.com/tr/en/"},
    {"name": "Stradivarius", "url": "https://www.stradivarius.com/tr/en/"},
    {"name": "Cartier", "url": "https://www.cartier.com/en-tr/home"},
    {"name": "Swarovski", "url": "https://www.swarovski.com/en-TR/"},
    {"name": "Guess", "url": "https://www.guess.eu/en-tr/home"},
    {"name": "Mango", "url": "https://shop.mango.com/tr/tr/h/kadin"},
    {"name": "Bershka", "url": "https://www.bershka.com/tr/en/"},
    {"name": "Massimo Dutti", "url": "https://www.massimodutti.com/tr/"},
    {"name": "Deep Atelier", "url": "https://www.deepatelier.co/"},
    {"name": "Pandora", "url": "https://tr.pandora.net/"},
    {"name": "Miu Miu", "url": "https://www.miumiu.com/tr/tr.html"},
    {"name": "Victoria's Secret", "url": "https://www.victoriassecret.com.tr/"},
    {"name": "Nocturne", "url": "https://www.nocturne.com.tr/"},
    {"name": "Beymen", "url": "https://www.beymen.com/tr/kadin-10006"},
    {"name": "Lacoste", "url": "https://www.lacoste.com.tr/"},
    {"name": "Manc", "url": "https://tr.mancofficial.com/"},
    {"name": "Ipekyol", "url": "https://www.ipekyol.com.tr/"},
    {"name": "Sandro", "url": "https://www.sandro.com.tr/"},
]

# Search path per retailer host; anything missing uses DEFAULT_SEARCH_PATH
SEARCH_PATHS = {
    "www.gucci.com": "/search?query={q}",
    "www.zara.com": "/search?q={q}",
    "www.stradivarius.com": "/search?term={q}",
    "www.cartier.com": "/search?q={q}",
    "www.swarovski.com": "/search/?q={q}",
    "www.guess.eu": "/search?q={q}",
    "shop.mango.com": "/search?kw={q}",
    "www.bershka.com": "/search?q={q}",
    "www.massimodutti.com": "/search?term={q}",
    "www.nocturne.com.tr": "/arama?q={q}",
    "www.bluediamond.com.tr": "/arama?q={q}",
    "www.lacoste.com.tr": "/arama?search={q}",
    "tr.mancofficial.com": "/search?type=product&q={q}",
    "www.ipekyol.com.tr": "/arama?q={q}",
}
DEFAULT_SEARCH_PATH = "/search?q={q}"

# URL fragments that usually mean a product detail page
PRODUCT_URL_PATTERNS = [
    r"/p/",
    r"/product/",
    r"/products/",
    r"/item/",
    r"/items/",
    r"/pd/",
    r"/urun/",
    r"/detay/",
    r"/product-detail/",
    r"/ProductDetails",
    r"/productdetail",
    r"/goods/",
    r"/shop/products/",
    r"/product-p/",
]
