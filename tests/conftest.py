"""Shared fixtures: sample extractor output."""

import logging

import pytest

from log_config import CATEGORIES


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for names in CATEGORIES.values():
        for name in names:
            logging.getLogger(name).disabled = False


@pytest.fixture
def zara_document():
    """Typical Zara product page as posted by the extractor."""
    return {
        "isProductPage": True,
        "success": True,
        "title": "Oversize Wool Blend Coat",
        "price": "129.99",
        "originalPrice": 159.99,
        "currency": "EUR",
        "imageUrl": "https://static.zara.net/photos/coat.jpg",
        "description": "Coat with lapel collar.",
        "sku": "8073/450",
        "availability": "InStock",
        "extractionMethod": "json-ld",
        "url": "https://www.zara.com/us/product/123",
        "variants": {
            "colors": [
                {"text": "Black", "selected": True, "value": "background: rgb(10, 20, 30); color: red"},
                {"text": "Camel", "selected": False, "imageUrl": "https://static.zara.net/camel.jpg"},
            ],
            "sizes": [
                {"text": "S", "selected": False, "inStock": True},
                {"text": "M", "selected": True, "value": "{\"inStock\": false}"},
                {"selected": False, "value": "no-text"},
                {"text": "L", "value": "Out of Stock"},
            ],
        },
    }


@pytest.fixture
def louis_vuitton_document():
    return {
        "isProductPage": True,
        "success": True,
        "title": "Neverfull MM",
        "price": 2030,
        "currency": "EUR",
        "url": "https://us.louisvuitton.com/eng-us/item",
    }
