"""Logging setup for the normalizer.

Adds a VERBOSE level below DEBUG, per-category switches and a filter that
truncates long messages (raw scraper dumps can be hundreds of KB).
"""

import logging
from typing import Iterable, Optional

VERBOSE = 5
logging.addLevelName(VERBOSE, "VERBOSE")

# Category name -> logger names it controls
CATEGORIES = {
    "product": ["normalization.product", "normalization.variants"],
    "webview": ["normalization.message"],
    "retailer": ["retailers"],
}

# Substrings of messages that are never worth printing
NOISE_PATTERNS = [
    "Instance of",
    "WebViewController",
    "PlatformView",
]


class MessageFilter(logging.Filter):
    """Drop noise lines and shorten messages over max_length."""

    def __init__(self, max_length: int = 500):
        super().__init__()
        self.max_length = max_length

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if any(pattern in message for pattern in NOISE_PATTERNS):
            return False
        if self.max_length and len(message) > self.max_length:
            record.msg = f"{message[:self.max_length]}... (truncated)"
            record.args = ()
        return True


def parse_level(level: str | int) -> int:
    """Accept 'debug', 'VERBOSE', '10' or 10; unknown names give INFO."""
    if isinstance(level, int):
        return level
    text = level.strip().upper()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: str | int = logging.INFO,
    max_length: int = 500,
    categories: Optional[Iterable[str]] = None,
) -> None:
    """Configure root logging.

    Args:
        level: Level name or number (VERBOSE is accepted)
        max_length: Truncate messages longer than this (0 disables)
        categories: Enabled categories; None enables all of CATEGORIES
    """
    handler = logging.StreamHandler()
    handler.addFilter(MessageFilter(max_length))
    logging.basicConfig(
        level=parse_level(level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[handler],
        force=True,
    )

    enabled = set(CATEGORIES) if categories is None else set(categories)
    for category, logger_names in CATEGORIES.items():
        for name in logger_names:
            logging.getLogger(name).disabled = category not in enabled
