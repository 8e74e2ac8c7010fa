"""Price display helper."""

from typing import Optional

from config import CURRENCY_FORMATS


def format_price(price: Optional[float], currency: Optional[str]) -> str:
    """Format a price with the symbol and separators of its currency.

    Examples:
      (1234.5, 'USD') → '$1,234.50'
      (1234.5, 'EUR') → '1.234,50€'
      (1234.5, 'TRY') → '1.234,50 ₺'
    """
    if price is None:
        return ""

    fmt = CURRENCY_FORMATS.get(currency or "", CURRENCY_FORMATS["default"])
    # Render en_US style first, then swap in the locale's separators
    number = f"{price:,.2f}"
    number = number.replace(",", "\0").replace(".", fmt["decimal"]).replace("\0", fmt["thousands"])

    if fmt["position"] == "prefix":
        if number.startswith("-"):
            return f"-{fmt['symbol']}{number[1:]}"
        return f"{fmt['symbol']}{number}"
    return f"{number}{fmt['symbol']}"
