"""Price formatting for display"""
from typing import Dict

CURRENCY_SYMBOLS: Dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def format_price(amount: float, currency: str = "INR") -> str:
    """Currency symbol plus the whole amount with thousands separators."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    return f"{symbol}{round(amount):,}"
