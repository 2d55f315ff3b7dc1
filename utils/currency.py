from decimal import Decimal

from utils.constants import CURRENCY_SYMBOL


def format_currency(amount: Decimal | float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount as currency string, e.g. 'KSh 1,234.56'."""
    return f"{symbol}{amount:,.2f}"


def format_signed(amount: Decimal | float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format with +/- sign."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}{symbol}{abs(amount):,.2f}"
