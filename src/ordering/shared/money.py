"""Money helpers: currency-exact amounts and Brazilian formatting.

Prices live in Protean Float fields; every sum or product goes through
``to_money`` first so totals are exact to the centavo.
"""

from decimal import ROUND_HALF_UP, Decimal

CURRENCY = "BRL"
CURRENCY_SYMBOL = "R$"
TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    return Decimal(str(value)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def format_amount(value) -> str:
    """Format an amount the pt-BR way, without symbol: ``1.234,56``."""
    amount = to_money(value)
    grouped = f"{amount:,.2f}"
    return grouped.replace(",", "_").replace(".", ",").replace("_", ".")


def format_price(value) -> str:
    """Format an amount with the currency symbol: ``R$ 1.234,56``."""
    return f"{CURRENCY_SYMBOL} {format_amount(value)}"
