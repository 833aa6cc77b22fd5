"""Display formatting for on-chain amounts."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

DEFAULT_DECIMALS = 10
DEFAULT_PRECISION = 4
DEFAULT_SYMBOL = "DOT"


def to_token_units(amount: int, decimals: int = DEFAULT_DECIMALS) -> Decimal:
    """Exact token amount for an integer amount in the smallest unit."""
    return Decimal(f"{int(amount)}E-{decimals}")


def format_amount(amount: int, decimals: int = DEFAULT_DECIMALS,
                  precision: int = DEFAULT_PRECISION,
                  symbol: str = DEFAULT_SYMBOL) -> str:
    """Render an amount as e.g. '12.3456 DOT'."""
    with localcontext() as ctx:
        # Amounts can outgrow the default 28 significant digits
        ctx.prec = max(28, len(str(abs(int(amount)))) + precision + 1)
        value = to_token_units(amount, decimals).quantize(
            Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP
        )
    if not symbol:
        return f"{value:f}"
    return f"{value:f} {symbol}"


def format_block(block: int) -> str:
    """Block height with thousands separators."""
    return f"{block:,}"
