"""Utility functions for the vesting engine."""

from vesting_engine.utils.formatting import (
    to_token_units,
    format_amount,
    format_block,
)
from vesting_engine.utils.time import (
    get_current_utc,
    blocks_to_days,
    days_to_months,
)

__all__ = [
    "to_token_units",
    "format_amount",
    "format_block",
    "get_current_utc",
    "blocks_to_days",
    "days_to_months",
]
