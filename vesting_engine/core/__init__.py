"""Core vesting calculations."""

from vesting_engine.core.aggregator import aggregate, unlocked_at, locked_at
from vesting_engine.core.balance import resolve_transferable, full_balance
from vesting_engine.core.inspector import inspect_schedule, completion_block
from vesting_engine.core.projection import (
    sample_projection,
    summarize_projection,
    projection_end_block,
)
from vesting_engine.core.engine import VestingEngine

__all__ = [
    "aggregate",
    "unlocked_at",
    "locked_at",
    "resolve_transferable",
    "full_balance",
    "inspect_schedule",
    "completion_block",
    "sample_projection",
    "summarize_projection",
    "projection_end_block",
    "VestingEngine",
]
