"""
Vesting Calculation Engine

Locked and unlocked amounts, transferable balance, per-schedule progress
and projected unlock curves for linear on-chain vesting schedules.
"""

__version__ = "1.0.0"
__description__ = "Linear vesting schedule calculation engine"

from vesting_engine.core.engine import VestingEngine
from vesting_engine.core.aggregator import aggregate
from vesting_engine.core.balance import resolve_transferable
from vesting_engine.core.inspector import inspect_schedule
from vesting_engine.core.projection import sample_projection
from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.models.vesting_data import VestingSchedule, AccountBalance

__all__ = [
    "VestingEngine",
    "VestingEngineConfig",
    "VestingSchedule",
    "AccountBalance",
    "aggregate",
    "resolve_transferable",
    "inspect_schedule",
    "sample_projection",
]
