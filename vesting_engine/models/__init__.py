"""Data models for the vesting calculation engine."""

from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.models.vesting_data import (
    VestingSchedule,
    AccountBalance,
    AggregateVestingState,
    ScheduleInspection,
    ProjectionSample,
    ProjectionSummary,
    AccountVestingSummary,
    parse_schedule,
    parse_schedules,
    parse_balance,
)

__all__ = [
    "VestingEngineConfig",
    "VestingSchedule",
    "AccountBalance",
    "AggregateVestingState",
    "ScheduleInspection",
    "ProjectionSample",
    "ProjectionSummary",
    "AccountVestingSummary",
    "parse_schedule",
    "parse_schedules",
    "parse_balance",
]
