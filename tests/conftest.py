"""Pytest configuration and fixtures for vesting engine tests."""

import pytest
from datetime import datetime, timezone

from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.models.vesting_data import VestingSchedule, AccountBalance


# ============================================================================
# TIME FIXTURES
# ============================================================================

@pytest.fixture
def now():
    """Wall-clock instant matching the reference block."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# SCHEDULE FIXTURES
# ============================================================================

@pytest.fixture
def single_schedule():
    """1000 units released at 10 per block from block 100."""
    return VestingSchedule(locked=1000, per_block=10, starting_block=100)


@pytest.fixture
def two_schedules():
    """Two overlapping tranches with different start blocks."""
    return [
        VestingSchedule(locked=1000, per_block=10, starting_block=0),
        VestingSchedule(locked=500, per_block=5, starting_block=50),
    ]


@pytest.fixture
def future_schedule():
    """Tranche that has not started yet at low block heights."""
    return VestingSchedule(locked=100, per_block=1, starting_block=1000)


@pytest.fixture
def degenerate_schedule():
    """Tranche holding value with no per-block release."""
    return VestingSchedule(locked=100, per_block=0, starting_block=5)


@pytest.fixture
def dot_schedule():
    """100 DOT (10 decimals) released at 1 DOT per block from block 100."""
    return VestingSchedule(
        locked=1_000_000_000_000,
        per_block=10_000_000_000,
        starting_block=100,
    )


# ============================================================================
# BALANCE FIXTURES
# ============================================================================

@pytest.fixture
def dot_balance():
    """150 DOT free, 50 DOT reserved."""
    return AccountBalance(free=1_500_000_000_000, reserved=500_000_000_000)


@pytest.fixture
def snapshot_document():
    """Account snapshot as produced by a chain-state query."""
    return {
        "schedules": [
            {"locked": 1_000_000_000_000, "per_block": 10_000_000_000, "starting_block": 100},
        ],
        "balance": {"free": 1_500_000_000_000, "reserved": 500_000_000_000},
    }


# ============================================================================
# CONFIG FIXTURES
# ============================================================================

@pytest.fixture
def config():
    """Engine configuration with test-friendly logging."""
    return VestingEngineConfig(log_level="WARNING", log_format="text")
