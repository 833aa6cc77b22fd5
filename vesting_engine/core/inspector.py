"""Schedule inspector: per-tranche completion and progress."""

from datetime import datetime
from typing import Optional
import structlog

from vesting_engine.core.aggregator import unlocked_at, validate_block
from vesting_engine.models.vesting_data import VestingSchedule, ScheduleInspection
from vesting_engine.utils.time import (
    blocks_to_days,
    estimate_block_time,
    to_utc_timestamp,
)

logger = structlog.get_logger(__name__)

DEFAULT_SECONDS_PER_BLOCK = 6


def completion_block(schedule: VestingSchedule) -> Optional[int]:
    """
    Block at which a schedule has released everything.
    
    Returns None for a degenerate schedule (value locked, nothing released
    per block); such a schedule never completes.
    """
    if schedule.locked == 0:
        return schedule.starting_block
    if schedule.per_block == 0:
        return None
    return schedule.starting_block + schedule.locked // schedule.per_block


def inspect_schedule(schedule: VestingSchedule, reference_block: int,
                     seconds_per_block: int = DEFAULT_SECONDS_PER_BLOCK,
                     now: Optional[datetime] = None) -> ScheduleInspection:
    """
    Inspect a single schedule at a reference block.
    
    Args:
        schedule: Vesting tranche
        reference_block: Block height to evaluate at
        seconds_per_block: Block cadence used for time estimates
        now: Wall-clock instant matching reference_block (default: now, UTC)
        
    Returns:
        ScheduleInspection for the tranche
    """
    validate_block(reference_block)
    now = to_utc_timestamp(now)
    
    unlocked = unlocked_at(schedule, reference_block)
    end_block = completion_block(schedule)
    
    if schedule.locked == 0:
        percent_unlocked = 0
        is_complete = True
    else:
        percent_unlocked = unlocked * 100 // schedule.locked
        is_complete = end_block is not None and reference_block >= end_block
    
    if end_block is None:
        logger.warning("Schedule never completes",
                       locked=schedule.locked,
                       per_block=schedule.per_block,
                       starting_block=schedule.starting_block)
        blocks_remaining = None
        days_remaining = None
        estimated_completion_at = None
    else:
        blocks_remaining = 0 if is_complete else max(0, end_block - reference_block)
        days_remaining = blocks_to_days(blocks_remaining, seconds_per_block)
        estimated_completion_at = estimate_block_time(
            reference_block + blocks_remaining, reference_block, now, seconds_per_block
        )
    
    return ScheduleInspection(
        reference_block=reference_block,
        unlocked_amount=unlocked,
        locked_amount=schedule.locked - unlocked,
        completion_block=end_block,
        percent_unlocked=percent_unlocked,
        is_complete=is_complete,
        blocks_remaining=blocks_remaining,
        days_remaining=days_remaining,
        estimated_completion_at=estimated_completion_at,
    )
