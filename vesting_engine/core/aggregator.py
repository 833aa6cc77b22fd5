"""Vesting aggregator: locked and unlocked totals across schedules."""

from typing import Iterable, Sequence
import structlog

from vesting_engine.exceptions import InvalidBlockHeightError
from vesting_engine.models.vesting_data import VestingSchedule, AggregateVestingState

logger = structlog.get_logger(__name__)


def validate_block(block: int, name: str = "reference_block") -> int:
    """Reject block heights that are not non-negative integers."""
    if isinstance(block, bool) or not isinstance(block, int):
        raise InvalidBlockHeightError(f"{name} must be an integer, got {type(block).__name__}")
    if block < 0:
        raise InvalidBlockHeightError(f"{name} must be non-negative, got {block}")
    return block


def unlocked_at(schedule: VestingSchedule, block: int) -> int:
    """
    Amount a single schedule has released by ``block``.
    
    Release is linear from ``starting_block`` and capped at ``locked``.
    
    Args:
        schedule: Vesting tranche
        block: Block height to evaluate at
        
    Returns:
        Unlocked amount in the smallest unit, 0 <= result <= schedule.locked
    """
    blocks_elapsed = max(0, block - schedule.starting_block)
    unlocked = blocks_elapsed * schedule.per_block
    return min(unlocked, schedule.locked)


def aggregate(schedules: Iterable[VestingSchedule], reference_block: int) -> AggregateVestingState:
    """
    Aggregate vesting state for a set of schedules at a reference block.
    
    Args:
        schedules: Vesting tranches of one account (any order)
        reference_block: Block height to evaluate at
        
    Returns:
        AggregateVestingState with total locked, total unlocked and currently locked
    """
    validate_block(reference_block)
    
    total_locked = 0
    total_unlocked = 0
    count = 0
    
    for schedule in schedules:
        total_locked += schedule.locked
        total_unlocked += unlocked_at(schedule, reference_block)
        count += 1
    
    state = AggregateVestingState(
        reference_block=reference_block,
        total_locked=total_locked,
        total_unlocked=total_unlocked,
        currently_locked=total_locked - total_unlocked,
        schedule_count=count,
    )
    
    logger.debug("Vesting aggregated",
                 reference_block=reference_block,
                 schedule_count=count,
                 total_locked=total_locked,
                 currently_locked=state.currently_locked)
    
    return state


def locked_at(schedules: Sequence[VestingSchedule], block: int) -> int:
    """Currently locked vesting across ``schedules`` at ``block``."""
    return aggregate(schedules, block).currently_locked
