"""Projection sampler: time-sampled unlock curve for charting."""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence
import structlog

from vesting_engine.core.aggregator import locked_at, validate_block
from vesting_engine.core.inspector import DEFAULT_SECONDS_PER_BLOCK, completion_block
from vesting_engine.models.vesting_data import (
    VestingSchedule,
    ProjectionSample,
    ProjectionSummary,
)
from vesting_engine.utils.time import (
    blocks_to_days,
    days_to_months,
    estimate_block_time,
    to_utc_timestamp,
)

logger = structlog.get_logger(__name__)

DEFAULT_MIN_POINTS = 10
DEFAULT_MAX_POINTS = 100


def projection_end_block(schedules: Iterable[VestingSchedule], reference_block: int) -> int:
    """
    Block at which every completing schedule is fully unlocked.
    
    Degenerate schedules never complete and are ignored. An empty schedule
    completes at its starting block. The result is never below reference_block.
    """
    end_block = reference_block
    for schedule in schedules:
        block = completion_block(schedule)
        if block is not None and block > end_block:
            end_block = block
    return end_block


def sample_projection(schedules: Iterable[VestingSchedule], reference_block: int,
                      max_points: int = DEFAULT_MAX_POINTS,
                      seconds_per_block: int = DEFAULT_SECONDS_PER_BLOCK,
                      now: Optional[datetime] = None,
                      min_points: int = DEFAULT_MIN_POINTS) -> List[ProjectionSample]:
    """
    Sample the locked amount from reference_block until full unlock.
    
    Samples are stride-spaced and ordered by ascending block. The first sample
    is the reference point; the last sits exactly on the end block.
    
    Args:
        schedules: Vesting tranches (pass one to chart a single schedule)
        reference_block: Current block height
        max_points: Upper bound on stride-spaced samples
        seconds_per_block: Block cadence used for timestamps
        now: Wall-clock instant matching reference_block (default: now, UTC)
        min_points: Lower bound on stride-spaced samples
        
    Returns:
        List of ProjectionSample, non-increasing in locked_amount
    """
    validate_block(reference_block)
    if max_points < 1:
        raise ValueError(f"max_points must be at least 1, got {max_points}")
    if min_points < 1:
        raise ValueError(f"min_points must be at least 1, got {min_points}")
    
    schedules = list(schedules)
    now = to_utc_timestamp(now)
    
    end_block = projection_end_block(schedules, reference_block)
    total_blocks = end_block - reference_block
    point_count = min(max_points, max(min_points, total_blocks))
    stride = max(1, total_blocks // point_count)
    
    samples = []
    for i in range(point_count + 1):
        block = min(reference_block + i * stride, end_block)
        samples.append(_build_sample(schedules, block, reference_block, now,
                                     seconds_per_block, is_reference_point=(i == 0)))
        if block >= end_block:
            break
    
    # Stride may fall short of the end block when it does not divide the span
    if samples[-1].block < end_block:
        samples.append(_build_sample(schedules, end_block, reference_block, now,
                                     seconds_per_block))
    
    logger.debug("Projection sampled",
                 reference_block=reference_block,
                 end_block=end_block,
                 stride=stride,
                 sample_count=len(samples))
    
    return samples


def summarize_projection(schedules: Sequence[VestingSchedule], reference_block: int,
                         seconds_per_block: int = DEFAULT_SECONDS_PER_BLOCK,
                         now: Optional[datetime] = None) -> ProjectionSummary:
    """Headline figures: currently locked, full-unlock block and date, time remaining."""
    validate_block(reference_block)
    schedules = list(schedules)
    now = to_utc_timestamp(now)
    
    end_block = projection_end_block(schedules, reference_block)
    days = blocks_to_days(end_block - reference_block, seconds_per_block)
    
    return ProjectionSummary(
        reference_block=reference_block,
        currently_locked=locked_at(schedules, reference_block),
        fully_unlocked_block=end_block,
        fully_unlocked_at=estimate_block_time(end_block, reference_block, now, seconds_per_block),
        days_until_fully_unlocked=days,
        months_until_fully_unlocked=days_to_months(days),
        never_fully_unlocks=any(s.is_degenerate for s in schedules),
    )


def _build_sample(schedules: Sequence[VestingSchedule], block: int, reference_block: int,
                  now: datetime, seconds_per_block: int,
                  is_reference_point: bool = False) -> ProjectionSample:
    return ProjectionSample(
        block=block,
        timestamp=estimate_block_time(block, reference_block, now, seconds_per_block),
        locked_amount=locked_at(schedules, block),
        is_reference_point=is_reference_point,
    )
