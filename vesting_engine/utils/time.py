"""Time utility functions for block-based vesting estimates."""

from datetime import datetime, timedelta, timezone
from typing import Optional

SECONDS_PER_DAY = 24 * 60 * 60
DAYS_PER_MONTH = 30
MAX_UTC = datetime.max.replace(tzinfo=timezone.utc)
MIN_UTC = datetime.min.replace(tzinfo=timezone.utc)


def get_current_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc_timestamp(timestamp: Optional[datetime]) -> datetime:
    """Normalize a datetime to UTC; None means now."""
    if timestamp is None:
        return get_current_utc()
    if not isinstance(timestamp, datetime):
        raise ValueError(f"Unsupported timestamp type: {type(timestamp)}")
    # Ensure timezone awareness
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def estimate_block_time(block: int, reference_block: int, now: datetime,
                        seconds_per_block: int) -> datetime:
    """
    Wall-clock estimate for ``block`` assuming a constant block cadence.
    
    Estimates beyond the datetime range clamp to MAX_UTC / MIN_UTC.
    """
    seconds = (block - reference_block) * seconds_per_block
    if seconds >= (MAX_UTC - now).total_seconds():
        return MAX_UTC
    if seconds <= (MIN_UTC - now).total_seconds():
        return MIN_UTC
    return now + timedelta(seconds=seconds)


def blocks_to_days(blocks: int, seconds_per_block: int) -> int:
    """Whole days (rounded up) covered by ``blocks``."""
    if blocks <= 0:
        return 0
    return -(-(blocks * seconds_per_block) // SECONDS_PER_DAY)


def days_to_months(days: int) -> int:
    """Whole 30-day months (rounded up) covered by ``days``."""
    if days <= 0:
        return 0
    return -(-days // DAYS_PER_MONTH)
