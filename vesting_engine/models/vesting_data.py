"""Data models for vesting schedules and derived vesting results."""

from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from dataclasses import dataclass, field
from pydantic import BaseModel, Field

from vesting_engine.exceptions import InvalidAmountError


class VestingSchedule(BaseModel):
    """One linear vesting tranche as stored on chain."""
    locked: int = Field(..., ge=0, strict=True, description="Total amount locked in the smallest unit")
    per_block: int = Field(..., ge=0, strict=True, alias="perBlock",
                           description="Amount released per elapsed block")
    starting_block: int = Field(..., ge=0, strict=True, alias="startingBlock",
                                description="Block height at which release begins")
    
    class Config:
        frozen = True
        populate_by_name = True
    
    @property
    def is_degenerate(self) -> bool:
        """True when the schedule holds value but never releases any."""
        return self.per_block == 0 and self.locked > 0


class AccountBalance(BaseModel):
    """Account balance snapshot supplied by the caller."""
    free: int = Field(..., ge=0, strict=True, description="Spendable plus vesting-locked balance")
    reserved: int = Field(default=0, ge=0, strict=True, description="Balance held for other protocol reasons")
    
    class Config:
        frozen = True
    
    @property
    def full_balance(self) -> int:
        """Free plus reserved balance."""
        return self.free + self.reserved


@dataclass(frozen=True)
class AggregateVestingState:
    """Locked/unlocked totals across a set of schedules at one block."""
    reference_block: int
    total_locked: int
    total_unlocked: int
    currently_locked: int
    schedule_count: int = 0


@dataclass(frozen=True)
class ScheduleInspection:
    """Derived facts for a single schedule at a reference block."""
    reference_block: int
    unlocked_amount: int
    locked_amount: int
    completion_block: Optional[int]
    percent_unlocked: int
    is_complete: bool
    
    # Timeline estimates
    blocks_remaining: Optional[int] = None
    days_remaining: Optional[int] = None
    estimated_completion_at: Optional[datetime] = None
    
    @property
    def never_completes(self) -> bool:
        """True for a degenerate schedule with no completion block."""
        return self.completion_block is None


@dataclass(frozen=True)
class ProjectionSample:
    """One point of the projected unlock curve."""
    block: int
    timestamp: datetime
    locked_amount: int
    is_reference_point: bool = False


@dataclass(frozen=True)
class ProjectionSummary:
    """Headline figures of a projection."""
    reference_block: int
    currently_locked: int
    fully_unlocked_block: int
    fully_unlocked_at: datetime
    days_until_fully_unlocked: int
    months_until_fully_unlocked: int
    never_fully_unlocks: bool = False


@dataclass(frozen=True)
class AccountVestingSummary:
    """Everything the engine derives for one account snapshot."""
    reference_block: int
    aggregate: AggregateVestingState
    full_balance: int
    free_balance: int
    transferable_balance: int
    schedules: Tuple[ScheduleInspection, ...] = field(default_factory=tuple)
    projection: Optional[ProjectionSummary] = None
    samples: Tuple[ProjectionSample, ...] = field(default_factory=tuple)
    
    @property
    def has_vesting(self) -> bool:
        """True when at least one schedule exists."""
        return self.aggregate.schedule_count > 0


def _to_int(value: Any, name: str) -> Any:
    """Turn decimal strings from chain tooling into ints; leave other types to validation."""
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise InvalidAmountError(f"{name} is not an integer string: {value!r}") from None
    return value


def parse_schedule(raw: Mapping[str, Any]) -> VestingSchedule:
    """Build a schedule from a chain-shaped record (snake_case or camelCase keys)."""
    return VestingSchedule(
        locked=_to_int(raw.get("locked"), "locked"),
        per_block=_to_int(raw.get("per_block", raw.get("perBlock")), "per_block"),
        starting_block=_to_int(raw.get("starting_block", raw.get("startingBlock")), "starting_block"),
    )


def parse_schedules(raw: Optional[Iterable[Mapping[str, Any]]]) -> List[VestingSchedule]:
    """Build schedules from chain-shaped records; a missing list means no vesting."""
    if raw is None:
        return []
    return [parse_schedule(item) for item in raw]


def parse_balance(raw: Optional[Mapping[str, Any]]) -> AccountBalance:
    """Build a balance snapshot; missing fields count as zero."""
    raw = raw or {}
    return AccountBalance(
        free=_to_int(raw.get("free", 0), "free"),
        reserved=_to_int(raw.get("reserved", 0), "reserved"),
    )

