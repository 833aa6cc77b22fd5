"""Request and response schemas for the vesting API.

Amounts leave the API as decimal strings; they routinely exceed the 2^53
range JSON consumers can represent exactly.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from vesting_engine.models.vesting_data import (
    VestingSchedule,
    AccountBalance,
    AggregateVestingState,
    ScheduleInspection,
    ProjectionSample,
    ProjectionSummary,
)


# ============================================================================
# REQUESTS
# ============================================================================

class VestingRequest(BaseModel):
    """Schedules of one account evaluated at a reference block."""
    schedules: List[VestingSchedule] = Field(default_factory=list, description="Vesting schedules")
    reference_block: int = Field(..., ge=0, description="Reference block height")
    now: Optional[datetime] = Field(None, description="Wall-clock instant of the reference block (default: now)")


class InspectRequest(VestingRequest):
    """Per-schedule inspection request."""
    schedule_index: Optional[int] = Field(None, ge=0, description="Inspect a single schedule (0-based)")


class ProjectionRequest(VestingRequest):
    """Unlock curve request."""
    max_points: Optional[int] = Field(None, ge=1, description="Maximum number of samples")
    schedule_index: Optional[int] = Field(None, ge=0, description="Project a single schedule (0-based)")


class TransferableRequest(BaseModel):
    """Transferable balance request."""
    balance: AccountBalance = Field(..., description="Account balance snapshot")
    locked_vesting: int = Field(..., ge=0, description="Currently locked vesting")


class AccountSummaryRequest(VestingRequest):
    """Full account summary request."""
    balance: AccountBalance = Field(default_factory=lambda: AccountBalance(free=0),
                                    description="Account balance snapshot")


# ============================================================================
# RESPONSES
# ============================================================================

class AggregateResponse(BaseModel):
    """Aggregate vesting state."""
    reference_block: int = Field(..., description="Reference block height")
    total_locked: str = Field(..., description="Sum of originally locked amounts")
    total_unlocked: str = Field(..., description="Amount released by the reference block")
    currently_locked: str = Field(..., description="Amount still locked")
    schedule_count: int = Field(..., ge=0, description="Number of schedules")
    
    @classmethod
    def from_state(cls, state: AggregateVestingState) -> "AggregateResponse":
        return cls(
            reference_block=state.reference_block,
            total_locked=str(state.total_locked),
            total_unlocked=str(state.total_unlocked),
            currently_locked=str(state.currently_locked),
            schedule_count=state.schedule_count,
        )


class BalanceResponse(BaseModel):
    """Balance figures."""
    full_balance: str = Field(..., description="Free plus reserved balance")
    free_balance: str = Field(..., description="Free balance")
    transferable_balance: str = Field(..., description="Free balance not held by vesting")


class ScheduleInspectionResponse(BaseModel):
    """Per-schedule progress."""
    index: int = Field(..., ge=0, description="Schedule position in the request")
    unlocked_amount: str
    locked_amount: str
    completion_block: Optional[int] = Field(None, description="Null when the schedule never completes")
    percent_unlocked: int = Field(..., ge=0, le=100)
    is_complete: bool
    never_completes: bool
    blocks_remaining: Optional[int] = None
    days_remaining: Optional[int] = None
    estimated_completion_at: Optional[datetime] = None
    
    @classmethod
    def from_inspection(cls, index: int,
                        inspection: ScheduleInspection) -> "ScheduleInspectionResponse":
        return cls(
            index=index,
            unlocked_amount=str(inspection.unlocked_amount),
            locked_amount=str(inspection.locked_amount),
            completion_block=inspection.completion_block,
            percent_unlocked=inspection.percent_unlocked,
            is_complete=inspection.is_complete,
            never_completes=inspection.never_completes,
            blocks_remaining=inspection.blocks_remaining,
            days_remaining=inspection.days_remaining,
            estimated_completion_at=inspection.estimated_completion_at,
        )


class ProjectionSampleResponse(BaseModel):
    """One point of the unlock curve."""
    block: int
    timestamp: datetime
    locked_amount: str
    is_reference_point: bool
    
    @classmethod
    def from_sample(cls, sample: ProjectionSample) -> "ProjectionSampleResponse":
        return cls(
            block=sample.block,
            timestamp=sample.timestamp,
            locked_amount=str(sample.locked_amount),
            is_reference_point=sample.is_reference_point,
        )


class ProjectionSummaryResponse(BaseModel):
    """Headline projection figures."""
    currently_locked: str
    fully_unlocked_block: int
    fully_unlocked_at: datetime
    days_until_fully_unlocked: int
    months_until_fully_unlocked: int
    never_fully_unlocks: bool
    
    @classmethod
    def from_summary(cls, summary: ProjectionSummary) -> "ProjectionSummaryResponse":
        return cls(
            currently_locked=str(summary.currently_locked),
            fully_unlocked_block=summary.fully_unlocked_block,
            fully_unlocked_at=summary.fully_unlocked_at,
            days_until_fully_unlocked=summary.days_until_fully_unlocked,
            months_until_fully_unlocked=summary.months_until_fully_unlocked,
            never_fully_unlocks=summary.never_fully_unlocks,
        )


class ProjectionResponse(BaseModel):
    """Unlock curve with its headline figures."""
    reference_block: int
    summary: ProjectionSummaryResponse
    samples: List[ProjectionSampleResponse]


class AccountSummaryResponse(BaseModel):
    """Everything derived for one account snapshot."""
    reference_block: int
    has_vesting: bool
    aggregate: AggregateResponse
    balance: BalanceResponse
    schedules: List[ScheduleInspectionResponse] = Field(default_factory=list)
    projection: Optional[ProjectionResponse] = None


class HealthResponse(BaseModel):
    """Service health."""
    status: str = Field(default="ok")
    version: str
    timestamp: datetime
