"""Vesting calculation endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from vesting_engine.api.dependencies import get_engine
from vesting_engine.api.schemas import (
    VestingRequest,
    InspectRequest,
    ProjectionRequest,
    TransferableRequest,
    AccountSummaryRequest,
    AggregateResponse,
    BalanceResponse,
    ScheduleInspectionResponse,
    ProjectionSampleResponse,
    ProjectionSummaryResponse,
    ProjectionResponse,
    AccountSummaryResponse,
)
from vesting_engine.core.balance import full_balance, resolve_transferable
from vesting_engine.core.engine import VestingEngine
from vesting_engine.models.vesting_data import VestingSchedule

router = APIRouter()
logger = structlog.get_logger(__name__)


def _select(schedules: List[VestingSchedule], index: Optional[int]) -> List[VestingSchedule]:
    if index is None:
        return list(schedules)
    if index >= len(schedules):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Schedule index {index} out of range ({len(schedules)} schedules)"
        )
    return [schedules[index]]


@router.post("/aggregate", response_model=AggregateResponse)
async def aggregate_vesting(request: VestingRequest,
                            engine: VestingEngine = Depends(get_engine)):
    """Total locked, total unlocked and currently locked vesting."""
    state = engine.aggregate(request.schedules, request.reference_block)
    return AggregateResponse.from_state(state)


@router.post("/transferable", response_model=BalanceResponse)
async def transferable_balance(request: TransferableRequest):
    """Free balance not held by vesting."""
    return BalanceResponse(
        full_balance=str(full_balance(request.balance)),
        free_balance=str(request.balance.free),
        transferable_balance=str(resolve_transferable(request.balance, request.locked_vesting)),
    )


@router.post("/inspect", response_model=List[ScheduleInspectionResponse])
async def inspect_schedules(request: InspectRequest,
                            engine: VestingEngine = Depends(get_engine)):
    """Per-schedule progress."""
    if request.schedule_index is None:
        indexed = list(enumerate(request.schedules))
    else:
        indexed = [(request.schedule_index,
                    _select(request.schedules, request.schedule_index)[0])]
    
    return [
        ScheduleInspectionResponse.from_inspection(
            i, engine.inspect(schedule, request.reference_block, now=request.now)
        )
        for i, schedule in indexed
    ]


@router.post("/projection", response_model=ProjectionResponse)
async def projection(request: ProjectionRequest,
                     engine: VestingEngine = Depends(get_engine)):
    """Projected unlock curve from the reference block to full unlock."""
    schedules = _select(request.schedules, request.schedule_index)
    samples = engine.project(schedules, request.reference_block,
                             max_points=request.max_points, now=request.now)
    summary = engine.summarize(schedules, request.reference_block, now=request.now)
    
    logger.debug("Projection served",
                 reference_block=request.reference_block,
                 sample_count=len(samples))
    
    return ProjectionResponse(
        reference_block=request.reference_block,
        summary=ProjectionSummaryResponse.from_summary(summary),
        samples=[ProjectionSampleResponse.from_sample(s) for s in samples],
    )


@router.post("/summary", response_model=AccountSummaryResponse)
async def account_summary(request: AccountSummaryRequest,
                          engine: VestingEngine = Depends(get_engine)):
    """Every vesting figure for one account snapshot."""
    result = engine.summarize_account(request.schedules, request.reference_block,
                                      request.balance, now=request.now)
    
    projection_response = None
    if result.projection is not None:
        projection_response = ProjectionResponse(
            reference_block=result.reference_block,
            summary=ProjectionSummaryResponse.from_summary(result.projection),
            samples=[ProjectionSampleResponse.from_sample(s) for s in result.samples],
        )
    
    return AccountSummaryResponse(
        reference_block=result.reference_block,
        has_vesting=result.has_vesting,
        aggregate=AggregateResponse.from_state(result.aggregate),
        balance=BalanceResponse(
            full_balance=str(result.full_balance),
            free_balance=str(result.free_balance),
            transferable_balance=str(result.transferable_balance),
        ),
        schedules=[
            ScheduleInspectionResponse.from_inspection(i, inspection)
            for i, inspection in enumerate(result.schedules)
        ],
        projection=projection_response,
    )
