"""Vesting engine: configured entry point over the calculation functions."""

from datetime import datetime
from typing import Iterable, List, Optional
import structlog

from vesting_engine.core.aggregator import aggregate
from vesting_engine.core.balance import full_balance, resolve_transferable
from vesting_engine.core.inspector import inspect_schedule
from vesting_engine.core.projection import sample_projection, summarize_projection
from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.models.vesting_data import (
    VestingSchedule,
    AccountBalance,
    AggregateVestingState,
    ScheduleInspection,
    ProjectionSample,
    ProjectionSummary,
    AccountVestingSummary,
)
from vesting_engine.utils.time import to_utc_timestamp

logger = structlog.get_logger(__name__)


class VestingEngine:
    """Derives vesting figures for account snapshots using one configuration."""
    
    def __init__(self, config: Optional[VestingEngineConfig] = None):
        self.config = config or VestingEngineConfig()
        self.logger = logger.bind(component="vesting_engine")
    
    def aggregate(self, schedules: Iterable[VestingSchedule],
                  reference_block: int) -> AggregateVestingState:
        """Aggregate vesting state at reference_block."""
        return aggregate(schedules, reference_block)
    
    def inspect(self, schedule: VestingSchedule, reference_block: int,
                now: Optional[datetime] = None) -> ScheduleInspection:
        """Inspect one schedule at reference_block."""
        return inspect_schedule(schedule, reference_block,
                                seconds_per_block=self.config.seconds_per_block,
                                now=now)
    
    def project(self, schedules: Iterable[VestingSchedule], reference_block: int,
                max_points: Optional[int] = None,
                now: Optional[datetime] = None) -> List[ProjectionSample]:
        """Projected unlock curve from reference_block to full unlock."""
        if max_points is None:
            max_points = self.config.max_projection_points
        return sample_projection(
            schedules, reference_block,
            max_points=max_points,
            seconds_per_block=self.config.seconds_per_block,
            now=now,
            min_points=self.config.min_projection_points,
        )
    
    def summarize(self, schedules: Iterable[VestingSchedule], reference_block: int,
                  now: Optional[datetime] = None) -> ProjectionSummary:
        """Headline projection figures at reference_block."""
        return summarize_projection(list(schedules), reference_block,
                                    seconds_per_block=self.config.seconds_per_block,
                                    now=now)
    
    def summarize_account(self, schedules: Iterable[VestingSchedule], reference_block: int,
                          balance: AccountBalance,
                          now: Optional[datetime] = None) -> AccountVestingSummary:
        """
        Derive every figure shown for one account.
        
        Args:
            schedules: Vesting tranches of the account
            reference_block: Current block height of the reference chain
            balance: Account balance snapshot
            now: Wall-clock instant matching reference_block (default: now, UTC)
            
        Returns:
            AccountVestingSummary
        """
        schedules = list(schedules)
        # One instant for every estimate in the summary
        now = to_utc_timestamp(now)
        
        state = self.aggregate(schedules, reference_block)
        transferable = resolve_transferable(balance, state.currently_locked)
        
        if schedules:
            inspections = tuple(self.inspect(s, reference_block, now=now) for s in schedules)
            projection = self.summarize(schedules, reference_block, now=now)
            samples = tuple(self.project(schedules, reference_block, now=now))
        else:
            inspections = ()
            projection = None
            samples = ()
        
        self.logger.info("Account vesting summarized",
                         reference_block=reference_block,
                         schedule_count=state.schedule_count,
                         currently_locked=state.currently_locked,
                         transferable=transferable)
        
        return AccountVestingSummary(
            reference_block=reference_block,
            aggregate=state,
            full_balance=full_balance(balance),
            free_balance=balance.free,
            transferable_balance=transferable,
            schedules=inspections,
            projection=projection,
            samples=samples,
        )
