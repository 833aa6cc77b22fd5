"""Unit tests for the schedule inspector."""

from datetime import datetime, timedelta, timezone

import pytest

from vesting_engine.core.inspector import inspect_schedule, completion_block
from vesting_engine.exceptions import InvalidBlockHeightError
from vesting_engine.models.vesting_data import VestingSchedule


class TestCompletionBlock:
    """Tests for completion block."""
    
    def test_even_division(self, single_schedule):
        """Test completion block is start plus locked over rate."""
        assert completion_block(single_schedule) == 200
    
    def test_uneven_division_uses_integer_division(self):
        """Test the block count is floored."""
        schedule = VestingSchedule(locked=105, per_block=10, starting_block=0)
        
        assert completion_block(schedule) == 10
    
    def test_degenerate_schedule_never_completes(self, degenerate_schedule):
        """Test a zero release rate yields no completion block."""
        assert completion_block(degenerate_schedule) is None
    
    def test_empty_schedule_completes_at_start(self):
        """Test an empty tranche completes at its starting block."""
        schedule = VestingSchedule(locked=0, per_block=0, starting_block=30)
        
        assert completion_block(schedule) == 30


class TestInspectSchedule:
    """Tests for per-schedule inspection."""
    
    def test_halfway(self, single_schedule, now):
        """Test inspection halfway through a schedule."""
        result = inspect_schedule(single_schedule, 150, now=now)
        
        assert result.unlocked_amount == 500
        assert result.locked_amount == 500
        assert result.percent_unlocked == 50
        assert result.completion_block == 200
        assert result.is_complete is False
        assert result.never_completes is False
    
    def test_time_remaining(self, single_schedule, now):
        """Test blocks, days and date until completion."""
        result = inspect_schedule(single_schedule, 150, now=now)
        
        assert result.blocks_remaining == 50
        assert result.days_remaining == 1
        assert result.estimated_completion_at == now + timedelta(seconds=300)
    
    def test_custom_block_time(self, single_schedule, now):
        """Test estimates follow the configured block cadence."""
        result = inspect_schedule(single_schedule, 100, seconds_per_block=12, now=now)
        
        assert result.estimated_completion_at == now + timedelta(seconds=1200)
    
    def test_complete(self, single_schedule, now):
        """Test inspection after completion."""
        result = inspect_schedule(single_schedule, 250, now=now)
        
        assert result.unlocked_amount == 1000
        assert result.locked_amount == 0
        assert result.percent_unlocked == 100
        assert result.is_complete is True
        assert result.blocks_remaining == 0
        assert result.days_remaining == 0
        assert result.estimated_completion_at == now
    
    def test_complete_exactly_at_completion_block(self, single_schedule):
        """Test completion is inclusive of the completion block."""
        assert inspect_schedule(single_schedule, 200).is_complete is True
        assert inspect_schedule(single_schedule, 199).is_complete is False
    
    def test_complete_with_remainder_below_rate(self, now):
        """Test an uneven rate reports completion while the remainder is still locked."""
        schedule = VestingSchedule(locked=10, per_block=3, starting_block=0)
        result = inspect_schedule(schedule, 3, now=now)
        
        assert result.completion_block == 3
        assert result.is_complete is True
        assert result.locked_amount == 1
        assert result.blocks_remaining == 0
        assert inspect_schedule(schedule, 4, now=now).locked_amount == 0
    
    def test_completion_past_datetime_range(self, now):
        """Test a completion date beyond year 9999 is clamped."""
        schedule = VestingSchedule(locked=10 ** 12, per_block=1, starting_block=0)
        result = inspect_schedule(schedule, 0, now=now)
        
        assert result.blocks_remaining == 10 ** 12
        assert result.days_remaining == 69444445
        assert result.estimated_completion_at == datetime.max.replace(tzinfo=timezone.utc)
    
    def test_before_start(self, future_schedule, now):
        """Test inspection before release begins."""
        result = inspect_schedule(future_schedule, 5, now=now)
        
        assert result.unlocked_amount == 0
        assert result.locked_amount == 100
        assert result.percent_unlocked == 0
        assert result.completion_block == 1100
        assert result.blocks_remaining == 1095
    
    def test_percent_is_floored(self):
        """Test percentage is an integer floor."""
        schedule = VestingSchedule(locked=3, per_block=1, starting_block=0)
        
        assert inspect_schedule(schedule, 1).percent_unlocked == 33
        assert inspect_schedule(schedule, 2).percent_unlocked == 66
    
    def test_zero_locked(self, now):
        """Test an empty tranche is complete with zero percent."""
        schedule = VestingSchedule(locked=0, per_block=10, starting_block=100)
        result = inspect_schedule(schedule, 5, now=now)
        
        assert result.percent_unlocked == 0
        assert result.is_complete is True
        assert result.locked_amount == 0
        assert result.blocks_remaining == 0
    
    def test_degenerate_schedule(self, degenerate_schedule, now):
        """Test a zero release rate is reported as never completing."""
        result = inspect_schedule(degenerate_schedule, 10 ** 6, now=now)
        
        assert result.never_completes is True
        assert result.completion_block is None
        assert result.is_complete is False
        assert result.locked_amount == 100
        assert result.percent_unlocked == 0
        assert result.blocks_remaining is None
        assert result.days_remaining is None
        assert result.estimated_completion_at is None
    
    def test_naive_now_is_treated_as_utc(self, single_schedule):
        """Test naive datetimes are interpreted as UTC."""
        result = inspect_schedule(single_schedule, 150, now=datetime(2024, 1, 15, 12, 0, 0))
        
        assert result.estimated_completion_at.tzinfo == timezone.utc
    
    def test_default_now(self, single_schedule):
        """Test estimates default to the current time."""
        before = datetime.now(timezone.utc)
        result = inspect_schedule(single_schedule, 150)
        
        assert result.estimated_completion_at >= before + timedelta(seconds=300)
    
    def test_negative_block_rejected(self, single_schedule):
        """Test negative reference blocks are rejected."""
        with pytest.raises(InvalidBlockHeightError):
            inspect_schedule(single_schedule, -5)
