"""Unit tests for formatting, time and logging utilities."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
import logging

import pytest
import structlog

from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.utils.formatting import to_token_units, format_amount, format_block
from vesting_engine.utils.time import (
    MAX_UTC,
    MIN_UTC,
    blocks_to_days,
    days_to_months,
    estimate_block_time,
    to_utc_timestamp,
)
from vesting_engine.utils.logging import setup_logging


class TestFormatting:
    """Tests for amount formatting."""
    
    def test_to_token_units(self):
        """Test exact conversion to token units."""
        assert to_token_units(12_345_678_901) == Decimal("1.2345678901")
    
    def test_to_token_units_large_amount(self):
        """Test conversion stays exact for large amounts."""
        amount = 123456789012345678901234567890123
        
        assert to_token_units(amount, 10) == Decimal("12345678901234567890123.4567890123")
    
    def test_format_amount(self):
        """Test default DOT formatting."""
        assert format_amount(12_345_678_901) == "1.2346 DOT"
    
    def test_format_zero(self):
        """Test zero renders with full precision."""
        assert format_amount(0) == "0.0000 DOT"
    
    def test_format_custom_units(self):
        """Test custom decimals, precision and symbol."""
        assert format_amount(1_500_000, decimals=6, precision=2, symbol="USDC") == "1.50 USDC"
        assert format_amount(1_500_000, decimals=6, precision=0, symbol="") == "2"
    
    def test_format_large_amount(self):
        """Test amounts beyond the default decimal context."""
        amount = 10 ** 40
        
        assert format_amount(amount) == "1000000000000000000000000000000.0000 DOT"
    
    def test_format_block(self):
        """Test block heights use thousands separators."""
        assert format_block(23456789) == "23,456,789"


class TestTime:
    """Tests for time utilities."""
    
    def test_blocks_to_days(self):
        """Test days are rounded up."""
        assert blocks_to_days(0, 6) == 0
        assert blocks_to_days(1, 6) == 1
        assert blocks_to_days(14400, 6) == 1
        assert blocks_to_days(14401, 6) == 2
    
    def test_days_to_months(self):
        """Test months are rounded up over 30 days."""
        assert days_to_months(0) == 0
        assert days_to_months(30) == 1
        assert days_to_months(31) == 2
    
    def test_estimate_block_time(self):
        """Test wall-clock estimate from block distance."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        
        assert estimate_block_time(110, 100, now, 6) == now + timedelta(seconds=60)
    
    def test_estimate_block_time_clamps_past_datetime_range(self):
        """Test estimates beyond year 9999 clamp instead of overflowing."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        
        assert estimate_block_time(10**18, 0, now, 6) == MAX_UTC
        assert estimate_block_time(0, 10**18, now, 6) == MIN_UTC
        assert MAX_UTC.year == 9999
        assert MAX_UTC.tzinfo == timezone.utc
    
    def test_estimate_block_time_near_range_edge(self):
        """Test estimates inside the range near its edge are exact."""
        now = datetime(9999, 12, 31, 23, 59, 0, tzinfo=timezone.utc)
        
        assert estimate_block_time(9, 0, now, 6) == now + timedelta(seconds=54)
        assert estimate_block_time(11, 0, now, 6) == MAX_UTC
    
    def test_to_utc_timestamp(self):
        """Test naive and aware datetimes normalize to UTC."""
        naive = datetime(2024, 1, 1, 12, 0)
        aware = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        
        assert to_utc_timestamp(naive) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert to_utc_timestamp(aware).hour == 12
        assert to_utc_timestamp(None).tzinfo == timezone.utc
    
    def test_to_utc_timestamp_rejects_other_types(self):
        """Test unsupported timestamp types are rejected."""
        with pytest.raises(ValueError):
            to_utc_timestamp(1700000000)


class TestSetupLogging:
    """Tests for structured logging setup."""
    
    def test_log_file_receives_structured_events(self, tmp_path):
        """Test module loggers write rendered events to the configured file."""
        log_file = tmp_path / "logs" / "engine.log"
        config = VestingEngineConfig(log_level="WARNING", log_format="json",
                                     log_file=str(log_file))
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        
        try:
            setup_logging(config)
            structlog.get_logger("vesting_engine.tests").warning("Schedule never completes",
                                                                 per_block=0)
            
            content = log_file.read_text()
            assert "Schedule never completes" in content
            assert '"per_block": 0' in content
        finally:
            for handler in root.handlers:
                if handler not in handlers_before:
                    root.removeHandler(handler)
                    handler.close()
            structlog.reset_defaults()
