"""Exceptions raised by the vesting calculation engine."""


class VestingEngineError(Exception):
    """Base error for the vesting engine."""
    pass


class InvalidBlockHeightError(VestingEngineError, ValueError):
    """Block height outside the valid range."""
    pass


class InvalidAmountError(VestingEngineError, ValueError):
    """Amount outside the valid range."""
    pass
