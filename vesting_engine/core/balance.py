"""Balance resolver: transferable balance given locked vesting."""

import structlog

from vesting_engine.exceptions import InvalidAmountError
from vesting_engine.models.vesting_data import AccountBalance

logger = structlog.get_logger(__name__)


def full_balance(balance: AccountBalance) -> int:
    """Free plus reserved balance."""
    return balance.free + balance.reserved


def resolve_transferable(balance: AccountBalance, locked_vesting: int) -> int:
    """
    Transferable balance: free balance minus locked vesting, floored at zero.
    
    Reserved balance does not take part; it is reported through full_balance().
    
    Args:
        balance: Account balance snapshot
        locked_vesting: Currently locked vesting amount
        
    Returns:
        Transferable amount in the smallest unit
    """
    if isinstance(locked_vesting, bool) or not isinstance(locked_vesting, int):
        raise InvalidAmountError(
            f"locked_vesting must be an integer, got {type(locked_vesting).__name__}"
        )
    if locked_vesting < 0:
        raise InvalidAmountError(f"locked_vesting must be non-negative, got {locked_vesting}")
    
    transferable = balance.free - locked_vesting
    if transferable < 0:
        logger.debug("Locked vesting exceeds free balance",
                     free=balance.free,
                     locked_vesting=locked_vesting)
        return 0
    return transferable
