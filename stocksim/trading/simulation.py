"""
Simulation driver: advances the market and records valuations.
"""

import logging
from datetime import datetime

from .engine import Clock
from ..portfolio.account import Account
from ..market.market import Market

logger = logging.getLogger(__name__)


def record_valuation(account: Account, market: Market, clock: Clock = datetime.now) -> float:
    """Append the current portfolio value to the account history"""
    value = account.portfolio.total_value(market)
    account.portfolio.record_history(clock(), value)
    return value


def simulate(account: Account, market: Market, steps: int,
             clock: Clock = datetime.now) -> int:
    """Run `steps` market steps, recording a valuation after each.

    Non-positive step counts run zero iterations. Returns the number of
    steps performed.
    """
    performed = 0
    for _ in range(steps):
        market.step()
        record_valuation(account, market, clock)
        performed += 1

    logger.debug(f"Simulated {performed} step(s)")
    return performed
