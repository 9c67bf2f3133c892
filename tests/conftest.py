"""
Pytest configuration and shared fixtures.
"""

import pytest
from datetime import datetime, timedelta
from stocksim.market.market import Market
from stocksim.market.stock import Stock
from stocksim.portfolio.account import Account


class StepClock:
    """Deterministic clock advancing one second per call"""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    """Create a deterministic clock for testing"""
    return StepClock(datetime(2024, 1, 2, 9, 30, 0))


@pytest.fixture
def sample_market():
    """Create a seeded market with the default stock universe"""
    market = Market(seed=42)
    market.seed_sample_stocks()
    return market


@pytest.fixture
def small_market():
    """Create a market with two hand-priced stocks"""
    market = Market(seed=7)
    market.add_stock(Stock('AAPL', 'Apple Inc.', 170.0))
    market.add_stock(Stock('XYZ', 'Xyz Corp.', 10.0))
    return market


@pytest.fixture
def sample_account():
    """Create a fresh account with the default starting cash"""
    return Account('Tester', 10000.0)
