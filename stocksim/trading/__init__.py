"""Trading engine and simulation driver."""

from .engine import TradeResult, buy, sell
from .simulation import simulate, record_valuation

__all__ = ['TradeResult', 'buy', 'sell', 'simulate', 'record_valuation']
