"""Market simulation components."""

from .stock import Stock
from .market import Market, SAMPLE_STOCKS

__all__ = ['Stock', 'Market', 'SAMPLE_STOCKS']
