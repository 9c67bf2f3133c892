"""
Simulated market holding the listed stocks.
"""

import logging
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from .stock import Stock, MAX_CHANGE_PERCENT, PRICE_FLOOR
from ..core.exceptions import NoSuchStockError

logger = logging.getLogger(__name__)

SAMPLE_STOCKS = [
    ("AAPL", "Apple Inc.", 170.00),
    ("GOOG", "Alphabet Inc.", 130.00),
    ("MSFT", "Microsoft Corp.", 320.00),
    ("TSLA", "Tesla Inc.", 260.00),
    ("AMZN", "Amazon.com Inc.", 150.00),
    ("INFY", "Infosys Ltd.", 20.00),
    ("TCS", "Tata Consultancy", 35.00),
]


class Market:
    """Owns the stocks and advances their prices one step at a time"""

    def __init__(self, seed: Optional[int] = None,
                 max_change_percent: float = MAX_CHANGE_PERCENT,
                 price_floor: float = PRICE_FLOOR):
        if max_change_percent < 0:
            raise ValueError("Max change percent cannot be negative")
        if price_floor <= 0:
            raise ValueError("Price floor must be positive")

        self._stocks: Dict[str, Stock] = {}
        self.rng = np.random.default_rng(seed)
        self.max_change_percent = max_change_percent
        self.price_floor = price_floor
        self.steps_taken = 0

    def seed_sample_stocks(self) -> None:
        """List the default stock universe"""
        for symbol, name, price in SAMPLE_STOCKS:
            self.add_stock(Stock(symbol, name, price))

    def add_stock(self, stock: Stock) -> None:
        """Add a stock, replacing any existing one with the same symbol"""
        self._stocks[stock.symbol] = stock

    def get_stock(self, symbol: str) -> Optional[Stock]:
        """Get stock by symbol, None if not listed"""
        return self._stocks.get(symbol)

    def require_stock(self, symbol: str) -> Stock:
        """Get stock by symbol, raising if not listed"""
        stock = self._stocks.get(symbol)
        if stock is None:
            raise NoSuchStockError(symbol)
        return stock

    def step(self) -> None:
        """Advance every stock by one independent random-walk step"""
        for stock in self._stocks.values():
            stock.update(self.rng, self.max_change_percent, self.price_floor)
        self.steps_taken += 1
        logger.debug(f"Market step {self.steps_taken} applied to {len(self._stocks)} stocks")

    def symbols(self) -> List[str]:
        return list(self._stocks.keys())

    def stocks(self) -> List[Stock]:
        return list(self._stocks.values())

    def prices(self) -> Dict[str, float]:
        """Current price per symbol"""
        return {symbol: stock.price for symbol, stock in self._stocks.items()}

    def snapshot(self) -> pd.DataFrame:
        """Market table with one row per stock"""
        rows = [
            {
                'symbol': s.symbol,
                'name': s.name,
                'price': s.price,
                'change_percent': s.change_percent,
            } for s in self._stocks.values()
        ]
        return pd.DataFrame(rows, columns=['symbol', 'name', 'price', 'change_percent'])

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._stocks

    def __len__(self) -> int:
        return len(self._stocks)

    def __str__(self) -> str:
        return f"Market(Stocks: {len(self._stocks)}, Steps: {self.steps_taken})"

    def __repr__(self) -> str:
        return self.__str__()
