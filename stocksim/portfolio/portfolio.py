"""
Portfolio holdings and valuation history.
"""

import logging
from datetime import datetime
from typing import Dict, List, Tuple

import pandas as pd

from ..core.models import HistoryEntry
from ..core.exceptions import InvalidQuantityError
from ..market.market import Market

logger = logging.getLogger(__name__)


class Portfolio:
    """Tracks share holdings per symbol and a log of total valuations"""

    def __init__(self):
        self._holdings: Dict[str, int] = {}
        self._history: List[HistoryEntry] = []

    def add_holding(self, symbol: str, quantity: int) -> None:
        """Add shares of a symbol, creating the holding if absent"""
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        self._holdings[symbol] = self._holdings.get(symbol, 0) + quantity

    def remove_holding(self, symbol: str, quantity: int) -> None:
        """Remove shares of a symbol.

        Callers check the held quantity first. A holding that would drop to
        zero or below is deleted outright.
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        remaining = self._holdings.get(symbol, 0) - quantity
        if remaining <= 0:
            self._holdings.pop(symbol, None)
        else:
            self._holdings[symbol] = remaining

    def get_holding_quantity(self, symbol: str) -> int:
        """Shares held of a symbol, 0 when none"""
        return self._holdings.get(symbol, 0)

    @property
    def holdings(self) -> Dict[str, int]:
        """Copy of the holdings map"""
        return dict(self._holdings)

    def total_value(self, market: Market) -> float:
        """Market value of all holdings, cash excluded.

        Holdings in symbols no longer listed contribute zero.
        """
        total = 0.0
        for symbol, quantity in self._holdings.items():
            stock = market.get_stock(symbol)
            if stock is None:
                logger.warning(f"Holding {quantity} of {symbol} not listed in market, valued at 0")
                continue
            total += stock.price * quantity
        return total

    def record_history(self, timestamp: datetime, total_value: float) -> HistoryEntry:
        """Append a valuation snapshot"""
        entry = HistoryEntry(timestamp, total_value)
        self._history.append(entry)
        return entry

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def history_frame(self) -> pd.DataFrame:
        """Valuation history as a DataFrame, oldest first"""
        return pd.DataFrame(
            [(h.timestamp, h.total_value) for h in self._history],
            columns=['timestamp', 'total_value']
        )

    def positions_summary(self, market: Market) -> Dict[str, Dict]:
        """Per-holding quantity, price and market value"""
        summary = {}
        for symbol, quantity in self._holdings.items():
            stock = market.get_stock(symbol)
            price = stock.price if stock is not None else 0.0
            summary[symbol] = {
                'quantity': quantity,
                'price': price,
                'market_value': price * quantity,
            }
        return summary

    def __len__(self) -> int:
        return len(self._holdings)

    def __str__(self) -> str:
        return f"Portfolio(Holdings: {len(self._holdings)}, History: {len(self._history)})"

    def __repr__(self) -> str:
        return self.__str__()
