"""
Single priced instrument with a random-walk update rule.
"""

from dataclasses import dataclass

import numpy as np

MAX_CHANGE_PERCENT = 6.0
PRICE_FLOOR = 0.01


@dataclass
class Stock:
    """Represents a listed stock and its current price"""
    symbol: str
    name: str
    price: float
    change_percent: float = 0.0

    def __post_init__(self):
        if self.price <= 0:
            raise ValueError("Initial price must be positive")

    def update(self, rng: np.random.Generator,
               max_change_percent: float = MAX_CHANGE_PERCENT,
               price_floor: float = PRICE_FLOOR) -> float:
        """Apply one random-walk step and return the change percent"""
        pct = float(rng.uniform(-max_change_percent, max_change_percent))
        self.change_percent = pct
        self.price = max(price_floor, self.price * (1.0 + pct / 100.0))
        return pct

    def __str__(self) -> str:
        return f"Stock({self.symbol} @ ${self.price:.2f}, {self.change_percent:+.2f}%)"

    def __repr__(self) -> str:
        return self.__str__()
