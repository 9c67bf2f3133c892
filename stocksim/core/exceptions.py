"""
Custom exceptions for the stock simulator.
"""


class StockSimError(Exception):
    """Base exception for the stock simulator"""
    pass


class TradingError(StockSimError):
    """Raised when a buy or sell fails validation"""
    pass


class NoSuchStockError(TradingError):
    """Raised when a symbol is not listed in the market"""
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"No such stock: {symbol}")


class InvalidQuantityError(TradingError):
    """Raised for non-positive share quantities"""
    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(f"Quantity must be positive, got {quantity}")


class InsufficientFundsError(TradingError):
    """Raised when attempting to buy with insufficient funds"""
    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(f"Insufficient funds: need ${required:,.2f}, have ${available:,.2f}")


class InsufficientHoldingsError(TradingError):
    """Raised when attempting to sell more shares than held"""
    def __init__(self, symbol: str, requested: int, available: int):
        self.symbol = symbol
        self.requested = requested
        self.available = available
        super().__init__(f"Insufficient holdings of {symbol}: need {requested}, have {available}")


class PersistenceError(StockSimError):
    """Base exception for save/load failures"""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class PersistenceReadError(PersistenceError):
    """Raised when a save folder or file cannot be read"""
    pass


class PersistenceWriteError(PersistenceError):
    """Raised when a save file cannot be written"""
    pass


class MalformedSaveDataError(PersistenceError):
    """Raised for a row with bad numeric, date or type fields"""
    def __init__(self, path: str, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(path, f"line {line_number}: {reason} ({line!r})")
