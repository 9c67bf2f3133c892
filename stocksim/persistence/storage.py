"""
Folder-based persistence for accounts.

A save is a folder holding four text files. Each file is written and read
independently: a failure on one file is recorded in the returned report and
does not stop the others. Malformed rows are skipped and reported, so a load
recovers everything that can be parsed.
"""

import csv
import logging
import math
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Tuple

from ..portfolio.account import Account
from ..portfolio.portfolio import Portfolio
from ..core.models import Transaction, HistoryEntry
from ..core.types import TransactionType
from ..core.exceptions import (
    PersistenceError, PersistenceReadError, PersistenceWriteError,
    MalformedSaveDataError
)

logger = logging.getLogger(__name__)

PROFILE_FILE = "profile.txt"
HOLDINGS_FILE = "holdings.csv"
TRANSACTIONS_FILE = "transactions.csv"
HISTORY_FILE = "portfolio_history.csv"

HOLDINGS_HEADER = ["symbol", "qty"]
TRANSACTIONS_HEADER = ["type", "symbol", "qty", "price", "timestamp"]
HISTORY_HEADER = ["timestamp", "total_value"]

DEFAULT_NAME = "Trader"


@dataclass
class PersistenceReport:
    """Per-file outcome of a save or load"""
    path: str
    completed: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    errors: List[PersistenceError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def skipped_rows(self) -> List[MalformedSaveDataError]:
        return [e for e in self.errors if isinstance(e, MalformedSaveDataError)]

    def __str__(self) -> str:
        return (f"PersistenceReport({self.path}, completed: {len(self.completed)}, "
                f"missing: {len(self.missing)}, errors: {len(self.errors)})")


# ---------------------------------------------------------------------------
# Save
# ---------------------------------------------------------------------------

def _write_file(report: PersistenceReport, filename: str, writer: Callable) -> None:
    file_path = os.path.join(report.path, filename)
    try:
        with open(file_path, 'w', newline='', encoding='utf-8') as f:
            writer(f)
        report.completed.append(filename)
    except OSError as e:
        error = PersistenceWriteError(file_path, str(e))
        report.errors.append(error)
        logger.error(f"Failed to save {filename}: {e}")


def save_account(account: Account, path: str) -> PersistenceReport:
    """Write the account to the save folder at `path`, creating it if needed"""
    report = PersistenceReport(path=path)
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        # Each file write below fails and is reported individually
        logger.error(f"Failed to create save folder {path}: {e}")

    def write_profile(f):
        f.write(f"name,{account.name}\n")
        f.write(f"cash,{account.cash!r}\n")

    def write_holdings(f):
        writer = csv.writer(f, lineterminator='\n')
        writer.writerow(HOLDINGS_HEADER)
        for symbol, quantity in account.portfolio.holdings.items():
            writer.writerow([symbol, quantity])

    def write_transactions(f):
        writer = csv.writer(f, lineterminator='\n')
        writer.writerow(TRANSACTIONS_HEADER)
        for t in account.transactions:
            writer.writerow([t.type.value, t.symbol, t.quantity, repr(t.price), t.timestamp.isoformat()])

    def write_history(f):
        writer = csv.writer(f, lineterminator='\n')
        writer.writerow(HISTORY_HEADER)
        for h in account.portfolio.history:
            writer.writerow([h.timestamp.isoformat(), repr(h.total_value)])

    _write_file(report, PROFILE_FILE, write_profile)
    _write_file(report, HOLDINGS_FILE, write_holdings)
    _write_file(report, TRANSACTIONS_FILE, write_transactions)
    _write_file(report, HISTORY_FILE, write_history)

    logger.info(f"Saved account {account.name} to {os.path.abspath(path)} "
                f"({len(report.completed)} files, {len(report.errors)} errors)")
    return report


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite number {text!r}")
    return value


def _parse_quantity(text: str) -> int:
    quantity = int(text)
    if quantity <= 0:
        raise ValueError(f"quantity must be positive, got {quantity}")
    return quantity


def _read_lines(report: PersistenceReport, filename: str):
    """Read a whole file, returning None when it is missing or unreadable"""
    file_path = os.path.join(report.path, filename)
    if not os.path.exists(file_path):
        report.missing.append(filename)
        return None
    try:
        with open(file_path, 'r', newline='', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        report.errors.append(PersistenceReadError(file_path, str(e)))
        logger.error(f"Failed to read {filename}: {e}")
        return None
    report.completed.append(filename)
    return lines


def _parse_rows(report: PersistenceReport, filename: str, header: List[str],
                parse_row: Callable) -> list:
    """Parse a CSV file with a header row, skipping malformed rows"""
    lines = _read_lines(report, filename)
    if lines is None:
        return []

    file_path = os.path.join(report.path, filename)
    results = []
    for line_number, row in enumerate(csv.reader(lines), start=1):
        if line_number == 1:
            if [c.strip() for c in row] != header:
                logger.warning(f"{filename}: unexpected header {row}")
            continue
        if not row or not any(c.strip() for c in row):
            continue
        if len(row) < len(header):
            reason = f"expected {len(header)} fields, got {len(row)}"
        else:
            try:
                results.append(parse_row([c.strip() for c in row]))
                continue
            except ValueError as e:
                reason = str(e)
        error = MalformedSaveDataError(file_path, line_number, ",".join(row), reason)
        report.errors.append(error)
        logger.warning(f"Skipping malformed row: {error}")
    return results


def _load_profile(report: PersistenceReport, default_name: str) -> Tuple[str, float]:
    name, cash = default_name, 0.0
    lines = _read_lines(report, PROFILE_FILE)
    if lines is None:
        return name, cash

    file_path = os.path.join(report.path, PROFILE_FILE)
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        parts = line.split(",", 1)
        if len(parts) < 2:
            error = MalformedSaveDataError(file_path, line_number, line, "expected key,value")
            report.errors.append(error)
            logger.warning(f"Skipping malformed row: {error}")
            continue
        key, value = parts
        if key == "name":
            name = value
        elif key == "cash":
            try:
                cash = _parse_float(value.strip())
            except ValueError as e:
                error = MalformedSaveDataError(file_path, line_number, line, str(e))
                report.errors.append(error)
                logger.warning(f"Skipping malformed row: {error}")
    return name, cash


def _holding_row(row: List[str]) -> Tuple[str, int]:
    if not row[0]:
        raise ValueError("empty symbol")
    return row[0], _parse_quantity(row[1])


def _transaction_row(row: List[str]) -> Transaction:
    if not row[1]:
        raise ValueError("empty symbol")
    return Transaction(
        type=TransactionType(row[0]),
        symbol=row[1],
        quantity=_parse_quantity(row[2]),
        price=_parse_float(row[3]),
        timestamp=datetime.fromisoformat(row[4]),
    )


def _history_row(row: List[str]) -> HistoryEntry:
    return HistoryEntry(datetime.fromisoformat(row[0]), _parse_float(row[1]))


def load_account(path: str, default_name: str = DEFAULT_NAME) -> Tuple[Account, PersistenceReport]:
    """Rebuild an account from the save folder at `path`.

    Raises PersistenceReadError when the folder does not exist. Otherwise
    always returns an account; missing or unreadable files leave their part
    at its default and are listed in the report.
    """
    if not os.path.isdir(path):
        raise PersistenceReadError(path, "no such save folder")

    report = PersistenceReport(path=path)
    name, cash = _load_profile(report, default_name)

    portfolio = Portfolio()
    for symbol, quantity in _parse_rows(report, HOLDINGS_FILE, HOLDINGS_HEADER, _holding_row):
        portfolio.add_holding(symbol, quantity)
    for entry in _parse_rows(report, HISTORY_FILE, HISTORY_HEADER, _history_row):
        portfolio.record_history(entry.timestamp, entry.total_value)

    account = Account(name, cash, portfolio)
    for transaction in _parse_rows(report, TRANSACTIONS_FILE, TRANSACTIONS_HEADER, _transaction_row):
        account.add_transaction(transaction)

    logger.info(f"Loaded account {account.name} from {os.path.abspath(path)} "
                f"({len(report.completed)} files, {len(report.errors)} errors)")
    return account, report
