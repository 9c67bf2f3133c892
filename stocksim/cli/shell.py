"""
Interactive command shell for the stock simulator.
"""

import argparse
import dataclasses
import logging
import sys
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from ..config.settings import SimulatorConfig
from ..config.logging_config import setup_logging
from ..core.exceptions import StockSimError
from ..market.market import Market
from ..portfolio.account import Account
from ..persistence.storage import save_account, load_account
from ..trading.engine import buy, sell
from ..trading.simulation import simulate, record_valuation

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  market             - Show current market summary (symbol, price)
  prices             - Show detailed market with simulated changes
  buy SYMBOL QTY     - Buy quantity of a stock at current market price
  sell SYMBOL QTY    - Sell quantity from your holdings
  portfolio          - Show your cash, holdings and total value
  history            - Show historical portfolio values recorded over time
  transactions       - Show executed buys and sells
  simulate [N]       - Advance market prices N times (default 1) and record portfolio value
  save PATH          - Save your portfolio and transactions to a folder
  load PATH          - Load your portfolio and transactions from a folder
  help               - Show this help
  exit | quit        - Exit simulator"""


def money(value: float) -> str:
    return f"{value:,.2f}"


class TradingShell:
    """Parses commands and maps them onto engine and persistence calls"""

    def __init__(self, account: Account, market: Market,
                 config: Optional[SimulatorConfig] = None,
                 out: Optional[TextIO] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.account = account
        self.market = market
        self.config = config or SimulatorConfig()
        self.out = out if out is not None else sys.stdout
        self.clock = clock

        self.commands: Dict[str, Callable[[List[str]], None]] = {
            'help': self.cmd_help,
            'market': self.cmd_market,
            'prices': self.cmd_prices,
            'buy': self.cmd_buy,
            'sell': self.cmd_sell,
            'portfolio': self.cmd_portfolio,
            'history': self.cmd_history,
            'transactions': self.cmd_transactions,
            'simulate': self.cmd_simulate,
            'save': self.cmd_save,
            'load': self.cmd_load,
        }

    def print(self, text: str = "") -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        parts = line.split()
        if not parts:
            return True

        cmd, args = parts[0].lower(), parts[1:]
        logger.debug(f"Command: {cmd} {args}")
        if cmd in ('exit', 'quit'):
            self.print("Goodbye!")
            return False

        handler = self.commands.get(cmd)
        if handler is None:
            self.print("Unknown command. Type 'help' to see commands.")
            return True

        try:
            handler(args)
        except StockSimError as e:
            self.print(f"Error: {e}")
        return True

    def run(self, lines: Iterable[str], prompt: str = "\n> ") -> None:
        """Execute commands until exit or end of input"""
        for line in lines:
            if not self.execute(line.strip()):
                return
            if prompt:
                self.out.write(prompt)
                self.out.flush()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def cmd_help(self, args: List[str]) -> None:
        self.print(HELP_TEXT)

    def cmd_market(self, args: List[str]) -> None:
        self.print("\nMarket snapshot:")
        self.print(f"  {'Symbol':<8} {'Price':<10} {'Change%':<10}")
        for stock in self.market.stocks():
            self.print(f"  {stock.symbol:<8} {money(stock.price):<10} {stock.change_percent:<+10.2f}")

    def cmd_prices(self, args: List[str]) -> None:
        self.print("\nMarket detailed:")
        self.print(f"  {'Symbol':<8} {'Name':<25} {'Price':<10} {'Change%':<10}")
        for stock in self.market.stocks():
            self.print(f"  {stock.symbol:<8} {stock.name:<25} {money(stock.price):<10} "
                       f"{stock.change_percent:<+10.2f}")

    def _parse_trade_args(self, args: List[str], usage: str):
        if len(args) < 2:
            self.print(usage)
            return None
        try:
            quantity = int(args[1])
        except ValueError:
            self.print(f"Invalid quantity: {args[1]}")
            return None
        return args[0].upper(), quantity

    def cmd_buy(self, args: List[str]) -> None:
        parsed = self._parse_trade_args(args, "Usage: buy SYMBOL QTY")
        if parsed is None:
            return
        result = buy(self.account, self.market, *parsed, clock=self.clock)
        t = result.transaction
        self.print(f"Bought {t.quantity} {t.symbol} @ {money(t.price)} each. Cost: {money(result.amount)}")

    def cmd_sell(self, args: List[str]) -> None:
        parsed = self._parse_trade_args(args, "Usage: sell SYMBOL QTY")
        if parsed is None:
            return
        result = sell(self.account, self.market, *parsed, clock=self.clock)
        t = result.transaction
        self.print(f"Sold {t.quantity} {t.symbol} @ {money(t.price)} each. Proceeds: {money(result.amount)}")

    def cmd_portfolio(self, args: List[str]) -> None:
        portfolio = self.account.portfolio
        self.print(f"\nPortfolio for {self.account.name}")
        self.print(f"Cash: {money(self.account.cash)}")
        self.print("Holdings:")
        summary = portfolio.positions_summary(self.market)
        if not summary:
            self.print("  (no holdings)")
        else:
            self.print(f"  {'Symbol':<8} {'Qty':<8} {'Price':<12} {'Value':<12}")
            for symbol, pos in summary.items():
                self.print(f"  {symbol:<8} {pos['quantity']:<8d} {money(pos['price']):<12} "
                           f"{money(pos['market_value']):<12}")
        self.print(f"Total portfolio value: {money(portfolio.total_value(self.market))}")
        self.print(f"Net worth: {money(self.account.net_worth(self.market))}")

    def cmd_history(self, args: List[str]) -> None:
        self.print("\nPortfolio value history:")
        self.print(f"  {'Timestamp':<20} {'TotalValue':<12}")
        for entry in self.account.portfolio.history:
            self.print(f"  {entry.timestamp.strftime('%Y-%m-%d %H:%M:%S'):<20} {money(entry.total_value):<12}")

    def cmd_transactions(self, args: List[str]) -> None:
        transactions = self.account.transactions
        self.print("\nTransactions:")
        if not transactions:
            self.print("  (no transactions)")
            return
        self.print(f"  {'Type':<5} {'Symbol':<8} {'Qty':<8} {'Price':<12} {'Timestamp':<20}")
        for t in transactions:
            self.print(f"  {t.type.value:<5} {t.symbol:<8} {t.quantity:<8d} {money(t.price):<12} "
                       f"{t.timestamp.strftime('%Y-%m-%d %H:%M:%S'):<20}")

    def cmd_simulate(self, args: List[str]) -> None:
        steps = self.config.default_simulate_steps
        if args:
            try:
                steps = int(args[0])
            except ValueError:
                self.print(f"Invalid step count: {args[0]}")
                return
        performed = simulate(self.account, self.market, steps, clock=self.clock)
        self.print(f"Simulated {performed} step(s). Market updated.")
        self.cmd_market([])

    def cmd_save(self, args: List[str]) -> None:
        if not args:
            self.print("Usage: save PATH")
            return
        report = save_account(self.account, args[0])
        for error in report.errors:
            self.print(f"Failed to save: {error}")
        if report.ok:
            self.print(f"Saved user data to folder: {report.path}")
        elif report.completed:
            self.print(f"Partially saved user data to folder: {report.path} "
                       f"({len(report.completed)} of {len(report.completed) + len(report.errors)} files)")
        else:
            self.print(f"Nothing saved to folder: {report.path}")

    def cmd_load(self, args: List[str]) -> None:
        if not args:
            self.print("Usage: load PATH")
            return
        account, report = load_account(args[0], default_name=self.config.default_name)
        for error in report.errors:
            self.print(f"Warning: {error}")
        self.account = account
        self.print(f"Loaded user: {account.name}")


def create_session(name: str, config: Optional[SimulatorConfig] = None,
                   clock: Callable[[], datetime] = datetime.now):
    """Create a seeded market and a fresh account with its opening valuation"""
    config = config or SimulatorConfig()
    market = Market(seed=config.seed, max_change_percent=config.max_change_percent,
                    price_floor=config.price_floor)
    market.seed_sample_stocks()
    account = Account(name or config.default_name, config.starting_cash)
    record_valuation(account, market, clock)
    return account, market


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point"""
    parser = argparse.ArgumentParser(
        description="Mini stock trading simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
{HELP_TEXT}

Examples:
  stocksim
  stocksim --name Alice --cash 50000 --seed 42
  stocksim -c "buy AAPL 10" -c "simulate 5" -c portfolio
        """
    )
    parser.add_argument('--name', '-n', type=str, help='Trader name (prompted when omitted)')
    parser.add_argument('--cash', type=float, help='Starting cash (default: $10,000)')
    parser.add_argument('--seed', type=int, help='Random seed for the market')
    parser.add_argument('--config', type=str, help='JSON configuration file')
    parser.add_argument('--log-level', type=str, help='Logging level (default: WARNING)')
    parser.add_argument('--command', '-c', action='append', default=[],
                        help='Run a command non-interactively (repeatable)')

    args = parser.parse_args(argv)

    overrides = {}
    if args.cash is not None:
        overrides["starting_cash"] = args.cash
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        config = SimulatorConfig.from_file(args.config) if args.config else SimulatorConfig.from_env()
        config = dataclasses.replace(config, **overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        setup_logging(config.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    name = args.name
    if args.command:
        account, market = create_session(name or config.default_name, config)
        shell = TradingShell(account, market, config)
        shell.run(args.command, prompt="")
        return 0

    print("Welcome to the Mini Stock Trading Simulator!")
    if name is None:
        try:
            name = input("Enter your name: ").strip()
        except EOFError:
            name = ""
    account, market = create_session(name or config.default_name, config)
    shell = TradingShell(account, market, config)
    shell.cmd_help([])
    print("\n> ", end="", flush=True)

    try:
        shell.run(sys.stdin)
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
