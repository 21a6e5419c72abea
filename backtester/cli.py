"""Command that runs a mean-reversion backtest over a CSV file of ticks."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from backtester.data import CsvTickLoader
from backtester.execution import ExecutionHandler, SimulatedExecutionHandler
from backtester.models import Execution, Order, Side, Tick
from backtester.portfolio import Portfolio, PortfolioHandler
from backtester.strategy import MeanReversionStrategy, Strategy

_RULE = "-" * 48


@dataclass(frozen=True)
class TradeRecord:
    """An execution together with the tick number and cash left after it."""

    tick_number: int
    execution: Execution
    cash_after: float


@dataclass(frozen=True)
class BacktestResult:
    """Summary of a finished backtest."""

    symbol: str
    tick_count: int
    last_price: float
    initial_value: float
    final_cash: float
    final_position: float
    end_value: float
    elapsed_us: int
    trades: list[TradeRecord] = field(default_factory=list)

    @property
    def pnl(self) -> float:
        return self.end_value - self.initial_value

    @property
    def return_pct(self) -> float:
        return self.pnl / self.initial_value * 100.0

    @property
    def latency_per_tick_us(self) -> float:
        if self.tick_count == 0:
            return math.nan
        return self.elapsed_us / self.tick_count


def run_backtest(
    ticks: Iterable[Tick],
    strategy: Strategy,
    execution_handler: ExecutionHandler,
    portfolio: Portfolio,
    symbol: str = "BTCUSDT",
    quantity: float = 1.0,
) -> BacktestResult:
    """Feed ticks to the strategy, execute its signals and value the result."""
    initial_value = portfolio.cash
    trades: list[TradeRecord] = []
    tick_count = 0
    last_price = 0.0

    start = time.perf_counter_ns()
    for tick in ticks:
        last_price = tick.price
        tick_count += 1

        signal = strategy.on_tick(tick)
        if signal is Side.UNKNOWN:
            continue

        order = Order(tick.timestamp, symbol, signal, quantity)
        execution = execution_handler.on_order(order, tick)
        if execution is None:
            continue
        portfolio.on_execution(execution)
        trades.append(TradeRecord(tick_count, execution, portfolio.cash))
    elapsed_us = (time.perf_counter_ns() - start) // 1000

    return BacktestResult(
        symbol=symbol,
        tick_count=tick_count,
        last_price=last_price,
        initial_value=initial_value,
        final_cash=portfolio.cash,
        final_position=portfolio.position(symbol),
        end_value=portfolio.total_value({symbol: last_price}),
        elapsed_us=elapsed_us,
        trades=trades,
    )


def _number(value: float, fixed: bool) -> str:
    return f"{value:.2f}" if fixed else f"{value:g}"


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="backtester", description="Run a mean-reversion backtest on tick data."
    )
    parser.add_argument("data_file", nargs="?", default="data/market_data.csv")
    parser.add_argument("--window", type=int, default=20)
    parser.add_argument("--multiplier", type=float, default=2.0)
    parser.add_argument("--fee-rate", type=float, default=0.001)
    parser.add_argument("--cash", type=float, default=10000.0)
    parser.add_argument("--symbol", default="BTCUSDT")
    parser.add_argument("--quantity", type=float, default=1.0)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the backtest and print a report; returns the exit status."""
    args = _parse_args(argv)
    print(f"Loading data from: {args.data_file}")

    with CsvTickLoader(args.data_file) as loader:
        strategy = MeanReversionStrategy(args.window, args.multiplier)
        handler = SimulatedExecutionHandler(args.fee_rate)
        portfolio = PortfolioHandler(args.cash)

        print("Starting Backtest...")
        print(f"Initial Balance: {_number(portfolio.cash, False)}")
        print(_RULE)

        result = run_backtest(
            loader, strategy, handler, portfolio, args.symbol, args.quantity
        )

    for trade in result.trades:
        execution = trade.execution
        side = "BUY " if execution.side is Side.BUY else "SELL"
        print(
            f"Tick #{trade.tick_number} | {side}"
            f" | Price: {execution.price:.2f}"
            f" | Fee: {execution.fee:.2f}"
            f" | Cash Left: {trade.cash_after:.2f}"
        )

    fixed = bool(result.trades)
    base_asset = args.symbol.removesuffix("USDT") or args.symbol
    sign = "+" if result.pnl >= 0 else ""

    print(_RULE)
    print("BACKTEST RESULTS")
    print(f"Final Price: {_number(result.last_price, fixed)}")
    print(f"Final Cash: {_number(result.final_cash, fixed)}")
    print(f"Final Holdings: {_number(result.final_position, fixed)} {base_asset}")
    print(_RULE)
    print(f"Total Portfolio Value: {_number(result.end_value, fixed)}")
    print(
        f"Net Profit (PnL): {sign}{_number(result.pnl, fixed)}"
        f" ({_number(result.return_pct, fixed)}%)"
    )
    print(f"Time taken: {result.elapsed_us} us")
    print(f"Latency per tick: {_number(result.latency_per_tick_us, fixed)} us")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())