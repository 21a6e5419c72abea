# backtester

A small event-driven backtester for tick data. It works in four steps:

1. Ticks are read from a CSV file.
2. Each tick goes to a strategy.
3. Every signal the strategy gives is filled by a simulated execution handler.
4. The fill is booked into a portfolio.

At the end the run reports its results.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Input data

The CSV file starts with a header line, which is skipped. After it comes one tick per line:

```
timestamp,price,quantity,side
1600000001,100.50,10.0,Buy
1600000002,101.00,5.0,Sell
```

The side column is read without regard to case:

- `buy`, `b` or `1` is a buy.
- `sell`, `s` or `0` is a sell.
- Anything else is unknown.

Reading stops at the end of the file. It also stops early at the first empty line, or at the first line that cannot be parsed.

If the file cannot be opened, an error is printed to stderr and no ticks are produced.

## Command line

```
backtester [DATA_FILE] [--window N] [--multiplier K] [--fee-rate R]
           [--cash AMOUNT] [--symbol SYMBOL] [--quantity Q]
```

| Option | Default | Meaning |
| --- | --- | --- |
| `DATA_FILE` | `data/market_data.csv` | CSV file of ticks |
| `--window` | `20` | ticks in the rolling window |
| `--multiplier` | `2.0` | band width in standard deviations |
| `--fee-rate` | `0.001` | fee as a fraction of the traded value |
| `--cash` | `10000.0` | starting balance |
| `--symbol` | `BTCUSDT` | symbol that is traded |
| `--quantity` | `1.0` | quantity traded on each signal |

The command runs a mean-reversion strategy over the file. It prints the following:

- each fill, with its tick number, side, price, fee and the cash left
- the final price, cash and holdings
- the total portfolio value
- profit and loss, in money and in percent
- the time taken, in total and per tick

The same command can be started with `python -m backtester.cli`.

## Library use

```python
from backtester.data import CsvTickLoader
from backtester.strategy import MeanReversionStrategy
from backtester.execution import SimulatedExecutionHandler
from backtester.portfolio import PortfolioHandler
from backtester.cli import run_backtest

with CsvTickLoader("data/market_data.csv") as loader:
    result = run_backtest(
        loader,
        MeanReversionStrategy(20, 2.0),
        SimulatedExecutionHandler(0.001),
        PortfolioHandler(10000.0),
        "BTCUSDT",
        1.0,
    )

print(result.end_value, result.pnl, result.return_pct)
for trade in result.trades:
    print(trade.tick_number, trade.execution.side, trade.cash_after)
```

`run_backtest` returns a `BacktestResult`. It holds:

- the tick count
- the last price
- the final cash, position and value
- the elapsed time in microseconds
- the list of `TradeRecord`s

It also has `pnl`, `return_pct` and `latency_per_tick_us` properties.

### Modules

- **`backtester.models`** holds the value types: `Side` (`UNKNOWN`, `BUY`, `SELL`), `Tick`, `Order` and `Execution`. All of them except `Side` are frozen dataclasses.
- **`backtester.data`**
  - `parse_tick(line)` turns one CSV line into a `Tick`. It returns `None` if the line is malformed.
  - `DataSource` is the base class for tick streams. It can be iterated.
  - `CsvTickLoader` reads a file. It is a context manager and has `close()`.
- **`backtester.strategy`** has `MeanReversionStrategy(window_size, std_dev_multiplier)`. Its `on_tick(tick)` returns:
  - `Side.SELL` when the price is above `mean + k * stddev`,
  - `Side.BUY` when it is below `mean - k * stddev`,
  - `Side.UNKNOWN` otherwise, and also until the window is full.

  A window size below 1 raises `ValueError`.
- **`backtester.execution`** has `SimulatedExecutionHandler(fee_rate=0.0)`.
  - It fills every order in full at the tick's price.
  - It charges `price * quantity * fee_rate` as the fee.
  - All fills are kept in its `executions` property.
- **`backtester.portfolio`** has `PortfolioHandler(initial_cash)`. It tracks `cash` and a `position(symbol)` for each symbol, and may go negative in both. `total_value(prices)` is the cash plus the positions, valued at the prices given. Symbols missing from `prices` are left out.

## What it does not do

- It only simulates. It does not connect to an exchange or place real orders.
- It ships a single strategy.
- It does not store results. It only prints them, or returns them to the caller.