"""Trading strategies that turn ticks into signals."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque

from backtester.models import Side, Tick


class Strategy(ABC):
    """Produces a trade signal for every tick it sees."""

    @abstractmethod
    def on_tick(self, tick: Tick) -> Side:
        """Consume a tick and return a signal; ``Side.UNKNOWN`` means no trade."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the strategy."""


class MeanReversionStrategy(Strategy):
    """Bollinger-band mean reversion over a rolling window of prices.

    Sells when the price rises above ``mean + k * stddev`` and buys when it
    falls below ``mean - k * stddev``, once the window is full.
    """

    def __init__(self, window_size: int, std_dev_multiplier: float) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self._window_size = window_size
        self._std_dev_multiplier = std_dev_multiplier
        self._prices: deque[float] = deque(maxlen=window_size)

    @property
    def name(self) -> str:
        return "MeanReversion_Bollinger"

    def on_tick(self, tick: Tick) -> Side:
        self._prices.append(tick.price)
        if len(self._prices) < self._window_size:
            return Side.UNKNOWN

        mean = sum(self._prices) / len(self._prices)
        variance = sum((p - mean) ** 2 for p in self._prices) / len(self._prices)
        width = self._std_dev_multiplier * math.sqrt(variance)

        if tick.price > mean + width:
            return Side.SELL
        if tick.price < mean - width:
            return Side.BUY
        return Side.UNKNOWN