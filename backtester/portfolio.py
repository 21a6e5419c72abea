"""Portfolio accounting: cash and positions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from backtester.models import Execution, Side


class Portfolio(ABC):
    """Tracks cash and positions as executions arrive."""

    @abstractmethod
    def on_execution(self, execution: Execution) -> None:
        """Apply an execution to cash and positions."""

    @property
    @abstractmethod
    def cash(self) -> float:
        """Cash currently held."""

    @abstractmethod
    def position(self, symbol: str) -> float:
        """Quantity held of ``symbol``; zero if never traded."""

    @abstractmethod
    def total_value(self, current_prices: Mapping[str, float]) -> float:
        """Cash plus positions valued at ``current_prices``."""


class PortfolioHandler(Portfolio):
    """A portfolio that allows negative cash and short positions."""

    def __init__(self, initial_cash: float) -> None:
        self._cash = initial_cash
        self._positions: dict[str, float] = {}

    def on_execution(self, execution: Execution) -> None:
        if execution.side is Side.UNKNOWN:
            return
        cost = execution.price * execution.quantity
        held = self._positions.get(execution.symbol, 0.0)
        if execution.side is Side.BUY:
            self._cash -= cost
            self._positions[execution.symbol] = held + execution.quantity
        else:
            self._cash += cost
            self._positions[execution.symbol] = held - execution.quantity
        self._cash -= execution.fee

    @property
    def cash(self) -> float:
        return self._cash

    def position(self, symbol: str) -> float:
        return self._positions.get(symbol, 0.0)

    def total_value(self, current_prices: Mapping[str, float]) -> float:
        total = self._cash
        for symbol in sorted(self._positions):
            if symbol in current_prices:
                total += self._positions[symbol] * current_prices[symbol]
        return total