"""Order execution handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backtester.models import Execution, Order, Tick


class ExecutionHandler(ABC):
    """Turns orders into executions against market ticks."""

    @abstractmethod
    def on_order(self, order: Order, market_tick: Tick) -> Execution | None:
        """Execute ``order`` at ``market_tick``; ``None`` if it was not filled."""

    @property
    @abstractmethod
    def executions(self) -> tuple[Execution, ...]:
        """All executions made so far, oldest first."""


class SimulatedExecutionHandler(ExecutionHandler):
    """Fills every order in full at the tick price, charging a proportional fee."""

    def __init__(self, fee_rate: float = 0.0) -> None:
        self._fee_rate = fee_rate
        self._executions: list[Execution] = []

    def on_order(self, order: Order, market_tick: Tick) -> Execution:
        price = market_tick.price
        execution = Execution(
            timestamp=market_tick.timestamp,
            symbol=order.symbol,
            side=order.side,
            price=price,
            quantity=order.quantity,
            fee=price * order.quantity * self._fee_rate,
            order_id=f"SIM_{market_tick.timestamp}",
        )
        self._executions.append(execution)
        return execution

    @property
    def executions(self) -> tuple[Execution, ...]:
        return tuple(self._executions)