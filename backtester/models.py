"""Core value types shared by the backtesting components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Direction of a trade or a signal; UNKNOWN means no direction."""

    UNKNOWN = 0
    BUY = 1
    SELL = 2


@dataclass(frozen=True)
class Tick:
    """A single market trade observation."""

    timestamp: int
    price: float
    quantity: float
    side: Side = Side.UNKNOWN


@dataclass(frozen=True)
class Order:
    """A request to trade a quantity of a symbol."""

    timestamp: int
    symbol: str
    side: Side
    quantity: float


@dataclass(frozen=True)
class Execution:
    """A filled order, including the fee charged for it."""

    timestamp: int
    symbol: str
    side: Side
    price: float
    quantity: float
    fee: float
    order_id: str