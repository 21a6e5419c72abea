import pytest

from backtester.models import Execution, Side
from backtester.portfolio import PortfolioHandler


def test_initial_balance_is_correct():
    portfolio = PortfolioHandler(10000.0)
    assert portfolio.cash == pytest.approx(10000.0)
    assert portfolio.position("BTC") == pytest.approx(0.0)


def test_updates_on_buy():
    portfolio = PortfolioHandler(10000.0)
    portfolio.on_execution(Execution(0, "BTC", Side.BUY, 5000.0, 1.0, 10.0, "id1"))
    assert portfolio.cash == pytest.approx(4990.0)
    assert portfolio.position("BTC") == pytest.approx(1.0)


def test_updates_on_sell():
    portfolio = PortfolioHandler(0.0)
    portfolio.on_execution(Execution(0, "BTC", Side.SELL, 6000.0, 0.5, 5.0, "id2"))
    assert portfolio.cash == pytest.approx(2995.0)
    assert portfolio.position("BTC") == pytest.approx(-0.5)


def test_calculates_total_value():
    portfolio = PortfolioHandler(1000.0)
    portfolio.on_execution(Execution(0, "COIN", Side.BUY, 10.0, 10.0, 0.0, "id1"))
    assert portfolio.total_value({"COIN": 20.0}) == pytest.approx(1100.0)


def test_unknown_side_is_ignored():
    portfolio = PortfolioHandler(500.0)
    portfolio.on_execution(Execution(0, "COIN", Side.UNKNOWN, 10.0, 1.0, 1.0, "id"))
    assert portfolio.cash == 500.0
    assert portfolio.position("COIN") == 0.0


def test_unpriced_positions_are_left_out():
    portfolio = PortfolioHandler(1000.0)
    portfolio.on_execution(Execution(0, "COIN", Side.BUY, 10.0, 10.0, 0.0, "id1"))
    assert portfolio.total_value({}) == pytest.approx(portfolio.cash)


def test_buy_then_sell_round_trip_costs_only_fees():
    portfolio = PortfolioHandler(1000.0)
    portfolio.on_execution(Execution(0, "COIN", Side.BUY, 10.0, 3.0, 0.5, "a"))
    portfolio.on_execution(Execution(1, "COIN", Side.SELL, 10.0, 3.0, 0.5, "b"))
    assert portfolio.position("COIN") == pytest.approx(0.0)
    assert portfolio.cash == pytest.approx(999.0)