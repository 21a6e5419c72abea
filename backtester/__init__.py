"""Event-driven tick backtester: CSV tick loading, a mean-reversion strategy,
simulated execution, portfolio accounting and a command to run it all."""

__version__ = "0.1.0"

__all__ = ["cli", "data", "execution", "models", "portfolio", "strategy"]