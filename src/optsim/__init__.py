"""Tick-driven options strategy backtester."""

__version__ = "0.1.0"
