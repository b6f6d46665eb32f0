"""Solvers for expense report sums (day01) and password policy checks (day02)."""

__version__ = "0.1.0"
__all__ = ["day01", "day02"]