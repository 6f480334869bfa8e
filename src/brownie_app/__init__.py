"""Brownie shop desk: sales, stock and receivables on top of the brownie SDK."""

__version__ = "0.1.0"
