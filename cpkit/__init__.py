"""Competitive-programming algorithms: DP, number theory, matrices, graphs and token I/O."""

__version__ = "0.1.0"