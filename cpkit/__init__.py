"""Competitive-programming algorithms and data structures: number theory, strings, DP, graphs and trees."""

__version__ = "0.1.0"