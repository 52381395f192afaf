"""Nearest-neighbour tours, a bees algorithm and tour verification for the asymmetric TSP."""

__version__ = "0.1.0"
__all__ = ["instance", "greedy", "bee", "verify"]