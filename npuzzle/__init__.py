"""Sliding-tile N-puzzle parsing, heuristics, A*/IDA* solving and a command line."""

__version__ = "1.0.0"