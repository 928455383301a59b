"""Classic algorithm exercises: simulation, sorting, dynamic programming, greedy, number theory, searching and hashing."""

__version__ = "0.1.0"