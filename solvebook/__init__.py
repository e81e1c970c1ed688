"""Solvers for classic number-theory, combinatorics, string and graph puzzles."""

__version__ = "0.1.0"