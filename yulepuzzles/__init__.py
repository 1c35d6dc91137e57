"""Solvers for the first fifteen days of a December puzzle calendar, with a command to run them."""

__version__ = "0.1.0"