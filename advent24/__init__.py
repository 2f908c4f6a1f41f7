"""Solvers for days 1 to 5 of the 2024 Advent of Code puzzles, with a command line entry point."""

__version__ = "0.1.0"
__all__ = ["day1", "day2", "day3", "day4", "day5", "cli"]