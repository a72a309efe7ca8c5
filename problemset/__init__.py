"""Solved algorithm and competitive-programming problems as plain functions."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "codechef_math",
    "codechef_sequences",
    "codechef_strings",
    "grids",
    "linked_list",
    "strings",
    "train_maintenance",
    "trees",
]