"""Classic algorithms: sorting, graphs, shortest paths, strings, dynamic
programming, backtracking and a custom-base calculator."""

__version__ = "0.1.0"