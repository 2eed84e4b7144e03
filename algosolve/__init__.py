"""Solutions to classic algorithm and data-structure problems: binary trees,
linked lists, small data structures, expressions, strings, intervals, grids,
geometry, number puzzles and sequences."""

__version__ = "0.1.0"