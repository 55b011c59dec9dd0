"""Classic algorithm exercises as plain Python functions.

Modules: puzzles, backtracking, arrays, matrix, text, greedy,
sliding_window, bits and numbers.
"""

__version__ = "0.1.0"