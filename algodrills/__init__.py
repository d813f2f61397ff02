"""Classic algorithm and data-structure exercises: containers, lists, trees, DP, strings, arrays and bits."""

__version__ = "0.1.0"