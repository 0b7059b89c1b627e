"""Classic algorithms on arrays, strings, matrices, trees, greedy problems and bits."""

__version__ = "0.1.0"