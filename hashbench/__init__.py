"""Hash functions, probe-counting hash tables and a benchmark comparing them."""

__version__ = "0.1.0"
__all__ = ["hashing", "tables", "benchmark"]