"""Count comparisons and swaps of classic sorting and searching algorithms."""

__version__ = "1.0.0"
__all__ = ["algorithms", "cli", "menu", "statistics", "utils"]