"""Visualization helpers for plotting recorded search histories."""

from .search_history import history_to_arrays, plot_search_history

__all__ = [
    "history_to_arrays",
    "plot_search_history",
]
