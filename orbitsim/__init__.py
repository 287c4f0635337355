"""Gravitational n-body simulation with a live animated view."""

__version__ = "0.1.0"
__all__ = ["constants", "randomize", "physics", "display"]