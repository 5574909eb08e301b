"""Rendering collaborators for analysis results."""

from .plotting import plot_points

__all__ = ["plot_points"]
