"""CLI commands module."""

from . import confidence, library, render

__all__ = ["confidence", "library", "render"]
