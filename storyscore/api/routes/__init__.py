"""Routes module initialization."""

from . import analysis

__all__ = ['analysis']
