"""Command-line interface for debvercmp."""

from .main import app

__all__ = ["app"]
