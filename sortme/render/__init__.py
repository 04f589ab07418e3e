"""Renderers for playback frames."""

from .terminal import RichRenderer, bar_style

__all__ = ["RichRenderer", "bar_style"]
