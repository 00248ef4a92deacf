"""Report renderers."""

from storyscore.reporting.markdown import render_markdown

__all__ = ["render_markdown"]
