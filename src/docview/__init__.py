"""docview: Markdown document viewer with origin-aware link resolution."""

__version__ = "0.1.0"
