"""docshome - Static landing page for documentation sites.

This package renders the landing page of a documentation site as a
renderer-agnostic view tree, serializes it to HTML, and builds or serves the
result from the command line.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Export main CLI app for entry point
from docshome.cli import app

__all__ = ["__version__", "app"]
