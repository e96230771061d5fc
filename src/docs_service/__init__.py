"""
Documentation Service package.

This module provides a FastAPI application that serves the project's
Markdown documents rendered as HTML pages, plus a greeting at `/saludo`.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
