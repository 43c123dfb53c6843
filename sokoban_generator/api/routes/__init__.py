"""API routes package.

This package contains all API route handlers for the application.
"""
from . import generate
from . import templates
from . import validate

__all__ = [
    "generate",
    "templates",
    "validate",
]
