"""promptguide template rendering.

This module provides Jinja2-based template rendering with deterministic output.
Templates are designed to produce identical output for identical input.
"""

from promptguide.templates.renderer import DocumentRenderer, PreambleLoader, write_document

__all__ = ["DocumentRenderer", "PreambleLoader", "write_document"]
