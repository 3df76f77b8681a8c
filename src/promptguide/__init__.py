"""promptguide - UI component prompt guide generator.

promptguide turns a catalog of UI-component metadata into a single Markdown
reference document that an AI coding assistant reads as grounding context.

Core principles:
- Reproducibility: Same catalog and config produce byte-identical output
- Order Preservation: Components and properties render in catalog order
- All-or-Nothing: A malformed catalog aborts the run before rendering
"""

__version__ = "0.1.0"
__author__ = "promptguide Contributors"
