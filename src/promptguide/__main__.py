"""Entry point for running promptguide as a module.

Usage:
    python -m promptguide [command] [options]

Example:
    python -m promptguide write --catalog full.json --output heroui-prompt-guide.md
    python -m promptguide check
"""

from promptguide.cli import app

if __name__ == "__main__":
    app()
