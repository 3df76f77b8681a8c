"""Shared pytest fixtures for promptguide tests.

Fixtures are organized by category:
- Path fixtures: Sample catalog files on disk
- Configuration fixtures: Test configs for various scenarios
- Catalog fixtures: Pre-built catalogs for testing renderers
"""

import json
from pathlib import Path
from typing import Any

import pytest

from promptguide.models import Catalog, ComponentRecord, PropertyRecord
from tests.fixtures import CATALOGS_DIR, SAMPLE_CATALOG_PATH

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def catalogs_dir() -> Path:
    """Return the path to the sample catalog fixtures."""
    return CATALOGS_DIR


@pytest.fixture
def sample_catalog_path() -> Path:
    """Return the path to the three-component JSON catalog."""
    return SAMPLE_CATALOG_PATH


@pytest.fixture
def write_catalog(tmp_path: Path):
    """Return a helper that writes catalog data to a temporary JSON file."""

    def _write(data: Any, name: str = "catalog.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid promptguide configuration."""
    return {
        "catalog": {"path": "full.json"},
        "output": {"path": "heroui-prompt-guide.md"},
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete promptguide configuration with all options."""
    return {
        "catalog": {
            "path": "catalog/components.yaml",
            "sort_by": "name",
        },
        "output": {
            "path": "docs/guide.mdx",
        },
        "snippet_language": "tsx",
        "escape_descriptions": False,
        "preamble": {
            "title": "Acme UI Guide",
            "description": "How to use Acme UI.",
            "library": "Acme UI",
            "package": "@acme/ui",
            "file": ".promptguide/preamble.md.j2",
        },
    }


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def badge_component() -> ComponentRecord:
    """Return a single Badge component with one piped-type property."""
    return ComponentRecord(
        name="Badge",
        description="x",
        import_statement='import {Badge} from "@heroui/react";',
        example="<Badge/>",
        props=(
            PropertyRecord(
                name="color",
                type="default | primary",
                default="default",
                options=("default", "primary"),
                description="d",
            ),
        ),
    )


@pytest.fixture
def badge_catalog(badge_component: ComponentRecord) -> Catalog:
    """Return a catalog holding only the Badge component."""
    return Catalog(components=(badge_component,))


@pytest.fixture
def multi_catalog(badge_component: ComponentRecord) -> Catalog:
    """Return a catalog with three components in non-alphabetical order."""
    return Catalog(
        components=(
            ComponentRecord(
                name="Tooltip",
                description="Tooltips display informative text.",
                import_statement='import {Tooltip} from "@heroui/react";',
                example='<Tooltip content="Hi"><Button /></Tooltip>',
                props=(
                    PropertyRecord(name="content", type="ReactNode", description="Tooltip body."),
                    PropertyRecord(
                        name="placement",
                        type="top | bottom",
                        default="top",
                        options=("top", "bottom"),
                        description="Where the tooltip appears.",
                    ),
                    PropertyRecord(name="delay", type="number", default="0", description="Open delay."),
                ),
            ),
            badge_component,
            ComponentRecord(
                name="Divider",
                description="Separates content.",
                import_statement='import {Divider} from "@heroui/react";',
                example="<Divider />",
            ),
        )
    )
