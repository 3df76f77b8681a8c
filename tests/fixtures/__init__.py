"""Test fixtures for promptguide.

Sample catalogs:
- catalogs/sample.json: Three components (Button, Spacer, Avatar); Spacer has no props
- catalogs/sample.yaml: Single Badge component in YAML form
- catalogs/missing_example.json: Component without the required "example" field
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to sample catalogs
CATALOGS_DIR = FIXTURES_DIR / "catalogs"

SAMPLE_CATALOG_PATH = CATALOGS_DIR / "sample.json"
SAMPLE_YAML_CATALOG_PATH = CATALOGS_DIR / "sample.yaml"
MISSING_EXAMPLE_CATALOG_PATH = CATALOGS_DIR / "missing_example.json"


def get_catalog(name: str) -> Path:
    """Get path to a sample catalog.

    Args:
        name: File name of the catalog

    Returns:
        Path to the catalog

    Raises:
        ValueError: If the catalog doesn't exist
    """
    catalog_path = CATALOGS_DIR / name
    if not catalog_path.exists():
        raise ValueError(f"Sample catalog not found: {name}")
    return catalog_path
