"""Catalog loader: reads a component catalog file into an immutable Catalog.

Supported sources:
- JSON (*.json, and any unrecognized suffix)
- YAML (*.yaml, *.yml)

Expected shape: {"components": [ComponentRecord, ...]}

Loading is all-or-nothing. The first structural problem raises LoadError
naming the offending component by index and name.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from promptguide.errors import LoadError
from promptguide.models.catalog import Catalog, ComponentRecord

if TYPE_CHECKING:
    from promptguide.config import PromptGuideConfig

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}

SORT_ORDERS = {"none", "name"}

COMPONENT_FIELDS = ("name", "description", "import", "props", "example")
PROPERTY_FIELDS = ("name", "type", "description")


# =============================================================================
# Field Parsing
# =============================================================================


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _check_text(value: str, key: str, where: str) -> None:
    """Reject strings that cannot be written out as UTF-8 (lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(
            f"{where}field '{key}' is not valid UTF-8 text (position {e.start})"
        ) from e


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    if key not in data or data[key] is None:
        raise ValueError(f"{where}missing required field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(
            f"{where}field '{key}' must be a string (got {type(value).__name__})"
        )
    _check_text(value, key, where)
    return value


def _validate_property(data: Any, position: int) -> None:
    """Check a single property entry against the property shape.

    Args:
        data: Raw property mapping
        position: Zero-based index within the component's props

    Raises:
        ValueError: If the entry does not have the property shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"property #{position}: expected a mapping")

    name = data.get("name")
    where = f"property #{position} ({name!r}): " if isinstance(name, str) else f"property #{position}: "

    for key in PROPERTY_FIELDS:
        _require_str(data, key, where)

    default = data.get("default")
    if default is not None:
        if not _is_scalar(default):
            raise ValueError(f"{where}field 'default' must be a literal value")
        if isinstance(default, str):
            _check_text(default, "default", where)

    options = data.get("options")
    if options is not None:
        if not isinstance(options, list) or not all(_is_scalar(o) for o in options):
            raise ValueError(f"{where}field 'options' must be a list of literal values")
        for option in options:
            if isinstance(option, str):
                _check_text(option, "options", where)


def _parse_component(data: dict[str, Any]) -> ComponentRecord:
    """Validate a single component entry and build its record.

    Raises:
        ValueError: If the entry does not have the component shape
    """
    for key in COMPONENT_FIELDS:
        if key == "props":
            continue
        _require_str(data, key, "")

    if not data["name"].strip():
        raise ValueError("field 'name' must not be empty")

    if "props" not in data or data["props"] is None:
        raise ValueError("missing required field 'props'")
    if not isinstance(data["props"], list):
        raise ValueError(
            f"field 'props' must be a list (got {type(data['props']).__name__})"
        )

    for position, prop in enumerate(data["props"]):
        _validate_property(prop, position)

    return ComponentRecord.from_dict(data)


# =============================================================================
# Public API
# =============================================================================


def load_catalog_from_dict(
    data: Any,
    sort_by: str = "none",
    source_path: Path | None = None,
) -> Catalog:
    """Build a Catalog from already-deserialized data.

    Args:
        data: Top-level catalog object ({"components": [...]})
        sort_by: Component ordering ("none" keeps source order, "name" sorts)
        source_path: File the data came from, used in error messages

    Returns:
        Catalog with components in the requested order

    Raises:
        LoadError: If the data does not have the catalog shape
    """
    if sort_by not in SORT_ORDERS:
        raise LoadError(source_path, f"Invalid sort order: {sort_by}. Valid: {SORT_ORDERS}")

    if not isinstance(data, dict):
        raise LoadError(source_path, "top-level value must be a mapping")

    if "components" not in data:
        raise LoadError(source_path, "missing required field 'components'")

    raw_components = data["components"]
    if not isinstance(raw_components, list):
        raise LoadError(source_path, "field 'components' must be a list")

    components: list[ComponentRecord] = []
    seen: dict[str, int] = {}

    for index, raw in enumerate(raw_components):
        name = raw.get("name") if isinstance(raw, dict) else None
        label = name if isinstance(name, str) else None

        if not isinstance(raw, dict):
            raise LoadError(source_path, "expected a mapping", index=index)

        try:
            component = _parse_component(raw)
        except ValueError as e:
            raise LoadError(source_path, str(e), index=index, component=label) from e

        if component.name in seen:
            raise LoadError(
                source_path,
                f"duplicate component name (first defined at #{seen[component.name]})",
                index=index,
                component=label,
            )
        seen[component.name] = index
        components.append(component)

    if sort_by == "name":
        components.sort(key=lambda c: c.name.casefold())

    logger.debug("Parsed %d components from %s", len(components), source_path or "<dict>")
    return Catalog(components=tuple(components), source_path=source_path)


def load_catalog(path: Path, sort_by: str = "none") -> Catalog:
    """Read and parse a catalog file.

    Args:
        path: Catalog file (JSON, or YAML by suffix)
        sort_by: Component ordering ("none" or "name")

    Returns:
        Fully materialized Catalog

    Raises:
        LoadError: If the file is missing, unreadable, or malformed
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise LoadError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, f"read error: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(path, f"invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(path, f"invalid YAML: {e}") from e

    catalog = load_catalog_from_dict(data, sort_by=sort_by, source_path=path)
    logger.info("Loaded %d components from %s", len(catalog), path)
    return catalog


class CatalogLoader:
    """Loads the catalog named by a promptguide configuration.

    Usage:
        loader = CatalogLoader(config)
        catalog = loader.load()
    """

    def __init__(self, config: "PromptGuideConfig | None" = None) -> None:
        """Initialize the loader.

        Args:
            config: promptguide configuration (uses defaults if None)
        """
        self.config = config

    def load(self, path: Path | None = None, sort_by: str | None = None) -> Catalog:
        """Load the catalog, with optional per-call overrides.

        Args:
            path: Catalog file (defaults to config.catalog.path)
            sort_by: Component ordering (defaults to config.catalog.sort_by)

        Returns:
            Loaded Catalog
        """
        if path is None:
            path = Path(self.config.catalog.path) if self.config else Path("full.json")
        if sort_by is None:
            sort_by = self.config.catalog.sort_by if self.config else "none"
        return load_catalog(path, sort_by=sort_by)
