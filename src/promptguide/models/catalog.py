"""Component catalog entities.

This module contains the in-memory form of a component catalog:
- PropertyRecord: One configurable attribute of a component
- ComponentRecord: One documented UI component
- Catalog: Ordered collection of components

All entities are frozen. A catalog is built once by the loader and only read
afterwards.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def literal_text(value: Any) -> str:
    """Render a scalar the way it is written in JSON.

    Examples:
        >>> literal_text(False)
        'false'
        >>> literal_text(0)
        '0'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class PropertyRecord:
    """Single configurable attribute of a component.

    Attributes:
        name: Property identifier (e.g., "color")
        type: Type expression (e.g., "default | primary"), may contain "|"
        description: Short prose description
        default: Literal default value, None if the property has no default
        options: Allowed literal values, None if unconstrained
    """

    name: str
    type: str
    description: str
    default: str | None = None
    options: tuple[str, ...] | None = None

    @property
    def has_default(self) -> bool:
        """Return True if a default value should be rendered."""
        return self.default is not None and self.default != ""

    @property
    def has_options(self) -> bool:
        """Return True if an options enumeration should be rendered."""
        return bool(self.options)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
        }
        if self.default is not None:
            data["default"] = self.default
        if self.options is not None:
            data["options"] = list(self.options)
        data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PropertyRecord":
        """Create from an already-validated dictionary.

        Literal defaults and options are stored as their JSON text, so
        `false` stays `false` rather than becoming Python's `False`.
        """
        default = data.get("default")
        options = data.get("options")
        return cls(
            name=data["name"],
            type=data["type"],
            description=data["description"],
            default=literal_text(default) if default is not None else None,
            options=tuple(literal_text(o) for o in options) if options is not None else None,
        )


@dataclass(frozen=True)
class ComponentRecord:
    """Single documented UI component.

    Attributes:
        name: Display name, unique within a catalog
        description: One paragraph of prose
        import_statement: Import snippet, rendered verbatim (key "import" on disk)
        props: Properties in declaration order
        example: Usage snippet, rendered verbatim
    """

    name: str
    description: str
    import_statement: str
    example: str
    props: tuple[PropertyRecord, ...] = ()

    @property
    def prop_count(self) -> int:
        """Number of documented properties."""
        return len(self.props)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary using the on-disk field names."""
        return {
            "name": self.name,
            "description": self.description,
            "import": self.import_statement,
            "props": [prop.to_dict() for prop in self.props],
            "example": self.example,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComponentRecord":
        """Create from an already-validated dictionary."""
        return cls(
            name=data["name"],
            description=data["description"],
            import_statement=data["import"],
            example=data["example"],
            props=tuple(PropertyRecord.from_dict(p) for p in data.get("props", [])),
        )


@dataclass(frozen=True)
class Catalog:
    """Ordered, immutable collection of components.

    Iteration order is the order the components will be rendered in.

    Attributes:
        components: Components in catalog order
        source_path: File the catalog was loaded from, if any
    """

    components: tuple[ComponentRecord, ...] = ()
    source_path: Path | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[ComponentRecord]:
        return iter(self.components)

    @property
    def names(self) -> list[str]:
        """Component names in catalog order."""
        return [component.name for component in self.components]

    @property
    def property_count(self) -> int:
        """Total number of properties across all components."""
        return sum(component.prop_count for component in self.components)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk catalog shape."""
        return {"components": [component.to_dict() for component in self.components]}
