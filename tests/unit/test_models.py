"""Unit tests for catalog models."""

import dataclasses

import pytest

from promptguide.models import Catalog, ComponentRecord, PropertyRecord
from promptguide.renderers.filters import property_row


class TestPropertyRecord:
    """Tests for PropertyRecord."""

    def test_optional_fields_default_to_none(self) -> None:
        prop = PropertyRecord(name="size", type="string", description="Size.")

        assert prop.default is None
        assert prop.options is None
        assert not prop.has_default
        assert not prop.has_options

    def test_has_default_and_options(self) -> None:
        prop = PropertyRecord(
            name="size",
            type="sm | md",
            description="Size.",
            default="md",
            options=("sm", "md"),
        )

        assert prop.has_default
        assert prop.has_options

    def test_to_dict_omits_absent_fields(self) -> None:
        prop = PropertyRecord(name="size", type="string", description="Size.")

        assert prop.to_dict() == {"name": "size", "type": "string", "description": "Size."}

    def test_from_dict_round_trip(self) -> None:
        data = {
            "name": "color",
            "type": "default | primary",
            "default": "default",
            "options": ["default", "primary"],
            "description": "The color.",
        }

        prop = PropertyRecord.from_dict(data)

        assert prop.options == ("default", "primary")
        assert prop.to_dict() == data

    def test_from_dict_literal_defaults(self) -> None:
        prop = PropertyRecord.from_dict(
            {"name": "isDisabled", "type": "boolean", "default": False, "description": "d"}
        )

        assert prop.default == "false"
        assert property_row(prop) == "| `isDisabled` | `boolean` | `false` |  | d |"

    def test_from_dict_literal_options(self) -> None:
        prop = PropertyRecord.from_dict(
            {"name": "cols", "type": "number", "default": 0, "options": [1, 2, True], "description": "d"}
        )

        assert prop.default == "0"
        assert prop.has_default
        assert prop.options == ("1", "2", "true")

    def test_from_dict_empty_options(self) -> None:
        prop = PropertyRecord.from_dict({"name": "size", "type": "string", "options": [], "description": "d"})

        assert prop.options == ()
        assert not prop.has_options

    def test_is_frozen(self) -> None:
        prop = PropertyRecord(name="size", type="string", description="Size.")

        with pytest.raises(dataclasses.FrozenInstanceError):
            prop.name = "other"  # type: ignore[misc]


class TestComponentRecord:
    """Tests for ComponentRecord."""

    def test_to_dict_uses_import_key(self, badge_component: ComponentRecord) -> None:
        data = badge_component.to_dict()

        assert data["import"] == 'import {Badge} from "@heroui/react";'
        assert "import_statement" not in data
        assert [p["name"] for p in data["props"]] == ["color"]

    def test_from_dict(self) -> None:
        component = ComponentRecord.from_dict({
            "name": "Divider",
            "description": "Separates content.",
            "import": 'import {Divider} from "@heroui/react";',
            "props": [],
            "example": "<Divider />",
        })

        assert component.import_statement == 'import {Divider} from "@heroui/react";'
        assert component.props == ()
        assert component.prop_count == 0


class TestCatalog:
    """Tests for Catalog."""

    def test_empty_catalog(self) -> None:
        catalog = Catalog()

        assert len(catalog) == 0
        assert list(catalog) == []
        assert catalog.property_count == 0

    def test_preserves_order(self, multi_catalog: Catalog) -> None:
        assert multi_catalog.names == ["Tooltip", "Badge", "Divider"]
        assert [c.name for c in multi_catalog] == ["Tooltip", "Badge", "Divider"]

    def test_property_count(self, multi_catalog: Catalog) -> None:
        assert multi_catalog.property_count == 4

    def test_to_dict(self, badge_catalog: Catalog) -> None:
        data = badge_catalog.to_dict()

        assert list(data) == ["components"]
        assert data["components"][0]["name"] == "Badge"

    def test_equality_ignores_source_path(self, badge_component: ComponentRecord) -> None:
        from pathlib import Path

        first = Catalog(components=(badge_component,), source_path=Path("a.json"))
        second = Catalog(components=(badge_component,), source_path=Path("b.json"))

        assert first == second
