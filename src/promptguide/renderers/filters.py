"""Jinja2 filters for Markdown table and inline-code formatting.

The properties table is the one place where field content can corrupt the
document structure: a "|" inside a cell would be read as a column break.
"""

from promptguide.models.catalog import PropertyRecord

TABLE_DELIMITER = "|"
ESCAPED_DELIMITER = "\\|"

PROPERTY_TABLE_HEADER = (
    "| Name | Type | Default | Options | Description |\n"
    "| --- | --- | --- | --- | --- |"
)


def escape_table_cell(text: str) -> str:
    """Escape every table delimiter so the text stays inside one cell.

    Examples:
        >>> escape_table_cell("default | primary")
        'default \\\\| primary'
        >>> escape_table_cell("string")
        'string'
    """
    return text.replace(TABLE_DELIMITER, ESCAPED_DELIMITER)


def code_span(text: str) -> str:
    """Wrap text in inline-code markers."""
    return f"`{text}`"


def options_cell(options: tuple[str, ...] | list[str] | None) -> str:
    """Render allowed values as a comma-separated run of code spans.

    Args:
        options: Allowed literal values, or None

    Returns:
        "`a`, `b`" for ["a", "b"]; empty string when there are no options
    """
    if not options:
        return ""
    return code_span("`, `".join(options))


def property_row(prop: PropertyRecord, escape_descriptions: bool = True) -> str:
    """Render one property as a five-column table row.

    Columns: Name, Type, Default, Options, Description. Absent default and
    options render as empty cells.

    Args:
        prop: Property to render
        escape_descriptions: Also escape delimiters in the description

    Returns:
        A single table row without trailing newline
    """
    description = escape_table_cell(prop.description) if escape_descriptions else prop.description
    cells = [
        code_span(prop.name),
        code_span(escape_table_cell(prop.type)),
        code_span(prop.default) if prop.has_default else "",
        options_cell(prop.options),
        description,
    ]
    return "| " + " | ".join(cells) + " |"


def front_matter_quote(text: str) -> str:
    """Quote a value as a single-quoted YAML scalar for front matter.

    Examples:
        >>> front_matter_quote("Hero UI's Guide")
        "'Hero UI''s Guide'"
    """
    return "'" + text.replace("'", "''") + "'"
