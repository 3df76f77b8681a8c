"""Template renderer for prompt guide generation.

Renders a component catalog to Markdown using Jinja2 templates.
All output is deterministic - same catalog and config always produce the
same bytes.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined, Template, select_autoescape

from promptguide.config import PromptGuideConfig
from promptguide.errors import WriteError
from promptguide.models.catalog import Catalog
from promptguide.renderers.filters import (
    PROPERTY_TABLE_HEADER,
    front_matter_quote,
    property_row,
)

logger = logging.getLogger(__name__)

GUIDE_TEMPLATE = "guide.md.j2"
PREAMBLE_TEMPLATE = "preamble.md.j2"


class PreambleLoader:
    """Loads a custom preamble template from disk.

    A custom preamble replaces the built-in one and is rendered with the same
    variables (title, description, library, package).
    """

    def __init__(self, config: PromptGuideConfig | None = None) -> None:
        """Initialize preamble loader.

        Args:
            config: promptguide configuration with preamble settings
        """
        self.config = config

    @property
    def path(self) -> Path | None:
        """Configured custom preamble path, if any."""
        if self.config is None or not self.config.preamble.file:
            return None
        return Path(self.config.preamble.file)

    def load(self) -> str | None:
        """Read the custom preamble template source.

        Returns:
            Template source, or None if no custom preamble is configured

        Raises:
            ValueError: If a preamble is configured but cannot be read
        """
        path = self.path
        if path is None:
            return None

        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Failed to read preamble %s: %s", path, e)
            raise ValueError(f"Preamble not readable: {path}") from e

        logger.debug("Loaded custom preamble from %s", path)
        return source


class DocumentRenderer:
    """Renders a component catalog to a Markdown prompt guide.

    Usage:
        renderer = DocumentRenderer(config)
        markdown = renderer.render(catalog)
    """

    def __init__(self, config: PromptGuideConfig | None = None) -> None:
        """Initialize the document renderer.

        Args:
            config: promptguide configuration (uses defaults if None)
        """
        self.config = config or PromptGuideConfig()
        self._preamble_loader = PreambleLoader(self.config)

        self._env = Environment(
            loader=PackageLoader("promptguide", "templates"),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["property_row"] = property_row
        self._env.filters["front_matter_quote"] = front_matter_quote

    @property
    def snippet_language(self) -> str:
        """Code fence language applied to every snippet."""
        return self.config.snippet_language

    def _get_template(self, name: str) -> Template:
        try:
            return self._env.get_template(name)
        except Exception as e:
            logger.error("Failed to load template %s: %s", name, e)
            raise ValueError(f"Template not found: {name}") from e

    def render_preamble(self) -> str:
        """Render the fixed document preamble.

        Returns:
            Preamble text (front matter plus static guidance)
        """
        custom = self._preamble_loader.load()

        try:
            template = (
                self._env.from_string(custom)
                if custom is not None
                else self._get_template(PREAMBLE_TEMPLATE)
            )
            return template.render(**self.preamble_variables())
        except ValueError:
            raise
        except Exception as e:
            logger.error("Preamble rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

    def preamble_variables(self) -> dict[str, str]:
        """Variables available to built-in and custom preamble templates."""
        preamble = self.config.preamble
        return {
            "title": preamble.title,
            "description": preamble.description,
            "library": preamble.library,
            "package": preamble.package,
        }

    def check_preamble(self, source: str) -> str:
        """Render preamble source, failing on any variable outside the preamble set.

        Args:
            source: Custom preamble template source

        Returns:
            The rendered preamble

        Raises:
            jinja2.TemplateSyntaxError: If the source does not parse or uses an unknown filter
            jinja2.UndefinedError: If the source references an unknown variable
        """
        strict_env = self._env.overlay(undefined=StrictUndefined)
        return strict_env.from_string(source).render(**self.preamble_variables())

    def render(self, catalog: Catalog) -> str:
        """Render a catalog to Markdown.

        Args:
            catalog: Loaded component catalog

        Returns:
            Preamble followed by one block per component, in catalog order
        """
        template = self._get_template(GUIDE_TEMPLATE)
        context = self._build_context(catalog)

        try:
            rendered = template.render(**context)
        except Exception as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.info(
            "Rendered %d components (%d characters)", len(catalog), len(rendered)
        )
        return rendered

    def _build_context(self, catalog: Catalog) -> dict[str, Any]:
        """Build the template rendering context.

        Args:
            catalog: Component catalog

        Returns:
            Template context dictionary
        """
        return {
            "preamble": self.render_preamble(),
            "components": catalog.components,
            "snippet_language": self.snippet_language,
            "escape_descriptions": self.config.escape_descriptions,
            "table_header": PROPERTY_TABLE_HEADER,
        }

    def render_to_file(self, catalog: Catalog, output_path: Path) -> Path:
        """Render a catalog and write it to file.

        The file is replaced atomically: a failed write leaves any previous
        file untouched.

        Args:
            catalog: Component catalog
            output_path: Path to write output file

        Returns:
            Path to written file

        Raises:
            WriteError: If the destination cannot be written
        """
        content = self.render(catalog)
        write_document(content, output_path)
        return output_path

    def preview(self, catalog: Catalog, max_lines: int = 50) -> str:
        """Generate a preview of the rendered output.

        Args:
            catalog: Component catalog
            max_lines: Maximum lines to include in preview

        Returns:
            Preview string with truncation indicator
        """
        return truncate_preview(self.render(catalog), max_lines)


def truncate_preview(content: str, max_lines: int = 50) -> str:
    """Cut rendered content down to its first lines.

    Args:
        content: Rendered document
        max_lines: Maximum lines to keep

    Returns:
        Content, with a truncation indicator if lines were dropped
    """
    lines = content.split("\n")

    if len(lines) <= max_lines:
        return content

    preview_lines = lines[:max_lines]
    preview_lines.append(f"\n... [{len(lines) - max_lines} more lines] ...")

    return "\n".join(preview_lines)


def write_document(content: str, output_path: Path) -> None:
    """Write rendered content, fully replacing any existing file.

    Args:
        content: Rendered document
        output_path: Destination path

    Raises:
        WriteError: If the destination cannot be written
    """
    output_path = Path(output_path)
    tmp_name: str | None = None
    replaced = False

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        mode = output_path.stat().st_mode & 0o777 if output_path.exists() else 0o644
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, output_path)
        replaced = True
    except OSError as e:
        logger.error("Failed to write %s: %s", output_path, e)
        raise WriteError(output_path, e.strerror or str(e)) from e
    except UnicodeEncodeError as e:
        logger.error("Failed to write %s: %s", output_path, e)
        raise WriteError(output_path, f"content is not valid UTF-8 text ({e.reason})") from e
    finally:
        if not replaced and tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.info("Wrote prompt guide to %s", output_path)
