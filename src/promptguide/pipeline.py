"""Generation pipeline orchestrator.

Runs the three stages in a strict one-way sequence:
1. Load the catalog (LoadError aborts before any rendering)
2. Render the guide in memory
3. Write the guide (WriteError leaves the rendered text on the exception)
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from promptguide.catalog import CatalogLoader
from promptguide.config import PromptGuideConfig
from promptguide.errors import WriteError
from promptguide.models.catalog import Catalog
from promptguide.templates import DocumentRenderer, write_document

logger = logging.getLogger(__name__)


@dataclass
class PipelineOptions:
    """Per-run overrides for pipeline execution.

    Attributes:
        catalog_path: Catalog file (overrides config)
        output_path: Output file (overrides config)
        snippet_language: Code fence language (overrides config)
        sort_by: Component ordering (overrides config)
        dry_run: Render without writing
    """

    catalog_path: Path | None = None
    output_path: Path | None = None
    snippet_language: str | None = None
    sort_by: str | None = None
    dry_run: bool = False


@dataclass
class GenerationResult:
    """Outcome of a pipeline run.

    Attributes:
        catalog: Catalog that was rendered
        content: Rendered document
        output_path: Where the document was written (None for dry runs)
    """

    catalog: Catalog
    content: str
    output_path: Path | None = None

    @property
    def component_count(self) -> int:
        return len(self.catalog)

    @property
    def property_count(self) -> int:
        return self.catalog.property_count


class GuidePipeline:
    """Loads a catalog, renders it, and writes the guide.

    Usage:
        pipeline = GuidePipeline(config)
        result = pipeline.run(PipelineOptions(output_path=Path("guide.md")))
    """

    def __init__(self, config: PromptGuideConfig | None = None) -> None:
        """Initialize the pipeline.

        Args:
            config: promptguide configuration (uses defaults if None)
        """
        self.config = config or PromptGuideConfig()

    def _effective_config(self, options: PipelineOptions) -> PromptGuideConfig:
        """Apply per-run overrides without mutating the loaded config."""
        if options.snippet_language is None:
            return self.config
        return replace(self.config, snippet_language=options.snippet_language)

    def run(self, options: PipelineOptions | None = None) -> GenerationResult:
        """Execute load, render and (unless dry run) write.

        Args:
            options: Per-run overrides

        Returns:
            GenerationResult with the rendered content

        Raises:
            LoadError: If the catalog cannot be loaded
            WriteError: If the guide cannot be written
            ValueError: If an override is invalid or a custom preamble is broken
        """
        options = options or PipelineOptions()
        config = self._effective_config(options)

        catalog = CatalogLoader(config).load(
            path=options.catalog_path,
            sort_by=options.sort_by,
        )
        logger.info(
            "Catalog: %d components, %d properties",
            len(catalog),
            catalog.property_count,
        )

        renderer = DocumentRenderer(config)
        content = renderer.render(catalog)

        if options.dry_run:
            logger.info("Dry run - no files written")
            return GenerationResult(catalog=catalog, content=content)

        output_path = options.output_path or Path(config.output.path)
        try:
            write_document(content, output_path)
        except WriteError as e:
            e.content = content
            raise

        return GenerationResult(catalog=catalog, content=content, output_path=output_path)
