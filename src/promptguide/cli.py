"""promptguide CLI interface.

Commands:
- write: Generate the prompt guide from a component catalog
- check: Load a catalog and report what it contains
- init: Initialize promptguide configuration
- validate: Validate a custom preamble template

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from promptguide import __version__
from promptguide.config import PromptGuideConfig, create_default_config, load_config
from promptguide.errors import LoadError, WriteError
from promptguide.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="promptguide",
    help="Generate AI-agent prompt guides from UI component catalogs",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: PromptGuideConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"promptguide {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """promptguide - UI component prompt guide generator.

    Turns a component catalog into a Markdown reference for AI coding agents.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# write command
# =============================================================================


@app.command()
def write(
    catalog: Annotated[
        Path | None,
        typer.Option(
            "--catalog",
            "-i",
            help="Catalog file (overrides config)",
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (overrides config)",
        ),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option(
            "--language",
            "-l",
            help="Code fence language for snippets, e.g. typescript",
        ),
    ] = None,
    sort: Annotated[
        str | None,
        typer.Option(
            "--sort",
            help="Component order: none (catalog order) or name",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Preview output without writing files",
        ),
    ] = False,
) -> None:
    """Generate the prompt guide.

    Loads the catalog, renders every component in order, and overwrites the
    output file.

    Exit codes:
        0: Guide generated successfully
        1: Catalog, configuration, or write error
    """
    from promptguide.pipeline import GuidePipeline, PipelineOptions
    from promptguide.templates.renderer import truncate_preview

    options = PipelineOptions(
        catalog_path=catalog,
        output_path=output,
        snippet_language=language,
        sort_by=sort,
        dry_run=dry_run,
    )

    pipeline = GuidePipeline(config=_config)

    try:
        result = pipeline.run(options)
    except LoadError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except WriteError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except ValueError as e:
        _logger.error(f"Generation failed: {e}")
        raise typer.Exit(1)

    if dry_run:
        typer.echo("\n--- Guide Preview ---\n")
        typer.echo(truncate_preview(result.content, max_lines=100))
        typer.echo("\n--- End Preview ---")
        raise typer.Exit(0)

    _logger.structured(
        logging.INFO,
        f"Rendered {result.component_count} components",
        components=result.component_count,
        properties=result.property_count,
        output=str(result.output_path),
    )
    typer.echo(f"\n📄 Prompt guide written to: {result.output_path}")
    raise typer.Exit(0)


# =============================================================================
# check command
# =============================================================================


@app.command()
def check(
    catalog: Annotated[
        Path | None,
        typer.Option(
            "--catalog",
            "-i",
            help="Catalog file (overrides config)",
            dir_okay=False,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """Load a catalog and report its components.

    Exit codes:
        0: Catalog loaded
        1: Catalog missing or malformed
    """
    import json as json_module

    from promptguide.catalog import CatalogLoader

    try:
        loaded = CatalogLoader(_config).load(path=catalog)
    except LoadError as e:
        if json_output:
            typer.echo(json_module.dumps({"valid": False, "error": str(e)}, indent=2))
        else:
            _logger.error(str(e))
        raise typer.Exit(1)

    if json_output:
        summary = {
            "valid": True,
            "source": str(loaded.source_path),
            "components": [
                {"name": component.name, "props": component.prop_count}
                for component in loaded
            ],
            "component_count": len(loaded),
            "property_count": loaded.property_count,
        }
        typer.echo(json_module.dumps(summary, indent=2))
        raise typer.Exit(0)

    typer.echo(f"\n🔍 Catalog: {loaded.source_path}\n")
    for component in loaded:
        typer.echo(f"  • {component.name} ({component.prop_count} props)")
    typer.echo()
    typer.echo(
        f"✅ {len(loaded)} components, {loaded.property_count} properties"
    )
    raise typer.Exit(0)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Initialize promptguide configuration.

    Creates .promptguide/config.yaml with default settings.
    """
    config_dir = Path(".promptguide")
    config_dir.mkdir(exist_ok=True)

    config_file = config_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    typer.echo("\n✅ promptguide configuration initialized")
    typer.echo(f"   Config: {config_file}")
    raise typer.Exit(0)


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate(
    template: Annotated[
        Path,
        typer.Argument(
            help="Path to a Jinja2 preamble template to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a custom preamble template.

    Renders the template with the configured preamble values. Only title,
    description, library and package are defined; any other variable fails.
    """
    from jinja2 import TemplateSyntaxError, UndefinedError

    from promptguide.templates import DocumentRenderer

    _logger.info(f"Validating preamble: {template}")

    renderer = DocumentRenderer(_config)
    try:
        rendered = renderer.check_preamble(template.read_text(encoding="utf-8"))
    except TemplateSyntaxError as e:
        _logger.error(f"Template syntax error: {e.message}")
        typer.echo(f"❌ Template syntax error at line {e.lineno}: {e.message}")
        raise typer.Exit(1)
    except UndefinedError as e:
        _logger.error(f"Template variable error: {e.message}")
        typer.echo(f"❌ Unknown preamble variable: {e.message}")
        typer.echo(f"   Available: {', '.join(renderer.preamble_variables())}")
        raise typer.Exit(1)

    line_count = len(rendered.splitlines())
    typer.echo(f"✅ Template is valid: {template} ({line_count} lines rendered)")
    raise typer.Exit(0)


if __name__ == "__main__":
    app()
