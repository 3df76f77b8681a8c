"""promptguide configuration system.

Configuration is YAML-based with minimal CLI overrides (--catalog, --output, --language).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.promptguide/config.yaml
3. ./promptguide.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# A code-fence info string: short, no whitespace or backticks
SNIPPET_LANGUAGE_RE = re.compile(r"^[A-Za-z0-9_+#.-]{1,32}$")

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class CatalogConfig:
    """Catalog source configuration.

    Attributes:
        path: Catalog file path (JSON or YAML)
        sort_by: Component ordering (none = file order, name = alphabetical)
    """

    path: str = "full.json"
    sort_by: str = "none"

    def __post_init__(self) -> None:
        """Validate catalog configuration."""
        valid_orders = {"none", "name"}
        if self.sort_by not in valid_orders:
            raise ValueError(f"Invalid sort order: {self.sort_by}. Valid: {valid_orders}")


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: Output file path, fully overwritten on each run
    """

    path: str = "heroui-prompt-guide.md"


@dataclass
class PreambleConfig:
    """Document preamble configuration.

    The preamble is the fixed prose emitted before the component reference.

    Attributes:
        title: Front matter and heading title
        description: Front matter description
        library: Human name of the component library
        package: Package the components are imported from
        file: Optional Jinja2 template replacing the built-in preamble
    """

    title: str = "Hero UI Component Prompt Guide"
    description: str = "A guide for AI agents on how to use Hero UI components."
    library: str = "Hero UI"
    package: str = "@heroui/react"
    file: str | None = None


@dataclass
class PromptGuideConfig:
    """Top-level promptguide configuration.

    Attributes:
        catalog: Catalog source and ordering
        output: Output destination
        preamble: Document preamble settings
        snippet_language: Code fence language for import and example snippets
        escape_descriptions: Escape "|" in property descriptions as well as types
    """

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    preamble: PreambleConfig = field(default_factory=PreambleConfig)
    snippet_language: str = "typescript"
    escape_descriptions: bool = True

    # Set by load_config
    _config_path: Path | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate top-level settings."""
        if not SNIPPET_LANGUAGE_RE.match(self.snippet_language):
            raise ValueError(f"Invalid snippet language: {self.snippet_language!r}")

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${GUIDE_OUTPUT} -> value of GUIDE_OUTPUT

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.promptguide/config.yaml
    2. ./promptguide.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".promptguide" / "config.yaml",
        start_path / "promptguide.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> PromptGuideConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        PromptGuideConfig instance

    Raises:
        ValueError: If a setting is invalid
    """
    data = substitute_env_vars(data)

    defaults = PromptGuideConfig()

    catalog = defaults.catalog
    if "catalog" in data:
        catalog_data = data["catalog"] or {}
        catalog = CatalogConfig(
            path=catalog_data.get("path", catalog.path),
            sort_by=catalog_data.get("sort_by", catalog.sort_by),
        )

    output = defaults.output
    if "output" in data:
        output_data = data["output"] or {}
        output = OutputConfig(path=output_data.get("path", output.path))

    preamble = defaults.preamble
    if "preamble" in data:
        preamble_data = data["preamble"] or {}
        preamble = PreambleConfig(
            title=preamble_data.get("title", preamble.title),
            description=preamble_data.get("description", preamble.description),
            library=preamble_data.get("library", preamble.library),
            package=preamble_data.get("package", preamble.package),
            file=preamble_data.get("file"),
        )

    return PromptGuideConfig(
        catalog=catalog,
        output=output,
        preamble=preamble,
        snippet_language=data.get("snippet_language", defaults.snippet_language),
        escape_descriptions=data.get("escape_descriptions", defaults.escape_descriptions),
    )


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> PromptGuideConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        PromptGuideConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = PromptGuideConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# promptguide Configuration

# Component catalog ({"components": [...]})
catalog:
  path: "full.json"
  sort_by: "none"  # none (file order), name

# Output settings (file is overwritten on every run)
output:
  path: "heroui-prompt-guide.md"

# Code fence language for import and example snippets
snippet_language: "typescript"

# Escape "|" in property descriptions (types are always escaped)
escape_descriptions: true

# Document preamble
preamble:
  title: "Hero UI Component Prompt Guide"
  description: "A guide for AI agents on how to use Hero UI components."
  library: "Hero UI"
  package: "@heroui/react"
  # file: ".promptguide/preamble.md.j2"  # Custom Jinja2 preamble
'''
