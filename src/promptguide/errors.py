"""Error types raised at the catalog and output boundaries.

Rendering itself is total over a well-formed catalog, so every failure kind
lives here:
- LoadError: Catalog source missing, unreadable, or malformed
- WriteError: Rendered document could not be persisted
"""

from pathlib import Path


class PromptGuideError(Exception):
    """Base class for promptguide failures."""


class LoadError(PromptGuideError):
    """Raised when a catalog cannot be read or does not have the expected shape.

    Attributes:
        source: Path (or description) of the catalog source
        index: Zero-based index of the offending component, if known
        component: Name of the offending component, if known
    """

    def __init__(
        self,
        source: Path | str | None,
        message: str,
        index: int | None = None,
        component: str | None = None,
    ) -> None:
        self.source = source
        self.index = index
        self.component = component
        self.message = message

        location = ""
        if index is not None:
            location = f"component #{index}"
            if component:
                location += f" ({component!r})"
            location += ": "

        prefix = f"Failed to load catalog {source}: " if source else "Failed to load catalog: "
        super().__init__(f"{prefix}{location}{message}")


class WriteError(PromptGuideError):
    """Raised when the rendered document cannot be written to its destination.

    Attributes:
        path: Destination that could not be written
        content: Rendered document that was not persisted, when available
    """

    def __init__(self, path: Path | str, message: str, content: str | None = None) -> None:
        self.path = path
        self.message = message
        self.content = content
        super().__init__(f"Failed to write {path}: {message}")
