"""Exception hierarchy for the scaffolding engine.

Every failure the engine can raise derives from :class:`ScaffoldError`. None of
them are retried: the inputs are local files and embedded templates, so a
failure is deterministic and the run stops at the first one.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class UnknownCatalogError(ScaffoldError):
    """Raised when a catalog name is not one of the built-in service sets."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown catalog '{name}' (available: {', '.join(available)})"
        )


class MissingToolError(ScaffoldError):
    """A required executable is not on ``PATH``."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(
            f"{tool} is not installed. Please install {tool} before running the scaffolder."
        )


class UnresolvedPlaceholderError(ScaffoldError):
    """A template references placeholders that neither the project nor the defaults provide."""

    def __init__(self, template_id: str, missing: list[str]) -> None:
        self.template_id = template_id
        self.missing = sorted(missing)
        super().__init__(
            f"Template '{template_id}' has unresolved placeholders: "
            f"{', '.join(self.missing)}"
        )


class TemplateRenderError(ScaffoldError):
    """Internal defect: a template could not be rendered with its resolved variables."""

    def __init__(self, template_id: str, message: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template '{template_id}' failed to render: {message}")


class MaterializeError(ScaffoldError):
    """A directory or file could not be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class PatchError(ScaffoldError):
    """A patch directive could not be applied."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class AnchorNotFoundError(PatchError):
    """The anchor line of a patch directive does not exist in the target file."""

    def __init__(self, path: Path, anchor_line: str) -> None:
        self.anchor_line = anchor_line
        super().__init__(path, f"anchor line not found: {anchor_line!r}")


class ProjectFailedError(ScaffoldError):
    """Raised by the orchestrator when one project fails; halts the whole run."""

    def __init__(self, project: str, step: str, cause: Exception) -> None:
        self.project = project
        self.step = step
        self.cause = cause
        super().__init__(f"Project '{project}' failed during {step}: {cause}")
