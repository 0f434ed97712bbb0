"""Pydantic v2 models for the scaffolding engine.

Defines the declarative project description (``ProjectSpec``), the template
and patch primitives, and the per-project progress records the orchestrator
reports back to its caller.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ServiceKind(str, Enum):
    """Role of a generated service; selects which templates apply."""
    DISCOVERY_SERVER = "discovery-server"
    CONFIG_SERVER = "config-server"
    GATEWAY = "gateway"
    WEB_SERVICE = "web-service"
    DATA_SERVICE = "data-service"


class ConfigFormat(str, Enum):
    """Format of the generated Spring configuration file."""
    PROPERTIES = "properties"
    YAML = "yaml"

    @property
    def filename(self) -> str:
        return "application.properties" if self is ConfigFormat.PROPERTIES else "application.yml"


class ConfigBackend(str, Enum):
    """Where a config server reads the configuration it serves."""
    GIT = "git"
    NATIVE = "native"


class ProjectState(str, Enum):
    """Lifecycle of a single project inside one scaffolding run."""
    PENDING = "pending"
    CHECKED = "checked"
    RESOLVED = "resolved"
    RENDERED = "rendered"
    WRITTEN = "written"
    PATCHED = "patched"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[ProjectState, frozenset[ProjectState]] = {
    ProjectState.PENDING: frozenset({ProjectState.CHECKED, ProjectState.FAILED}),
    ProjectState.CHECKED: frozenset({ProjectState.RESOLVED, ProjectState.FAILED}),
    ProjectState.RESOLVED: frozenset({ProjectState.RENDERED, ProjectState.FAILED}),
    ProjectState.RENDERED: frozenset({ProjectState.WRITTEN, ProjectState.FAILED}),
    ProjectState.WRITTEN: frozenset(
        {ProjectState.PATCHED, ProjectState.DONE, ProjectState.FAILED}
    ),
    ProjectState.PATCHED: frozenset({ProjectState.DONE, ProjectState.FAILED}),
    ProjectState.DONE: frozenset(),
    ProjectState.FAILED: frozenset(),
}


# ---------------------------------------------------------------------------
# Project description
# ---------------------------------------------------------------------------

class GatewayRoute(BaseModel):
    """A static Spring Cloud Gateway route."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Route id, e.g. 'service1'")
    uri: str = Field(..., description="Target URI, e.g. 'lb://EXAMPLE-SERVICE'")
    path: str = Field(..., description="Path predicate, e.g. '/api/**'")
    strip_prefix: int = Field(default=0, ge=0, description="StripPrefix filter parts (0 = none)")


class ProjectSpec(BaseModel):
    """Declarative description of one scaffolded service."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        pattern=r"^[a-z][a-z0-9-]*$",
        description="Directory name and package-fragment key, e.g. 'user-service'",
    )
    main_class_name: str = Field(
        ..., pattern=r"^[A-Z][A-Za-z0-9_]*$", description="Entry-point class name"
    )
    kind: ServiceKind = Field(default=ServiceKind.WEB_SERVICE)
    dependencies: tuple[str, ...] = Field(
        default=(), description="Gradle 'implementation' coordinates, in order"
    )
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    extra_annotations: tuple[str, ...] = Field(
        default=(),
        description="Fully-qualified annotation classes placed on the entry point",
    )
    config_format: ConfigFormat = Field(default=ConfigFormat.PROPERTIES)
    config_backend: ConfigBackend = Field(
        default=ConfigBackend.GIT,
        description="Config servers only: git repository or classpath (native profile)",
    )
    routes: tuple[GatewayRoute, ...] = Field(default=(), description="Gateway routes")
    entity_name: str = Field(
        default="User", pattern=r"^[A-Z][A-Za-z0-9]*$", description="Entity for data services"
    )
    controller_name: Optional[str] = Field(
        default=None, description="Hello controller class name for web services"
    )


# ---------------------------------------------------------------------------
# Templates, rendered output and patches
# ---------------------------------------------------------------------------

class Template(BaseModel):
    """A parameterised text blueprint for one generated file."""
    model_config = ConfigDict(frozen=True)

    id: str
    body: str
    placeholder_names: frozenset[str] = Field(default_factory=frozenset)


class RenderedFile(BaseModel):
    """Rendered template output bound to its destination path."""
    target_path: Path
    content: str
    template_id: str = ""


class PatchDirective(BaseModel):
    """Insert ``inserted_lines`` right after the first line equal to ``anchor_line``."""
    model_config = ConfigDict(frozen=True)

    target_path: Path
    anchor_line: str
    inserted_lines: tuple[str, ...] = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Run reporting
# ---------------------------------------------------------------------------

class ProjectReport(BaseModel):
    """Progress of one project through the scaffolding state machine."""
    name: str
    state: ProjectState = ProjectState.PENDING
    files: list[Path] = Field(default_factory=list)
    error: str = ""

    def advance(self, new_state: ProjectState) -> None:
        """Move to *new_state*, rejecting transitions the lifecycle does not allow."""
        if new_state not in _TRANSITIONS[self.state]:
            raise ValueError(
                f"Illegal state transition for '{self.name}': "
                f"{self.state.value} -> {new_state.value}"
            )
        self.state = new_state


class Summary(BaseModel):
    """Result of a successful run."""
    output_dir: Path
    projects: list[str] = Field(default_factory=list)
    reports: list[ProjectReport] = Field(default_factory=list)
    next_steps: str = ""

    @property
    def file_count(self) -> int:
        return sum(len(r.files) for r in self.reports)
