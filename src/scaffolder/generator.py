"""Main scaffolding orchestrator.

Takes an ordered list of ``ProjectSpec``s and generates one Spring Boot
project directory per spec: preflight tool check first, then for every project
resolve, render, write and patch, stopping at the first failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.markup import escape

from src.utils import console, print_error

from .catalog import Catalog
from .errors import ProjectFailedError, ScaffoldError
from .materializer import FilesystemMaterializer
from .models import (
    ConfigBackend,
    ConfigFormat,
    PatchDirective,
    ProjectReport,
    ProjectSpec,
    ProjectState,
    RenderedFile,
    ServiceKind,
    Summary,
    Template,
)
from .preflight import check_available
from .resolver import VariableResolver
from .templates import TemplateRegistry

if TYPE_CHECKING:
    from src.config import ScaffoldConfig


class ScaffoldOrchestrator:
    """Drives a complete scaffolding run.

    Projects are processed sequentially in catalog order, each fully written
    before the next begins. Files already written when a later step fails are
    left on disk; a re-run overwrites them.
    """

    def __init__(
        self,
        config: "ScaffoldConfig",
        registry: TemplateRegistry | None = None,
        materializer: FilesystemMaterializer | None = None,
    ) -> None:
        self.config = config
        self.output_dir = Path(config.output_dir)
        self.registry = registry or TemplateRegistry()
        self.resolver = VariableResolver(config)
        self.materializer = materializer or FilesystemMaterializer()
        self.reports: list[ProjectReport] = []

    # -- Public API --------------------------------------------------------

    async def run_catalog(self, catalog: Catalog) -> Summary:
        """Generate every project of a built-in catalog."""
        return await self.run(
            catalog.projects,
            required_tools=catalog.required_tools,
            start_order=catalog.ordered_names,
            readme_title=catalog.readme_title,
        )

    async def run(
        self,
        projects: Sequence[ProjectSpec],
        *,
        required_tools: Sequence[str] = ("gradle",),
        start_order: Optional[Sequence[str]] = None,
        readme_title: Optional[str] = None,
    ) -> Summary:
        """Generate *projects* under the configured output directory.

        Raises:
            MissingToolError: A required tool is absent; nothing is written.
            ProjectFailedError: A project failed; names the project and step.
            ScaffoldError: Duplicate project names or a catalog-level failure.
        """
        names = [spec.name for spec in projects]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ScaffoldError(f"Duplicate project names in catalog: {', '.join(duplicates)}")

        self.reports = [ProjectReport(name=name) for name in names]

        try:
            check_available(required_tools)
        except ScaffoldError as exc:
            for report in self.reports:
                report.advance(ProjectState.FAILED)
                report.error = str(exc)
            raise
        for report in self.reports:
            report.advance(ProjectState.CHECKED)

        claimed: set[int] = set()
        for spec, report in zip(projects, self.reports):
            patches = self._patches_for(spec, claimed)
            await self._scaffold_project(spec, report, patches)

        if readme_title:
            await self._write_readme(projects, readme_title, start_order or names)

        leftovers = [
            p for i, p in enumerate(self.config.patches) if i not in claimed
        ]
        for directive in leftovers:
            await self.materializer.patch(self._absolute(directive))

        return Summary(
            output_dir=self.output_dir,
            projects=names,
            reports=list(self.reports),
            next_steps=self._next_steps(start_order or names),
        )

    # -- Per-project pipeline ----------------------------------------------

    async def _scaffold_project(
        self,
        spec: ProjectSpec,
        report: ProjectReport,
        patches: list[PatchDirective],
    ) -> None:
        project_root = self.output_dir / spec.name
        step = "resolve"
        try:
            plan = self.plan_files(spec)
            resolved = [
                (template, path, self.resolver.resolve(spec, template))
                for template, path in plan
            ]
            report.advance(ProjectState.RESOLVED)

            step = "render"
            rendered = [
                RenderedFile(
                    target_path=project_root / path,
                    content=self.registry.render(template, variables),
                    template_id=template.id,
                )
                for template, path, variables in resolved
            ]
            report.advance(ProjectState.RENDERED)

            step = "write"
            await self.materializer.create_dir(project_root)
            for item in rendered:
                report.files.append(await self.materializer.write_rendered(item))
            report.advance(ProjectState.WRITTEN)

            if patches:
                step = "patch"
                for directive in patches:
                    await self.materializer.patch(directive)
                report.advance(ProjectState.PATCHED)

            report.advance(ProjectState.DONE)
        except ScaffoldError as exc:
            report.advance(ProjectState.FAILED)
            report.error = str(exc)
            print_error(f"  x {spec.name}: {step} failed: {escape(str(exc))}")
            raise ProjectFailedError(spec.name, step, exc) from exc

        console.print(
            f"  [green]+[/green] {spec.name} "
            f"[dim]({len(report.files)} files, {spec.kind.value})[/dim]"
        )

    def plan_files(self, spec: ProjectSpec) -> list[tuple[Template, Path]]:
        """Return the templates that apply to *spec* with their project-relative paths."""
        source_dir = self.resolver.source_dir(spec)
        resources = Path("src", "main", "resources")
        extension = "properties" if spec.config_format is ConfigFormat.PROPERTIES else "yml"

        native = (
            spec.kind is ServiceKind.CONFIG_SERVER and spec.config_backend is ConfigBackend.NATIVE
        )
        config_id = f"config/{spec.kind.value}-native" if native else f"config/{spec.kind.value}"

        plan: list[tuple[str, Path]] = [
            ("build.gradle", Path("build.gradle")),
            ("settings.gradle", Path("settings.gradle")),
            ("application-class", source_dir / f"{spec.main_class_name}.java"),
            (f"{config_id}.{extension}", resources / spec.config_format.filename),
        ]
        if native:
            plan.append(("config/config-server-bootstrap", resources / "bootstrap.properties"))
        if spec.kind is ServiceKind.WEB_SERVICE and spec.controller_name:
            plan.append(
                ("web/hello-controller", source_dir / "controller" / f"{spec.controller_name}.java")
            )
        if spec.kind is ServiceKind.DATA_SERVICE:
            entity = spec.entity_name
            plan.extend([
                ("data/entity", source_dir / f"{entity}.java"),
                ("data/repository", source_dir / f"{entity}Repository.java"),
                ("data/controller", source_dir / f"{entity}Controller.java"),
            ])
        return [(self.registry.get(template_id), path) for template_id, path in plan]

    # -- Patches -----------------------------------------------------------

    def _absolute(self, directive: PatchDirective) -> PatchDirective:
        target = Path(directive.target_path)
        if target.is_absolute():
            return directive
        return directive.model_copy(update={"target_path": self.output_dir / target})

    def _patches_for(self, spec: ProjectSpec, claimed: set[int]) -> list[PatchDirective]:
        """Configured patches whose relative target lies inside *spec*'s directory."""
        selected: list[PatchDirective] = []
        for index, directive in enumerate(self.config.patches):
            target = Path(directive.target_path)
            if index in claimed or target.is_absolute() or not target.parts:
                continue
            if target.parts[0] == spec.name:
                claimed.add(index)
                selected.append(self._absolute(directive))
        return selected

    # -- Catalog-level output ----------------------------------------------

    async def _write_readme(
        self,
        projects: Sequence[ProjectSpec],
        title: str,
        start_order: Sequence[str],
    ) -> Path:
        template = self.registry.get("readme")
        variables = self.resolver.resolve_globals(
            template,
            {
                "title": title,
                "service_list": "\n".join(
                    f"- {spec.name} ({spec.kind.value}"
                    + (f", port {spec.port}" if spec.port else "")
                    + ")"
                    for spec in projects
                ),
                "start_order": _numbered(start_order),
            },
        )
        return await self.materializer.write(
            self.output_dir / "README.md", self.registry.render(template, variables)
        )

    def _next_steps(self, start_order: Sequence[str]) -> str:
        return (
            f"To build a project, run: cd {self.output_dir}/<project> && gradle build\n"
            "To run a project, use: gradle bootRun\n"
            "Start the services in this order:\n"
            f"{_numbered(start_order)}"
        )


def _numbered(names: Sequence[str]) -> str:
    return "\n".join(f"{i}. {name}" for i, name in enumerate(names, start=1))
