"""Variable resolution: turns a ``ProjectSpec`` into template substitutions.

The resolver combines per-project values (names, port, dependency block,
annotations, gateway routes) with the global defaults from the scaffolder
configuration and checks them against the placeholders a template declares.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Mapping

from .errors import UnresolvedPlaceholderError
from .models import GatewayRoute, ProjectSpec, Template

if TYPE_CHECKING:
    from src.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Name derivation
# ---------------------------------------------------------------------------

def derive_fragment(name: str) -> str:
    """Derive a Java package fragment from a project name by dropping hyphens.

    Examples::

        derive_fragment("gateway-service") -> "gatewayservice"
        derive_fragment("user-service")    -> "userservice"
    """
    return name.replace("-", "")


def package_path(package_name: str) -> Path:
    """Convert a dotted Java package into a relative directory path."""
    return Path(*package_name.split("."))


def _simple_name(qualified: str) -> str:
    return qualified.rsplit(".", 1)[-1]


def _lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def _route_properties(routes: tuple[GatewayRoute, ...]) -> str:
    lines: list[str] = []
    for index, route in enumerate(routes):
        prefix = f"spring.cloud.gateway.routes[{index}]"
        lines.append(f"{prefix}.id={route.id}")
        lines.append(f"{prefix}.uri={route.uri}")
        lines.append(f"{prefix}.predicates[0]=Path={route.path}")
        if route.strip_prefix:
            lines.append(f"{prefix}.filters[0]=StripPrefix={route.strip_prefix}")
    return "".join(f"{line}\n" for line in lines)


def _route_yaml(routes: tuple[GatewayRoute, ...]) -> str:
    if not routes:
        return ""
    lines = ["      routes:"]
    for route in routes:
        lines.append(f"        - id: {route.id}")
        lines.append(f"          uri: {route.uri}")
        lines.append("          predicates:")
        lines.append(f"            - Path={route.path}")
        if route.strip_prefix:
            lines.append("          filters:")
            lines.append(f"            - StripPrefix={route.strip_prefix}")
    return "".join(f"{line}\n" for line in lines)


# ---------------------------------------------------------------------------
# VariableResolver
# ---------------------------------------------------------------------------


class VariableResolver:
    """Builds the substitution mapping for one project and one template."""

    def __init__(self, config: "ScaffoldConfig") -> None:
        self.config = config
        self.defaults: dict[str, str] = config.global_defaults()

    def package_name(self, spec: ProjectSpec) -> str:
        """Full Java package of a project, e.g. ``com.example.userservice``."""
        return f"{self.config.group}.{derive_fragment(spec.name)}"

    def source_dir(self, spec: ProjectSpec) -> Path:
        """Project-relative directory holding the project's Java sources."""
        return Path("src", "main", "java") / package_path(self.package_name(spec))

    def project_variables(self, spec: ProjectSpec) -> dict[str, str]:
        """Return every value a ``ProjectSpec`` contributes.

        ``port`` and ``controller_name`` are only present when the ProjectSpec sets
        them, so templates that need them fail resolution otherwise.
        """
        variables: dict[str, str] = {
            "project_name": spec.name,
            "main_class_name": spec.main_class_name,
            "package_name": self.package_name(spec),
            "dependency_lines": "\n".join(
                f"    implementation '{dep}'" for dep in spec.dependencies
            ),
            "annotation_imports": "".join(
                f"import {annotation};\n" for annotation in spec.extra_annotations
            ),
            "annotations": "".join(
                f"@{_simple_name(annotation)}\n" for annotation in spec.extra_annotations
            ),
            "route_properties": _route_properties(spec.routes),
            "route_yaml": _route_yaml(spec.routes),
            "entity_name": spec.entity_name,
            "entity_var": _lower_first(spec.entity_name),
            "table_name": f"{spec.entity_name.lower()}s",
        }
        if spec.port is not None:
            variables["port"] = str(spec.port)
        if spec.controller_name:
            variables["controller_name"] = spec.controller_name
        return variables

    def resolve(self, spec: ProjectSpec, template: Template) -> dict[str, str]:
        """Return the substitutions for *template* applied to *spec*.

        Project values take precedence over global defaults. Only the
        placeholders the template declares are returned.

        Raises:
            UnresolvedPlaceholderError: If a declared placeholder has no value.
        """
        return self._select(template, {**self.defaults, **self.project_variables(spec)})

    def resolve_globals(
        self, template: Template, extra: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Resolve a template that is not tied to a single project (e.g. a README)."""
        return self._select(template, {**self.defaults, **(extra or {})})

    @staticmethod
    def _select(template: Template, available: Mapping[str, str]) -> dict[str, str]:
        missing = [name for name in template.placeholder_names if name not in available]
        if missing:
            raise UnresolvedPlaceholderError(template.id, missing)
        return {name: available[name] for name in template.placeholder_names}
