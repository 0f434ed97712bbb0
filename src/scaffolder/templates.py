"""Jinja2 template registry for project scaffolding.

Provides the TemplateRegistry class which loads the embedded blueprints once,
records the placeholder names each one references, and renders them with a
resolved variable mapping. Placeholders use ``${name}`` delimiters so that the
Java, Gradle and YAML payloads can keep their own braces untouched.
"""

from __future__ import annotations

from typing import Mapping

import yaml
from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError, meta

from .blueprints import BLUEPRINTS
from .errors import TemplateRenderError
from .models import Template


def create_environment() -> Environment:
    """Build the Jinja2 environment used for every blueprint."""
    env = Environment(
        variable_start_string="${",
        variable_end_string="}",
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["yaml_str"] = _yaml_str_filter
    return env


# ---------------------------------------------------------------------------
# TemplateRegistry
# ---------------------------------------------------------------------------


class TemplateRegistry:
    """Read-only collection of named templates.

    Entries are registered at construction time (the embedded blueprints by
    default) and never change afterwards.
    """

    def __init__(self, blueprints: Mapping[str, str] | None = None) -> None:
        self.env = create_environment()
        source = BLUEPRINTS if blueprints is None else blueprints
        self._templates: dict[str, Template] = {
            template_id: self._compile(template_id, body)
            for template_id, body in source.items()
        }

    def _compile(self, template_id: str, body: str) -> Template:
        try:
            ast = self.env.parse(body)
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(template_id, f"invalid syntax: {exc}") from exc
        return Template(
            id=template_id,
            body=body,
            placeholder_names=frozenset(meta.find_undeclared_variables(ast)),
        )

    # -- Lookup ------------------------------------------------------------

    def get(self, template_id: str) -> Template:
        """Return the template registered under *template_id*.

        Raises:
            KeyError: If no such template exists.
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise KeyError(f"No template registered under '{template_id}'") from None

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of registered template ids starting with *prefix*."""
        return sorted(t for t in self._templates if t.startswith(prefix))

    # -- Rendering ---------------------------------------------------------

    def render(self, template: Template, variables: Mapping[str, str]) -> str:
        """Substitute every placeholder in *template* with its value.

        A placeholder left without a value is an internal defect (the resolver
        guarantees completeness) and raises ``TemplateRenderError`` instead of
        leaking the raw token into the output.
        """
        try:
            return self.env.from_string(template.body).render(**variables)
        except UndefinedError as exc:
            raise TemplateRenderError(template.id, str(exc)) from exc


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _yaml_str_filter(value: str) -> str:
    """Render *value* as a single-line double-quoted YAML scalar."""
    dumped = yaml.safe_dump(str(value), default_style='"', width=float("inf"))
    return dumped.removesuffix("\n...\n").rstrip("\n")
