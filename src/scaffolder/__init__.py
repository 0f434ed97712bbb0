"""Spring Boot microservice scaffolder -- generates project trees from templates.

This package takes an ordered catalog of ``ProjectSpec``s and renders one
Gradle project per spec (build descriptor, entry-point class, configuration
file and, for data services, entity/repository/controller sources).

Quick usage::

    from src.config import ScaffoldConfig
    from src.scaffolder import ScaffoldOrchestrator, get_catalog

    config = ScaffoldConfig(output_dir="/tmp/demo")
    orchestrator = ScaffoldOrchestrator(config)
    summary = await orchestrator.run_catalog(get_catalog("microservices"))
"""

from src.scaffolder.catalog import CATALOGS, Catalog, get_catalog
from src.scaffolder.generator import ScaffoldOrchestrator
from src.scaffolder.materializer import FilesystemMaterializer
from src.scaffolder.models import PatchDirective, ProjectSpec, ServiceKind, Summary
from src.scaffolder.resolver import VariableResolver, derive_fragment
from src.scaffolder.templates import TemplateRegistry

__all__ = [
    "CATALOGS",
    "Catalog",
    "FilesystemMaterializer",
    "PatchDirective",
    "ProjectSpec",
    "ScaffoldOrchestrator",
    "ServiceKind",
    "Summary",
    "TemplateRegistry",
    "VariableResolver",
    "derive_fragment",
    "get_catalog",
]
