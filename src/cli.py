"""Command-line entry point for the Spring Boot microservice scaffolder.

Usage::

    python -m src.cli
    python -m src.cli --catalog microservices-postgres --output ./demo
    python -m src.cli --config scaffold.yml --git-config-repo https://github.com/me/config-repo.git
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path
from typing import Any, Optional

import yaml
from rich.markup import escape
from rich.panel import Panel

from src.config import ScaffoldConfig
from src.scaffolder.catalog import CATALOGS, get_catalog
from src.scaffolder.errors import ScaffoldError
from src.scaffolder.generator import ScaffoldOrchestrator
from src.utils import console, format_duration, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spring-scaffold",
        description="Generate Spring Boot microservice demo projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  spring-scaffold\n"
            "  spring-scaffold --catalog microservices-postgres -o ./demo\n"
            "  spring-scaffold --list-catalogs\n"
        ),
    )
    parser.add_argument(
        "--catalog", "-c",
        default=None,
        help="Service set to generate (default: microservices)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory where projects are generated (default: ./microservices-demo)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON or YAML configuration file",
    )
    parser.add_argument(
        "--git-config-repo",
        default=None,
        help="Upstream git repository for the config server",
    )
    parser.add_argument("--db-url", default=None, help="JDBC URL for data services")
    parser.add_argument("--db-username", default=None, help="Datasource username")
    parser.add_argument("--db-password", default=None, help="Datasource password")
    parser.add_argument(
        "--list-catalogs",
        action="store_true",
        help="List the built-in catalogs and exit",
    )
    return parser


def load_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Merge the configuration file (or environment) with command-line overrides."""
    config = ScaffoldConfig.load(Path(args.config)) if args.config else ScaffoldConfig.from_env()

    updates: dict[str, Any] = {}
    if args.output:
        updates["output_dir"] = Path(args.output)
    if args.catalog:
        updates["catalog"] = args.catalog
    if args.git_config_repo:
        updates["git_config_repo_url"] = args.git_config_repo

    db_updates = {
        key: value
        for key, value in (
            ("url", args.db_url),
            ("username", args.db_username),
            ("password", args.db_password),
        )
        if value
    }
    if db_updates:
        updates["database"] = config.database.model_copy(update=db_updates)

    return config.model_copy(update=updates)


def _print_catalogs() -> None:
    print_summary_table(
        {
            name: f"{catalog.description} ({', '.join(p.name for p in catalog.projects)})"
            for name, catalog in CATALOGS.items()
        },
        title="Catalogs",
        columns=("Catalog", "Services"),
    )


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``spring-scaffold`` / ``python -m src.cli``."""
    args = build_parser().parse_args(argv)

    if args.list_catalogs:
        _print_catalogs()
        return

    try:
        config = load_config(args)
        catalog = get_catalog(config.catalog)
    except (OSError, ValueError, yaml.YAMLError, ScaffoldError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    console.print(
        Panel(
            f"[bold bright_cyan]Spring Boot Scaffolder[/bold bright_cyan]\n"
            f"Catalog : {catalog.name}\n"
            f"Output  : {config.output_dir.resolve()}\n"
            f"Services: {', '.join(p.name for p in catalog.projects)}",
            title="[bold]Scaffold Start[/bold]",
            border_style="bright_cyan",
        )
    )

    started = time.monotonic()
    orchestrator = ScaffoldOrchestrator(config)
    try:
        summary = asyncio.run(orchestrator.run_catalog(catalog))
    except ScaffoldError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    console.print()
    print_summary_table(
        {
            report.name: f"{report.state.value} ({len(report.files)} files)"
            for report in summary.reports
        },
        title="Generated projects",
        columns=("Project", "Result"),
    )
    console.print(summary.next_steps)
    console.print()
    print_success(
        f"{len(summary.projects)} project(s) generated in "
        f"{format_duration(time.monotonic() - started)}."
    )


if __name__ == "__main__":
    main()
