"""Scaffolder configuration.

Centralised, typed configuration for a scaffolding run. Every value has an
embedded default so the tool runs with no arguments; a JSON or YAML file,
``SCAFFOLD_*`` environment variables, or CLI flags may override them.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from src.scaffolder.models import PatchDirective


class VersionConfig(BaseModel):
    """Framework versions written into every generated build descriptor."""

    spring_boot: str = Field(default="3.1.3")
    dependency_management: str = Field(default="1.1.3")
    spring_cloud: str = Field(default="2022.0.4")
    java: str = Field(default="17", description="Java source compatibility level")


class DatabaseConfig(BaseModel):
    """Datasource written into data-backed services."""

    url: str = Field(default="jdbc:postgresql://localhost:5432/userdb")
    username: str = Field(default="admin")
    password: str = Field(default="admin@123")


class ScaffoldConfig(BaseModel):
    """Global scaffolder configuration.

    Created once by the CLI and passed to the orchestrator. The resolver reads
    its values as the global defaults available to every template.
    """

    output_dir: Path = Field(default=Path("./microservices-demo"))
    catalog: str = Field(default="microservices", description="Built-in service set to generate")
    group: str = Field(default="com.example", description="Gradle group and base Java package")
    project_version: str = Field(default="0.0.1-SNAPSHOT")
    versions: VersionConfig = Field(default_factory=VersionConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    git_config_repo_url: str = Field(default="https://github.com/your-config-repo.git")
    git_default_label: str = Field(default="main")
    eureka_url: str = Field(default="http://localhost:8761/eureka/")
    config_server_url: str = Field(default="http://localhost:8888")

    # Post-generation edits for files the templates do not own. Target paths
    # are relative to ``output_dir``.
    patches: list[PatchDirective] = Field(default_factory=list)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as JSON or YAML (chosen by file suffix).

        Returns:
            The path that was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.suffix in (".yml", ".yaml"):
            data = self.model_dump(mode="json")
            target.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        else:
            target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a configuration file (JSON, or YAML for ``.yml``/``.yaml``).

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If the content does not validate.
            yaml.YAMLError: If a YAML file is malformed.
            UnicodeDecodeError: If the file is not UTF-8 text.
        """
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        if file_path.suffix in (".yml", ".yaml"):
            data = yaml.safe_load(raw) or {}
            return cls.model_validate(data)
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_OUTPUT_DIR, SCAFFOLD_CATALOG, SCAFFOLD_GIT_CONFIG_REPO_URL,
            SCAFFOLD_DB_URL, SCAFFOLD_DB_USERNAME, SCAFFOLD_DB_PASSWORD.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SCAFFOLD_OUTPUT_DIR"])
        if os.environ.get("SCAFFOLD_CATALOG"):
            kwargs["catalog"] = os.environ["SCAFFOLD_CATALOG"]
        if os.environ.get("SCAFFOLD_GIT_CONFIG_REPO_URL"):
            kwargs["git_config_repo_url"] = os.environ["SCAFFOLD_GIT_CONFIG_REPO_URL"]

        db_kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_DB_URL"):
            db_kwargs["url"] = os.environ["SCAFFOLD_DB_URL"]
        if os.environ.get("SCAFFOLD_DB_USERNAME"):
            db_kwargs["username"] = os.environ["SCAFFOLD_DB_USERNAME"]
        if os.environ.get("SCAFFOLD_DB_PASSWORD"):
            db_kwargs["password"] = os.environ["SCAFFOLD_DB_PASSWORD"]

        return cls(database=DatabaseConfig(**db_kwargs), **kwargs)

    def global_defaults(self) -> dict[str, str]:
        """Return the placeholder values shared by every project."""
        return {
            "group": self.group,
            "project_version": self.project_version,
            "spring_boot_version": self.versions.spring_boot,
            "dependency_management_version": self.versions.dependency_management,
            "spring_cloud_version": self.versions.spring_cloud,
            "java_version": self.versions.java,
            "git_config_repo_url": self.git_config_repo_url,
            "git_default_label": self.git_default_label,
            "eureka_url": self.eureka_url,
            "config_server_url": self.config_server_url,
            "db_url": self.database.url,
            "db_username": self.database.username,
            "db_password": self.database.password,
        }
