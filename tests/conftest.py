"""Shared pytest fixtures for the scaffolder test suite.

Provides reusable fixtures for:
- Scaffolder configuration pointing at a temporary output directory
- Faked tool lookups so preflight passes (or fails) deterministically
- Sample project specs
- Reading back generated trees
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from src.config import ScaffoldConfig
from src.scaffolder.catalog import ENABLE_EUREKA_SERVER, EUREKA_SERVER
from src.scaffolder.models import ProjectSpec, ServiceKind


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory for generated projects (not created up front)."""
    return tmp_path / "microservices-demo"


@pytest.fixture
def scaffold_config(output_dir: Path) -> ScaffoldConfig:
    """Default configuration writing into the temporary output directory."""
    return ScaffoldConfig(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Tool lookup
# ---------------------------------------------------------------------------

@pytest.fixture
def tools_available():
    """Pretend every external tool is installed."""
    with patch(
        "src.scaffolder.preflight.shutil.which",
        side_effect=lambda name: f"/usr/bin/{name}",
    ) as mock_which:
        yield mock_which


@pytest.fixture
def tools_missing():
    """Pretend no external tool is installed."""
    with patch("src.scaffolder.preflight.shutil.which", return_value=None) as mock_which:
        yield mock_which


# ---------------------------------------------------------------------------
# Project specs
# ---------------------------------------------------------------------------

@pytest.fixture
def eureka_spec() -> ProjectSpec:
    """A discovery server spec equivalent to the default catalog's first entry."""
    return ProjectSpec(
        name="eureka-server",
        main_class_name="EurekaServerApplication",
        kind=ServiceKind.DISCOVERY_SERVER,
        dependencies=(EUREKA_SERVER,),
        port=8761,
        extra_annotations=(ENABLE_EUREKA_SERVER,),
    )


@pytest.fixture
def portless_spec() -> ProjectSpec:
    """A web service without a port."""
    return ProjectSpec(
        name="user-service",
        main_class_name="UserServiceApplication",
        kind=ServiceKind.WEB_SERVICE,
        dependencies=("org.springframework.boot:spring-boot-starter-web",),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (relative POSIX path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot():
    """Expose :func:`snapshot_tree` to tests."""
    return snapshot_tree
