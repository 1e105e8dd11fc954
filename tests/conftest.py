"""Shared pytest fixtures for the modgen test suite.

Provides reusable fixtures for:
- Temporary host projects (directories holding a ``package.json``)
- Default and isolated configurations
- A ready-made ``ModuleGenerator``
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from modgen.config import Config
from modgen.scaffolder import ModuleGenerator


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary Node.js project root containing a ``package.json``."""
    root = tmp_path / "host-app"
    root.mkdir()
    (root / "package.json").write_text(
        json.dumps({"name": "host-app", "version": "1.0.0"}), encoding="utf-8"
    )
    yield root


@pytest.fixture
def nested_dir(project_root: Path) -> Path:
    """A directory a few levels below ``project_root``."""
    nested = project_root / "src" / "lib" / "deep"
    nested.mkdir(parents=True)
    return nested


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default configuration."""
    return Config()


@pytest.fixture
def isolated_config_file(tmp_path: Path) -> Path:
    """Config file whose manifest marker exists nowhere on disk."""
    path = tmp_path / "modgen.json"
    Config(manifest_files=["modgen-test-marker-that-does-not-exist.json"]).save(path)
    return path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every MODGEN_* variable from the environment."""
    for var in (
        "MODGEN_MODULES_DIR",
        "MODGEN_SUBFOLDERS",
        "MODGEN_MANIFEST_FILES",
        "MODGEN_FILE_EXTENSION",
        "MODGEN_ENCODING",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def generator(config: Config) -> ModuleGenerator:
    return ModuleGenerator(config)
