from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect storage paths to a temp project directory so tests never touch real ./data.
    """
    import storage.paths as paths

    def _default_world_base() -> Path:
        p = tmp_path / "data"
        p.mkdir(parents=True, exist_ok=True)
        return p / "world"

    monkeypatch.setattr(paths, "default_world_base", _default_world_base)
    return tmp_path


@pytest.fixture
def world_base(tmp_path: Path) -> Path:
    """Base name for a backing file under tmp_path; the store appends ``.yaml``."""
    return tmp_path / "world"


@pytest.fixture
def write_world(world_base: Path):
    def _write(text: str) -> Path:
        path = world_base.with_name(world_base.name + ".yaml")
        path.write_text(text, encoding="utf-8")
        return path

    return _write
