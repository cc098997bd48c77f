"""Test fixtures for Spec-Kit MCP tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from speckit_mcp.config import FrameworkConfig
from speckit_mcp.tables.loader import clear_table_cache, load_tables


@pytest.fixture(autouse=True)
def _clear_table_cache():
    """Clear the table cache before each test to avoid cross-test pollution."""
    clear_table_cache()
    yield
    clear_table_cache()


@pytest.fixture()
def framework_root(tmp_path: Path) -> Path:
    root = tmp_path / "framework"
    (root / "memory" / "constitution").mkdir(parents=True)
    (root / "chatmodes").mkdir()
    return root


@pytest.fixture()
def config(framework_root: Path) -> FrameworkConfig:
    return FrameworkConfig(framework_root=framework_root)


@pytest.fixture()
def tables():
    return load_tables()


SAMPLE_CHATMODE = """\
---
description: "Builds and ships features"
tools: ['codebase', "editFiles", 'runTests', ]
---

# Sample Persona

## Key Capabilities

- **Testing**: Writes tests first
- **Implementation**: Builds the feature
- **Refactoring**: Cleans up the design
- **Debugging**: Finds root causes

## Persona Behavior

- **Approach**: Small verified steps
- **Pace**: Steady

## Deliverables

- **Code**: Working implementation
- **Tests**: Passing test suite
"""


def write_chatmode(root: Path, persona: str, body: str = SAMPLE_CHATMODE) -> Path:
    path = root / "chatmodes" / f"{persona}.chatmode.md"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def write_constitution(root: Path, name: str, body: str) -> Path:
    """Write ``memory/constitution/{name}.constitution.md``."""
    path = root / "memory" / "constitution" / f"{name}.constitution.md"
    path.write_text(body, encoding="utf-8")
    return path


def write_core_constitution(root: Path, body: str = "# Core\n\nBe excellent.\n") -> Path:
    path = root / "memory" / "constitution.md"
    path.write_text(body, encoding="utf-8")
    return path
