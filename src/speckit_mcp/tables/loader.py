"""YAML lookup-table loading.

Tables are read once per directory and cached; ``clear_table_cache``
resets the cache between tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from speckit_mcp.errors import TableError
from speckit_mcp.tables.models import DetectionTables, PersonaTables

logger = logging.getLogger(__name__)

PACKAGED_TABLES_DIR = Path(__file__).resolve().parent / "data"

PERSONA_TABLES_FILE = "personas.yaml"
DETECTION_TABLES_FILE = "detection.yaml"


@dataclass(frozen=True)
class LookupTables:
    personas: PersonaTables
    detection: DetectionTables


_cache: dict[Path, LookupTables] = {}


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise TableError(f"Lookup table not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise TableError(f"Malformed YAML in {path}: {exc}") from exc
    if data is None:
        raise TableError(f"Empty lookup table: {path}")
    if not isinstance(data, dict):
        raise TableError(f"Lookup table root must be a mapping: {path}")
    return data


def load_persona_tables(path: Path) -> PersonaTables:
    try:
        return PersonaTables(**_read_mapping(path))
    except (ValidationError, TypeError) as exc:
        raise TableError(f"Invalid persona table {path}: {exc}") from exc


def load_detection_tables(path: Path) -> DetectionTables:
    try:
        return DetectionTables(**_read_mapping(path))
    except (ValidationError, TypeError) as exc:
        raise TableError(f"Invalid detection table {path}: {exc}") from exc


def load_tables(directory: str | Path | None = None) -> LookupTables:
    """Load (or return cached) persona and detection tables from ``directory``.

    ``None`` selects the tables shipped with the package.
    """
    directory = Path(directory) if directory is not None else PACKAGED_TABLES_DIR
    directory = directory.resolve()
    cached = _cache.get(directory)
    if cached is not None:
        return cached

    tables = LookupTables(
        personas=load_persona_tables(directory / PERSONA_TABLES_FILE),
        detection=load_detection_tables(directory / DETECTION_TABLES_FILE),
    )
    logger.debug(
        "Loaded lookup tables from %s (%d personas, %d technologies, %d domains)",
        directory,
        len(tables.personas.personas),
        len(tables.detection.technology_patterns),
        len(tables.detection.domain_patterns),
    )
    _cache[directory] = tables
    return tables


def clear_table_cache() -> None:
    """Forget every loaded table set. Useful in tests."""
    _cache.clear()
