"""Lookup-table validator -- catches table mistakes before the server starts.

Validation checks:
  - Both table files load and match their schema
  - Every pattern compiles
  - Every persona with guidance, transitions or requirements is a known persona
  - Every mapped technology / domain has a detection pattern
  - Critical domains have a detection pattern
  - Mapped document names carry the expected suffix
"""

from __future__ import annotations

import logging
from pathlib import Path

from speckit_mcp.errors import TableError
from speckit_mcp.tables.loader import (
    DETECTION_TABLES_FILE,
    PACKAGED_TABLES_DIR,
    PERSONA_TABLES_FILE,
    load_detection_tables,
    load_persona_tables,
)
from speckit_mcp.tables.models import DetectionTables, PersonaTables

logger = logging.getLogger(__name__)


def _check_personas(tables: PersonaTables) -> list[str]:
    errors: list[str] = []
    known = set(tables.personas)
    for section in ("display_names", "recommended_actions", "constitutional_requirements"):
        for persona in getattr(tables, section):
            if persona not in known:
                errors.append(f"{section}: unknown persona '{persona}'")
    for from_persona, targets in tables.transitions.items():
        if from_persona not in known:
            errors.append(f"transitions: unknown persona '{from_persona}'")
        for to_persona in targets:
            if to_persona not in known:
                errors.append(f"transitions.{from_persona}: unknown persona '{to_persona}'")
    return errors


def _check_detection(tables: DetectionTables) -> list[str]:
    errors: list[str] = []
    for tech, instruction in tables.technology_instructions.items():
        if tech not in tables.technology_patterns:
            errors.append(f"technology_instructions: no pattern for '{tech}'")
        if not instruction.endswith(".instructions.md"):
            errors.append(f"technology_instructions.{tech}: '{instruction}' is not an instructions file")
    for domain, chatmodes in tables.domain_chatmodes.items():
        if domain not in tables.domain_patterns:
            errors.append(f"domain_chatmodes: no pattern for '{domain}'")
        for chatmode in chatmodes:
            if not chatmode.endswith(".chatmode.md"):
                errors.append(f"domain_chatmodes.{domain}: '{chatmode}' is not a chatmode file")
    for domain, constitution in tables.domain_constitutions.items():
        if domain not in tables.domain_patterns:
            errors.append(f"domain_constitutions: no pattern for '{domain}'")
        if not constitution.endswith(".constitution.md"):
            errors.append(f"domain_constitutions.{domain}: '{constitution}' is not a constitution file")
    for domain in tables.critical_domains:
        if domain not in tables.domain_patterns:
            errors.append(f"critical_domains: no pattern for '{domain}'")
    return errors


def validate_tables(directory: str | Path | None = None) -> list[str]:
    """Validate both table files in ``directory`` and return every problem found."""
    directory = Path(directory) if directory is not None else PACKAGED_TABLES_DIR
    errors: list[str] = []

    try:
        personas = load_persona_tables(directory / PERSONA_TABLES_FILE)
    except TableError as exc:
        errors.append(str(exc))
    else:
        errors.extend(f"{PERSONA_TABLES_FILE}: {e}" for e in _check_personas(personas))

    try:
        detection = load_detection_tables(directory / DETECTION_TABLES_FILE)
    except TableError as exc:
        errors.append(str(exc))
    else:
        errors.extend(f"{DETECTION_TABLES_FILE}: {e}" for e in _check_detection(detection))

    for err in errors:
        logger.error("%s", err)
    return errors
