"""Static lookup tables loaded from YAML."""

from speckit_mcp.tables.loader import (
    PACKAGED_TABLES_DIR,
    LookupTables,
    clear_table_cache,
    load_detection_tables,
    load_persona_tables,
    load_tables,
)
from speckit_mcp.tables.models import DetectionTables, PersonaTables
from speckit_mcp.tables.validator import validate_tables

__all__ = [
    "PACKAGED_TABLES_DIR",
    "DetectionTables",
    "LookupTables",
    "PersonaTables",
    "clear_table_cache",
    "load_detection_tables",
    "load_persona_tables",
    "load_tables",
    "validate_tables",
]
