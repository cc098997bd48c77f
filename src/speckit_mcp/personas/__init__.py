"""Persona subsystem: chatmode parsing and persona switching."""

from speckit_mcp.personas.models import (
    PersonaConfig,
    PersonaSession,
    PersonaSwitchReport,
    TransitionGuidance,
)
from speckit_mcp.personas.orchestrator import PersonaOrchestrator
from speckit_mcp.personas.parser import (
    extract_section_items,
    parse_front_matter,
    parse_persona_document,
)

__all__ = [
    "PersonaConfig",
    "PersonaOrchestrator",
    "PersonaSession",
    "PersonaSwitchReport",
    "TransitionGuidance",
    "extract_section_items",
    "parse_front_matter",
    "parse_persona_document",
]
