"""Persona switching between chatmodes."""

from __future__ import annotations

import logging

from speckit_mcp.config import FrameworkConfig
from speckit_mcp.documents.reader import DocumentReader
from speckit_mcp.errors import InvalidArgumentError, InvalidPersonaError
from speckit_mcp.personas.models import (
    PersonaConfig,
    PersonaSession,
    PersonaSwitchReport,
    TransitionGuidance,
)
from speckit_mcp.personas.parser import parse_persona_document
from speckit_mcp.tables.models import PersonaTables

logger = logging.getLogger(__name__)

FOCUS_AREA_COUNT = 3


class PersonaOrchestrator:
    """Loads chatmode documents and builds transition reports."""

    def __init__(
        self,
        config: FrameworkConfig,
        tables: PersonaTables,
        *,
        reader: DocumentReader | None = None,
    ) -> None:
        self.config = config
        self.tables = tables
        self.reader = reader or DocumentReader(config)

    def new_session(self) -> PersonaSession:
        return PersonaSession(current_persona=self.config.default_persona)

    def get_chatmode_content(self, persona: str) -> str:
        return self.reader.read_chatmode(persona)

    def load_persona_config(self, persona: str) -> PersonaConfig:
        content = self.reader.read_chatmode(persona)
        return parse_persona_document(content, persona, self.tables)

    def _invalid_persona(self, persona: str) -> InvalidPersonaError:
        available = ", ".join(self.tables.personas)
        return InvalidPersonaError(
            f"Invalid persona: {persona}. Available personas: {available}"
        )

    def switch_persona(
        self,
        persona: str,
        context: str = "",
        *,
        session: PersonaSession | None = None,
    ) -> PersonaSwitchReport:
        """Switch ``session`` to ``persona`` and describe the handover.

        Raises InvalidPersonaError when ``persona`` has no chatmode document.
        """
        try:
            exists = self.reader.chatmode_exists(persona)
        except InvalidArgumentError as exc:
            raise self._invalid_persona(persona) from exc
        if not exists:
            raise self._invalid_persona(persona)

        persona_config = self.load_persona_config(persona)

        if session is None:
            session = self.new_session()
        previous = session.current_persona
        session.current_persona = persona
        logger.info("Persona switch %s -> %s", previous, persona)

        guidance = TransitionGuidance(
            transition_message=self.tables.transition_message(previous, persona),
            context_carryover=context,
            recommended_actions=self.tables.actions_for(persona),
            focus_areas=persona_config.capabilities[:FOCUS_AREA_COUNT],
            deliverable_expectations=list(persona_config.deliverables),
        )

        return PersonaSwitchReport(
            previous_persona=previous,
            current_persona=persona,
            transition_context=context,
            persona_configuration=persona_config,
            transition_guidance=guidance,
            constitutional_requirements=self.tables.requirements_for(persona),
        )
