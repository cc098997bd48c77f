"""Pydantic models for the static lookup tables."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

GENERIC_ACTIONS = ["Perform role-specific activities"]
GENERIC_REQUIREMENTS = ["Follow core constitutional principles"]


class _FrozenModel(BaseModel):
    """Tables are read-only once loaded."""

    model_config = ConfigDict(extra="forbid", frozen=True)


def _compile_patterns(patterns: dict[str, str]) -> dict[str, re.Pattern[str]]:
    compiled: dict[str, re.Pattern[str]] = {}
    for name, source in patterns.items():
        try:
            compiled[name] = re.compile(source, re.IGNORECASE)
        except re.error as exc:
            raise ValueError(f"pattern {name!r} does not compile: {exc}") from exc
    return compiled


class PersonaTables(_FrozenModel):
    """Display names, transitions and per-persona guidance."""

    personas: list[str]
    display_names: dict[str, str] = Field(default_factory=dict)
    transitions: dict[str, dict[str, str]] = Field(default_factory=dict)
    recommended_actions: dict[str, list[str]] = Field(default_factory=dict)
    constitutional_requirements: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("personas")
    @classmethod
    def require_personas(cls, values: list[str]) -> list[str]:
        cleaned = [v.strip() for v in values if v and v.strip()]
        if not cleaned:
            raise ValueError("personas must list at least one persona id")
        return cleaned

    def display_name(self, persona: str) -> str:
        return self.display_names.get(persona) or persona.upper()

    def transition_message(self, from_persona: str, to_persona: str) -> str:
        message = self.transitions.get(from_persona, {}).get(to_persona)
        if message:
            return message
        return (
            f"Transitioning from {self.display_name(from_persona)} "
            f"to {self.display_name(to_persona)} context."
        )

    def actions_for(self, persona: str) -> list[str]:
        return list(self.recommended_actions.get(persona) or GENERIC_ACTIONS)

    def requirements_for(self, persona: str) -> list[str]:
        return list(self.constitutional_requirements.get(persona) or GENERIC_REQUIREMENTS)


class DetectionTables(_FrozenModel):
    """Keyword patterns and the document maps they feed.

    ``technology_patterns`` and ``domain_patterns`` keep their YAML
    order; detection reports matches in that order.
    """

    base_instruction: str
    default_chatmode: str
    core_constitution: str
    critical_domains: list[str] = Field(default_factory=list)
    technology_patterns: dict[str, str]
    domain_patterns: dict[str, str]
    technology_instructions: dict[str, str] = Field(default_factory=dict)
    domain_chatmodes: dict[str, list[str]] = Field(default_factory=dict)
    domain_constitutions: dict[str, str] = Field(default_factory=dict)

    @field_validator("technology_patterns", "domain_patterns")
    @classmethod
    def patterns_compile(cls, patterns: dict[str, str]) -> dict[str, str]:
        _compile_patterns(patterns)
        return patterns

    def compiled_technologies(self) -> dict[str, re.Pattern[str]]:
        return _compile_patterns(self.technology_patterns)

    def compiled_domains(self) -> dict[str, re.Pattern[str]]:
        return _compile_patterns(self.domain_patterns)
