"""Pydantic models for persona configuration and switch reports."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


class PersonaConfig(BaseModel):
    """A chatmode document reduced to the fields agents care about."""

    name: str
    description: str = ""
    capabilities: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    behavior: str = ""
    deliverables: list[str] = Field(default_factory=list)


class TransitionGuidance(BaseModel):
    transition_message: str
    context_carryover: str = ""
    recommended_actions: list[str] = Field(default_factory=list)
    focus_areas: list[str] = Field(default_factory=list)
    deliverable_expectations: list[str] = Field(default_factory=list)


class PersonaSwitchReport(BaseModel):
    previous_persona: str
    current_persona: str
    transition_context: str = ""
    persona_configuration: PersonaConfig
    transition_guidance: TransitionGuidance
    constitutional_requirements: list[str] = Field(default_factory=list)


@dataclass
class PersonaSession:
    """Which persona a single client session is currently in.

    Nothing else reads this value; it only labels ``previous_persona``
    in the next switch report for the same session.
    """

    current_persona: str = "dev"
