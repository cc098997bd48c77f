"""Pydantic models for context detection output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DetectionResult(BaseModel):
    detected_technologies: list[str] = Field(default_factory=list)
    detected_domains: list[str] = Field(default_factory=list)
    recommended_instructions: list[str] = Field(default_factory=list)
    recommended_chatmodes: list[str] = Field(default_factory=list)
    confidence_score: float = Field(default=0.0, ge=0.0, le=1.0)


class Recommendations(BaseModel):
    instructions: list[str] = Field(default_factory=list)
    chatmodes: list[str] = Field(default_factory=list)
    constitutional_domains: list[str] = Field(default_factory=list)
    workflow_suggestions: list[str] = Field(default_factory=list)
    priority_order: list[str] = Field(default_factory=list)


class ContextReport(BaseModel):
    """Full ``detect_and_load_context`` payload."""

    detection_results: DetectionResult
    recommendations: Recommendations
    instructions_to_load: list[str] = Field(default_factory=list)
    chatmodes_to_load: list[str] = Field(default_factory=list)
    constitutional_domains: list[str] = Field(default_factory=list)
