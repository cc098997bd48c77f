"""Compliance result model."""

from __future__ import annotations

from pydantic import BaseModel, Field

VALIDATION_TYPES: tuple[str, ...] = ("code", "api", "architecture", "test")


class ComplianceResult(BaseModel):
    """Accumulates findings from the validators run for one request.

    Violations are blocking and flip ``constitutional_compliance``;
    recommendations are advisory only.
    """

    constitutional_compliance: bool = True
    violations: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    domains_checked: list[str] = Field(default_factory=list)

    def add_violation(self, message: str) -> None:
        self.violations.append(message)
        self.constitutional_compliance = False

    def add_recommendation(self, message: str) -> None:
        self.recommendations.append(message)
