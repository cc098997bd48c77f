"""Compliance subsystem: heuristic constitutional checks."""

from speckit_mcp.compliance.checker import (
    VALIDATORS,
    ComplianceChecker,
    ConstitutionalRules,
)
from speckit_mcp.compliance.models import VALIDATION_TYPES, ComplianceResult

__all__ = [
    "VALIDATION_TYPES",
    "VALIDATORS",
    "ComplianceChecker",
    "ComplianceResult",
    "ConstitutionalRules",
]
