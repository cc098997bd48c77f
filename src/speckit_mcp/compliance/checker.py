"""Constitutional compliance checks for code, APIs, architecture and tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from speckit_mcp.compliance import predicates as p
from speckit_mcp.compliance.models import ComplianceResult
from speckit_mcp.documents.reader import DocumentReader
from speckit_mcp.errors import SpecKitError

logger = logging.getLogger(__name__)

MISSING_TESTS = "Missing tests - TDD requires test-first development"
MISSING_ERROR_HANDLING = "Missing error handling - All public interfaces must handle errors"
ADD_LOGGING = "Consider adding structured logging for observability"
MISSING_INPUT_VALIDATION = "Missing input validation - All user inputs must be validated"
MISSING_API_DOCS = "Missing API documentation - All APIs must be documented"
MISSING_VERSIONING = "Missing versioning - All APIs must support semantic versioning"
ADD_HEALTH_CHECK = "Consider adding health check endpoints"
PLATFORM_SPECIFIC = "Platform-specific code detected - Maintain platform agnostic design"
REDUCE_COUPLING = "Consider reducing coupling between services"
MOCKS_IN_INTEGRATION = "Mocks detected in integration tests - Use real dependencies only"
USE_GIVEN_WHEN_THEN = "Consider using Given-When-Then structure for better test clarity"


@dataclass
class ConstitutionalRules:
    """Constitution text in force for one validation request."""

    core: str
    domains: dict[str, str] = field(default_factory=dict)


Validator = Callable[[str, ConstitutionalRules, ComplianceResult], None]


def validate_code(code: str, rules: ConstitutionalRules, result: ComplianceResult) -> None:
    if not p.has_tests(code):
        result.add_violation(MISSING_TESTS)
    if p.has_public_methods(code) and not p.has_error_handling(code):
        result.add_violation(MISSING_ERROR_HANDLING)
    if not p.has_logging(code):
        result.add_recommendation(ADD_LOGGING)
    if p.has_user_input(code) and not p.has_input_validation(code):
        result.add_violation(MISSING_INPUT_VALIDATION)


def validate_api(code: str, rules: ConstitutionalRules, result: ComplianceResult) -> None:
    if not p.has_api_documentation(code):
        result.add_violation(MISSING_API_DOCS)
    if not p.has_versioning(code):
        result.add_violation(MISSING_VERSIONING)
    if not p.has_health_check(code):
        result.add_recommendation(ADD_HEALTH_CHECK)


def validate_architecture(code: str, rules: ConstitutionalRules, result: ComplianceResult) -> None:
    if p.has_platform_specific_code(code):
        result.add_violation(PLATFORM_SPECIFIC)
    if p.has_tight_coupling(code):
        result.add_recommendation(REDUCE_COUPLING)


def validate_tests(code: str, rules: ConstitutionalRules, result: ComplianceResult) -> None:
    if p.is_integration_test(code) and p.has_mocks(code):
        result.add_violation(MOCKS_IN_INTEGRATION)
    if not p.has_given_when_then(code):
        result.add_recommendation(USE_GIVEN_WHEN_THEN)


VALIDATORS: dict[str, Validator] = {
    "code": validate_code,
    "api": validate_api,
    "architecture": validate_architecture,
    "test": validate_tests,
}


class ComplianceChecker:
    """Runs the validator for a request type against a code blob."""

    def __init__(self, reader: DocumentReader) -> None:
        self.reader = reader

    def load_applicable_rules(self, domains: Sequence[str]) -> ConstitutionalRules:
        """Load the core constitution (required) and any readable domain ones."""
        rules = ConstitutionalRules(core=self.reader.read_core_constitution())
        for domain in domains:
            try:
                rules.domains[domain] = self.reader.read_domain_constitution(domain)
            except SpecKitError as exc:
                logger.debug("Skipping constitution for domain %r: %s", domain, exc)
        return rules

    def validate(
        self, code: str, validation_type: str, domains: Sequence[str] = ()
    ) -> ComplianceResult:
        """Validate ``code``.  An unrecognized type returns a passing result unchanged."""
        result = ComplianceResult(domains_checked=list(domains))
        rules = self.load_applicable_rules(domains)

        validator = VALIDATORS.get(validation_type)
        if validator is None:
            logger.debug("No validator for type %r; returning unmodified result", validation_type)
            return result

        validator(code, rules, result)
        logger.debug(
            "Validated %s: %d violations, %d recommendations",
            validation_type,
            len(result.violations),
            len(result.recommendations),
        )
        return result
