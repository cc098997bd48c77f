"""Heuristic presence checks over a code blob.

Each predicate is a case-insensitive search anywhere in the text.  There
is no parsing; false positives and negatives are expected.
"""

from __future__ import annotations

import re


def _pattern(source: str) -> re.Pattern[str]:
    return re.compile(source, re.IGNORECASE)


TESTS = _pattern(r"test|spec|describe|it\(")
PUBLIC_INTERFACE = _pattern(r"public|export|api")
ERROR_HANDLING = _pattern(r"try|catch|throw|error|exception")
LOGGING = _pattern(r"log|logger|console\.")
USER_INPUT = _pattern(r"input|request|params|body|query")
INPUT_VALIDATION = _pattern(r"validate|schema|joi|zod|yup")

API_DOCUMENTATION = _pattern(r"swagger|openapi|@api|\/\*\*.*@param")
VERSIONING = _pattern(r"version|v\d+|\/api\/v")
HEALTH_CHECK = _pattern(r"health|status|ping|ready")

PLATFORM_SPECIFIC = _pattern(r"\.NET|\.net|windows|linux|macos|platform\.is")
TIGHT_COUPLING = _pattern(r"import.*\.\.\/.*\.\.\/|require.*\.\.\/.*\.\.\/")

INTEGRATION_TEST = _pattern(r"integration.*test|test.*integration")
MOCKS = _pattern(r"mock|stub|fake|spy|jest\.mock")
GIVEN_WHEN_THEN = _pattern(r"given|when|then|arrange|act|assert")


def has_tests(code: str) -> bool:
    return bool(TESTS.search(code))


def has_public_methods(code: str) -> bool:
    return bool(PUBLIC_INTERFACE.search(code))


def has_error_handling(code: str) -> bool:
    return bool(ERROR_HANDLING.search(code))


def has_logging(code: str) -> bool:
    return bool(LOGGING.search(code))


def has_user_input(code: str) -> bool:
    return bool(USER_INPUT.search(code))


def has_input_validation(code: str) -> bool:
    return bool(INPUT_VALIDATION.search(code))


def has_api_documentation(code: str) -> bool:
    return bool(API_DOCUMENTATION.search(code))


def has_versioning(code: str) -> bool:
    return bool(VERSIONING.search(code))


def has_health_check(code: str) -> bool:
    return bool(HEALTH_CHECK.search(code))


def has_platform_specific_code(code: str) -> bool:
    return bool(PLATFORM_SPECIFIC.search(code))


def has_tight_coupling(code: str) -> bool:
    return bool(TIGHT_COUPLING.search(code))


def is_integration_test(code: str) -> bool:
    return bool(INTEGRATION_TEST.search(code))


def has_mocks(code: str) -> bool:
    return bool(MOCKS.search(code))


def has_given_when_then(code: str) -> bool:
    return bool(GIVEN_WHEN_THEN.search(code))
