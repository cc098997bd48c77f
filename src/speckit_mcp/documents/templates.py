"""Default constitution served when a domain has no document of its own."""

from __future__ import annotations

_DEFAULT_DOMAIN_CONSTITUTION = """\
# {title} Constitutional Principles

Domain-specific constitutional principles for **{domain}** are not yet defined.

## Default Constitutional Requirements

Based on core principles, all {domain} implementations must follow:

1. **Test-First Development (TDD)**
   - RED: Write failing test first
   - GREEN: Write minimal code to pass
   - REFACTOR: Improve code while keeping tests green

2. **Interface Design**
   - Clear contracts with input/output validation
   - Consistent error handling and responses
   - Semantic versioning (MAJOR.MINOR.PATCH.BUILD)
   - Comprehensive API documentation

3. **Observability First**
   - Structured logging with correlation IDs
   - Metrics collection and monitoring
   - Health checks and readiness probes
   - Distributed tracing support

4. **Security by Design** (Critical for {domain})
   - Authentication and authorization
   - Input validation and sanitization
   - Secure communication (HTTPS/TLS)
   - Audit logging and compliance

5. **Platform Agnostic**
   - Cross-platform compatibility
   - Container-ready deployment
   - Configuration externalization
   - Environment-specific settings

To create domain-specific constitutional principles, add them to:
`memory/constitution/{domain}.constitution.md`
"""

DEFAULT_SECTION_HEADINGS = (
    "Test-First Development (TDD)",
    "Interface Design",
    "Observability First",
    "Security by Design",
    "Platform Agnostic",
)


def domain_title(domain: str) -> str:
    """Upper-case the first character only: ``ai-ml`` -> ``Ai-ml``."""
    return domain[:1].upper() + domain[1:]


def render_default_constitution(domain: str) -> str:
    return _DEFAULT_DOMAIN_CONSTITUTION.format(title=domain_title(domain), domain=domain)
