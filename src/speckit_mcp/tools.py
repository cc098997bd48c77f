"""Tool and resource catalogs advertised over MCP, plus argument models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from speckit_mcp.compliance.models import VALIDATION_TYPES
from speckit_mcp.errors import InvalidArgumentError

DETECT_TOOL = "detect_and_load_context"
SWITCH_PERSONA_TOOL = "switch_agent_persona"
VALIDATE_TOOL = "validate_constitutional_compliance"

MARKDOWN = "text/markdown"

RESOURCE_CATALOG: list[dict[str, str]] = [
    {
        "uri": "constitutional://core-principles",
        "name": "Core Constitutional Principles",
        "description": "Non-negotiable framework rules (TDD, Interface Design, etc.)",
    },
    {
        "uri": "constitutional://context/security",
        "name": "Security Constitutional Rules",
        "description": "Security-specific constitutional principles",
    },
    {
        "uri": "constitutional://context/fintech",
        "name": "Fintech Constitutional Rules",
        "description": "Financial technology constitutional principles",
    },
    {
        "uri": "constitutional://context/healthcare",
        "name": "Healthcare Constitutional Rules",
        "description": "Healthcare-specific constitutional principles",
    },
    {
        "uri": "chatmode://dev",
        "name": "Developer Agent Mode",
        "description": "Full stack developer persona configuration",
    },
    {
        "uri": "chatmode://qa",
        "name": "QA Agent Mode",
        "description": "Quality assurance engineer persona configuration",
    },
    {
        "uri": "chatmode://sa",
        "name": "Solution Architect Agent Mode",
        "description": "Solution architect persona configuration",
    },
]


def tool_catalog(personas: Sequence[str]) -> list[dict[str, Any]]:
    """Tool definitions with JSON-schema inputs; the persona enum comes from the tables."""
    return [
        {
            "name": DETECT_TOOL,
            "description": "Auto-detect technology/domain and load appropriate constitutional context",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "content": {
                        "type": "string",
                        "description": "Code or conversation content to analyze for context detection",
                    },
                    "explicit_domains": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            "Explicitly specified domains to load "
                            "(security, fintech, healthcare, etc.)"
                        ),
                    },
                },
                "required": ["content"],
            },
        },
        {
            "name": SWITCH_PERSONA_TOOL,
            "description": "Switch between different agent personas (PM, SA, Dev, QA, etc.)",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "persona": {
                        "type": "string",
                        "enum": list(personas),
                        "description": "The agent persona to switch to",
                    },
                    "context": {
                        "type": "string",
                        "description": "Additional context for the persona switch",
                    },
                },
                "required": ["persona"],
            },
        },
        {
            "name": VALIDATE_TOOL,
            "description": "Validate code or design against constitutional principles",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "code": {
                        "type": "string",
                        "description": "Code to validate against constitutional principles",
                    },
                    "type": {
                        "type": "string",
                        "enum": list(VALIDATION_TYPES),
                        "description": "Type of validation to perform",
                    },
                    "domains": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Specific domains to validate against",
                    },
                },
                "required": ["code", "type"],
            },
        },
    ]


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


class DetectContextArgs(_ToolArgs):
    content: str
    explicit_domains: list[str] = Field(default_factory=list)


class SwitchPersonaArgs(_ToolArgs):
    persona: str
    context: str = ""


class ValidateComplianceArgs(_ToolArgs):
    code: str
    # Not constrained to VALIDATION_TYPES: an unknown type is a no-op, not an error.
    type: str
    domains: list[str] = Field(default_factory=list)


ArgsT = TypeVar("ArgsT", bound=_ToolArgs)


def parse_arguments(model: type[ArgsT], tool_name: str, arguments: dict[str, Any] | None) -> ArgsT:
    try:
        return model.model_validate(arguments or {})
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidArgumentError(f"Invalid arguments for {tool_name}: {problems}") from exc
