"""Chatmode markdown parsing.

Extraction is regex based and deliberately lenient: malformed front
matter yields an empty description and tool list, and missing sections
yield empty lists.
"""

from __future__ import annotations

import re

from speckit_mcp.personas.models import PersonaConfig
from speckit_mcp.tables.models import PersonaTables

_FRONT_MATTER = re.compile(r"^---\n(.*?)\n---", re.DOTALL)
_DESCRIPTION = re.compile(r'description:\s*"([^"]+)"')
_TOOLS = re.compile(r"tools:\s*\[(.*?)\]", re.DOTALL)
_QUOTES = re.compile(r"['\"]")
_BOLD_ITEM = re.compile(r"^- \*\*([^\r\n]*?)\*\*: ([^\r\n]*?)\r?$", re.MULTILINE)

CAPABILITIES_SECTION = "Key Capabilities"
DELIVERABLES_SECTION = "Deliverables"
BEHAVIOR_SECTION = "Persona Behavior"


def parse_front_matter(content: str) -> tuple[str, list[str]]:
    """Return ``(description, tools)`` from a leading ``---`` block."""
    match = _FRONT_MATTER.match(content)
    if not match:
        return "", []
    front_matter = match.group(1)

    description = ""
    desc_match = _DESCRIPTION.search(front_matter)
    if desc_match:
        description = desc_match.group(1)

    tools: list[str] = []
    tools_match = _TOOLS.search(front_matter)
    if tools_match:
        for raw in tools_match.group(1).split(","):
            tool = _QUOTES.sub("", raw.strip())
            if tool:
                tools.append(tool)
    return description, tools


def extract_section_items(content: str, section_name: str) -> list[str]:
    """Collect ``- **X**: Y`` items under ``## section_name`` as ``"X: Y"``.

    The section runs to the next ``##`` (any heading depth) or the end
    of the document.
    """
    section = re.search(
        rf"## {re.escape(section_name)}[\s\S]*?(?=##|\Z)", content, re.IGNORECASE
    )
    if not section:
        return []

    return [f"{m.group(1)}: {m.group(2)}" for m in _BOLD_ITEM.finditer(section.group(0))]


def parse_persona_document(content: str, persona: str, tables: PersonaTables) -> PersonaConfig:
    description, tools = parse_front_matter(content)
    behavior_items = extract_section_items(content, BEHAVIOR_SECTION)
    return PersonaConfig(
        name=tables.display_name(persona),
        description=description,
        capabilities=extract_section_items(content, CAPABILITIES_SECTION),
        tools=tools,
        behavior=behavior_items[0] if behavior_items else "",
        deliverables=extract_section_items(content, DELIVERABLES_SECTION),
    )
