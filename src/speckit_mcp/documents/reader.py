"""Markdown document reader for constitutions and chatmodes.

All reads are confined to the framework root from FrameworkConfig:

  - core constitution: ``memory/constitution.md``, falling back to
    ``memory/constitution/core-principles.constitution.md``
  - domain constitution: ``memory/constitution/{domain}.constitution.md``,
    falling back to a synthesized default document
  - persona: ``chatmodes/{persona}.chatmode.md``, no fallback
"""

from __future__ import annotations

import logging
from pathlib import Path

from speckit_mcp.config import FrameworkConfig
from speckit_mcp.documents.templates import render_default_constitution
from speckit_mcp.documents.uris import check_identifier, parse_resource_uri
from speckit_mcp.errors import DocumentNotFoundError

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


class DocumentReader:
    """Resolves document identifiers to markdown text."""

    def __init__(self, config: FrameworkConfig) -> None:
        self.config = config

    def chatmode_path(self, persona: str) -> Path:
        check_identifier(persona, what="persona")
        return self.config.chatmodes_dir / f"{persona}.chatmode.md"

    def domain_constitution_path(self, domain: str) -> Path:
        check_identifier(domain, what="domain")
        return self.config.constitution_dir / f"{domain}.constitution.md"

    def read_core_constitution(self) -> str:
        for path in (self.config.constitution_path, self.config.core_principles_path):
            if path.is_file():
                logger.debug("Reading core constitution from %s", path)
                return _read_text(path)
        raise DocumentNotFoundError("Core constitutional principles not found")

    def read_domain_constitution(self, domain: str) -> str:
        """Never fails for a well-formed domain; missing documents get the default."""
        path = self.domain_constitution_path(domain)
        if path.is_file():
            logger.debug("Reading %s constitution from %s", domain, path)
            return _read_text(path)
        logger.info("No constitution for domain %r, serving the default document", domain)
        return render_default_constitution(domain)

    def chatmode_exists(self, persona: str) -> bool:
        return self.chatmode_path(persona).is_file()

    def read_chatmode(self, persona: str) -> str:
        path = self.chatmode_path(persona)
        try:
            return _read_text(path)
        except OSError as exc:
            raise DocumentNotFoundError(f"Chat mode not found: {persona}") from exc

    def read_resource(self, uri: str) -> str:
        ref = parse_resource_uri(uri)
        if ref.kind == "core":
            return self.read_core_constitution()
        if ref.kind == "constitution":
            return self.read_domain_constitution(ref.identifier)
        return self.read_chatmode(ref.identifier)
