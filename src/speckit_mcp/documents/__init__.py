"""Document subsystem: constitutions and chatmodes read from the framework root."""

from speckit_mcp.documents.reader import DocumentReader
from speckit_mcp.documents.templates import DEFAULT_SECTION_HEADINGS, render_default_constitution
from speckit_mcp.documents.uris import (
    CHATMODE_SCHEME,
    CONSTITUTIONAL_SCHEME,
    ResourceRef,
    parse_resource_uri,
)

__all__ = [
    "CHATMODE_SCHEME",
    "CONSTITUTIONAL_SCHEME",
    "DEFAULT_SECTION_HEADINGS",
    "DocumentReader",
    "ResourceRef",
    "parse_resource_uri",
    "render_default_constitution",
]
