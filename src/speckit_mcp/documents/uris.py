"""Resource URI routing for ``constitutional://`` and ``chatmode://``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from speckit_mcp.errors import InvalidArgumentError

CONSTITUTIONAL_SCHEME = "constitutional://"
CHATMODE_SCHEME = "chatmode://"

CORE_PRINCIPLES_ID = "core-principles"
_DOMAIN_PREFIX = "context/"

_FORBIDDEN = re.compile(r"[\\/\x00-\x1f]|\.\.")

DocumentKind = Literal["core", "constitution", "persona"]


@dataclass(frozen=True)
class ResourceRef:
    """A parsed resource URI: which document kind and which identifier."""

    kind: DocumentKind
    identifier: str


def check_identifier(identifier: str, *, what: str) -> str:
    """Reject identifiers that could leave the document directories."""
    if not identifier or _FORBIDDEN.search(identifier):
        raise InvalidArgumentError(f"Invalid {what} identifier: {identifier!r}")
    return identifier


def parse_resource_uri(uri: str) -> ResourceRef:
    if uri.startswith(CONSTITUTIONAL_SCHEME):
        rest = uri[len(CONSTITUTIONAL_SCHEME):].rstrip("/")
        if rest == CORE_PRINCIPLES_ID:
            return ResourceRef("core", CORE_PRINCIPLES_ID)
        if rest.startswith(_DOMAIN_PREFIX):
            domain = rest[len(_DOMAIN_PREFIX):]
            return ResourceRef("constitution", check_identifier(domain, what="domain"))
        raise InvalidArgumentError(f"Unknown constitutional URI: {uri}")

    if uri.startswith(CHATMODE_SCHEME):
        persona = uri[len(CHATMODE_SCHEME):].rstrip("/")
        return ResourceRef("persona", check_identifier(persona, what="persona"))

    raise InvalidArgumentError(f"Unknown resource: {uri}")
