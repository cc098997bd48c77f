"""Exception hierarchy for document lookups and tool dispatch."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class SpecKitError(Exception):
    """Base class for every error the server surfaces to a caller."""


class DocumentNotFoundError(SpecKitError):
    """A constitution, chatmode or persona document does not exist."""


class InvalidPersonaError(DocumentNotFoundError):
    """The requested persona has no chatmode document."""


class InvalidArgumentError(SpecKitError):
    """A resource URI, identifier or tool argument is not acceptable."""


class UnknownToolError(InvalidArgumentError):
    """No tool is registered under the requested name."""


class TableError(SpecKitError):
    """A lookup table file could not be loaded."""


def log_tool_failure(*, tool_name: str, exc: Exception) -> None:
    """Log a failed tool call before it propagates to the protocol layer.

    Expected failures get a one-line warning; anything else keeps its
    traceback.
    """
    if isinstance(exc, SpecKitError):
        logger.warning("Tool '%s' rejected: %s", tool_name, exc)
    else:
        logger.exception("Tool '%s' failed", tool_name, exc_info=exc)
