"""Spec-Kit MCP: constitutional documents, personas and context detection over MCP.

The server exposes markdown constitutions and chatmode personas as
resources, plus three tools: context detection, persona switching and
constitutional compliance checks.

Public API::

    from speckit_mcp import FrameworkConfig, SpecKitServer
    from speckit_mcp.server import build_mcp_server, run_stdio
"""

from speckit_mcp.config import FrameworkConfig
from speckit_mcp.server import SpecKitServer

__all__ = ["FrameworkConfig", "SpecKitServer"]
__version__ = "1.0.0"
