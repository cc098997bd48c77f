"""MCP server: wires reader, orchestrator, detector and checker to the protocol.

``SpecKitServer`` is the protocol-independent facade: it owns one
FrameworkConfig, one set of lookup tables and one persona session, and
answers the four MCP requests with plain Python values.
``build_mcp_server`` registers those answers on an ``mcp`` low-level
``Server``; ``run_stdio`` serves it over stdin/stdout.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl, BaseModel

from speckit_mcp.compliance.checker import ComplianceChecker
from speckit_mcp.config import FrameworkConfig
from speckit_mcp.detection.detector import ContextDetector
from speckit_mcp.documents.reader import DocumentReader
from speckit_mcp.errors import UnknownToolError, log_tool_failure
from speckit_mcp.personas.models import PersonaSession
from speckit_mcp.personas.orchestrator import PersonaOrchestrator
from speckit_mcp.tables.loader import LookupTables, load_tables
from speckit_mcp.telemetry import NoOpTelemetrySink, TelemetrySink, track
from speckit_mcp.tools import (
    DETECT_TOOL,
    MARKDOWN,
    RESOURCE_CATALOG,
    SWITCH_PERSONA_TOOL,
    VALIDATE_TOOL,
    DetectContextArgs,
    SwitchPersonaArgs,
    ValidateComplianceArgs,
    parse_arguments,
    tool_catalog,
)

logger = logging.getLogger(__name__)


def to_json(model: BaseModel) -> str:
    return json.dumps(model.model_dump(), indent=2, default=str)


class SpecKitServer:
    """Single entry point that wires the components and dispatches requests."""

    def __init__(
        self,
        config: FrameworkConfig | None = None,
        *,
        tables: LookupTables | None = None,
        telemetry_sink: TelemetrySink | None = None,
    ) -> None:
        self.config = config or FrameworkConfig()
        self.tables = tables or load_tables(self.config.tables_dir)
        self.telemetry = telemetry_sink or NoOpTelemetrySink()
        self.reader = DocumentReader(self.config)
        self.orchestrator = PersonaOrchestrator(
            self.config, self.tables.personas, reader=self.reader
        )
        self.detector = ContextDetector(self.tables.detection)
        self.checker = ComplianceChecker(self.reader)
        self.session: PersonaSession = self.orchestrator.new_session()
        self._tools: dict[str, Callable[[dict[str, Any] | None], str]] = {
            DETECT_TOOL: self._detect_and_load_context,
            SWITCH_PERSONA_TOOL: self._switch_agent_persona,
            VALIDATE_TOOL: self._validate_constitutional_compliance,
        }

    # -- resources ---------------------------------------------------------

    def list_resources(self) -> list[dict[str, str]]:
        return [{**entry, "mimeType": MARKDOWN} for entry in RESOURCE_CATALOG]

    def read_resource(self, uri: str) -> str:
        with track(self.telemetry, "resource_read", uri=uri):
            return self.reader.read_resource(uri)

    # -- tools -------------------------------------------------------------

    def list_tools(self) -> list[dict[str, Any]]:
        return tool_catalog(self.tables.personas.personas)

    def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Run tool ``name`` and return its result as pretty-printed JSON."""
        handler = self._tools.get(name)
        if handler is None:
            exc = UnknownToolError(f"Unknown tool: {name}")
            log_tool_failure(tool_name=name, exc=exc)
            raise exc

        with track(self.telemetry, "tool_call", tool=name):
            try:
                return handler(arguments)
            except Exception as exc:
                log_tool_failure(tool_name=name, exc=exc)
                raise

    def _detect_and_load_context(self, arguments: dict[str, Any] | None) -> str:
        args = parse_arguments(DetectContextArgs, DETECT_TOOL, arguments)
        return to_json(self.detector.detect(args.content, args.explicit_domains))

    def _switch_agent_persona(self, arguments: dict[str, Any] | None) -> str:
        args = parse_arguments(SwitchPersonaArgs, SWITCH_PERSONA_TOOL, arguments)
        report = self.orchestrator.switch_persona(
            args.persona, args.context, session=self.session
        )
        return to_json(report)

    def _validate_constitutional_compliance(self, arguments: dict[str, Any] | None) -> str:
        args = parse_arguments(ValidateComplianceArgs, VALIDATE_TOOL, arguments)
        return to_json(self.checker.validate(args.code, args.type, args.domains))


# -- MCP wiring ------------------------------------------------------------


async def handle_list_resources(app: SpecKitServer) -> list[types.Resource]:
    return [types.Resource(**entry) for entry in app.list_resources()]


async def handle_read_resource(app: SpecKitServer, uri: AnyUrl | str) -> list[ReadResourceContents]:
    text = app.read_resource(str(uri))
    return [ReadResourceContents(content=text, mime_type=MARKDOWN)]


async def handle_list_tools(app: SpecKitServer) -> list[types.Tool]:
    return [types.Tool(**tool) for tool in app.list_tools()]


async def handle_call_tool(
    app: SpecKitServer, name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    text = app.call_tool(name, arguments)
    return [types.TextContent(type="text", text=text)]


def build_mcp_server(app: SpecKitServer) -> Server:
    server: Server = Server(app.config.server_name, version=app.config.server_version)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return await handle_list_resources(app)

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        return await handle_read_resource(app, uri)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return await handle_list_tools(app)

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await handle_call_tool(app, name, arguments)

    return server


async def run_stdio(app: SpecKitServer) -> None:
    server = build_mcp_server(app)
    async with stdio_server() as (read_stream, write_stream):
        print("Spec-Kit MCP Server running on stdio", file=sys.stderr)
        await server.run(read_stream, write_stream, server.create_initialization_options())
