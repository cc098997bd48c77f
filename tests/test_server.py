"""Tests for the server facade and its MCP wiring."""

from __future__ import annotations

import json
from importlib.metadata import version
from pathlib import Path

import mcp.types as types
import pytest
from conftest import write_chatmode, write_core_constitution
from mcp.server.lowlevel import Server

from speckit_mcp.errors import (
    DocumentNotFoundError,
    InvalidArgumentError,
    InvalidPersonaError,
    UnknownToolError,
)
from speckit_mcp.server import (
    SpecKitServer,
    build_mcp_server,
    handle_call_tool,
    handle_list_resources,
    handle_list_tools,
    handle_read_resource,
)
from speckit_mcp.telemetry import InMemoryTelemetrySink


@pytest.fixture()
def sink() -> InMemoryTelemetrySink:
    return InMemoryTelemetrySink()


@pytest.fixture()
def app(config, framework_root: Path, sink) -> SpecKitServer:
    write_core_constitution(framework_root)
    for persona in ("dev", "qa", "sa"):
        write_chatmode(framework_root, persona)
    return SpecKitServer(config, telemetry_sink=sink)


class TestCatalogs:
    def test_resources(self, app):
        resources = app.list_resources()
        assert [r["uri"] for r in resources] == [
            "constitutional://core-principles",
            "constitutional://context/security",
            "constitutional://context/fintech",
            "constitutional://context/healthcare",
            "chatmode://dev",
            "chatmode://qa",
            "chatmode://sa",
        ]
        assert all(r["mimeType"] == "text/markdown" for r in resources)

    def test_tools(self, app):
        tools = {t["name"]: t for t in app.list_tools()}
        assert list(tools) == [
            "detect_and_load_context",
            "switch_agent_persona",
            "validate_constitutional_compliance",
        ]
        persona_schema = tools["switch_agent_persona"]["inputSchema"]
        assert persona_schema["properties"]["persona"]["enum"] == [
            "pm", "sa", "dev", "qa", "devops", "security", "ba", "po",
        ]
        assert persona_schema["required"] == ["persona"]
        validate_schema = tools["validate_constitutional_compliance"]["inputSchema"]
        assert validate_schema["properties"]["type"]["enum"] == [
            "code", "api", "architecture", "test",
        ]
        assert validate_schema["required"] == ["code", "type"]


class TestReadResource:
    def test_core(self, app):
        assert app.read_resource("constitutional://core-principles").startswith("# Core")

    def test_default_domain_document(self, app):
        text = app.read_resource("constitutional://context/fintech")
        assert text.startswith("# Fintech Constitutional Principles")

    def test_chatmode(self, app):
        assert "## Key Capabilities" in app.read_resource("chatmode://qa")

    def test_unknown_scheme(self, app, sink):
        with pytest.raises(InvalidArgumentError, match="Unknown resource: foo://bar"):
            app.read_resource("foo://bar")
        [event] = sink.named("resource_read")
        assert event.attributes["uri"] == "foo://bar"
        assert event.attributes["ok"] is False

    def test_missing_chatmode(self, app):
        with pytest.raises(DocumentNotFoundError, match="Chat mode not found: po"):
            app.read_resource("chatmode://po")


class TestCallTool:
    def test_detect(self, app):
        data = json.loads(app.call_tool("detect_and_load_context", {"content": "useState"}))
        assert set(data) == {
            "detection_results",
            "recommendations",
            "instructions_to_load",
            "chatmodes_to_load",
            "constitutional_domains",
        }
        assert data["detection_results"]["detected_technologies"] == ["react"]

    def test_validate(self, app):
        data = json.loads(
            app.call_tool(
                "validate_constitutional_compliance",
                {"code": "integration test with jest.mock()", "type": "test"},
            )
        )
        assert data["constitutional_compliance"] is False
        assert data["domains_checked"] == []

    def test_switch_carries_session(self, app):
        first = json.loads(app.call_tool("switch_agent_persona", {"persona": "qa"}))
        second = json.loads(
            app.call_tool("switch_agent_persona", {"persona": "sa", "context": "ready"})
        )
        assert first["previous_persona"] == "dev"
        assert second["previous_persona"] == "qa"
        assert second["transition_context"] == "ready"
        assert app.session.current_persona == "sa"

    def test_output_is_indented_json(self, app):
        text = app.call_tool("validate_constitutional_compliance", {"code": "", "type": "api"})
        assert text.startswith('{\n  "constitutional_compliance"')

    def test_invalid_persona(self, app):
        with pytest.raises(InvalidPersonaError, match="Invalid persona: po"):
            app.call_tool("switch_agent_persona", {"persona": "po"})

    def test_unknown_tool(self, app, sink):
        with pytest.raises(UnknownToolError, match="Unknown tool: delete_everything"):
            app.call_tool("delete_everything", {})
        assert sink.named("tool_call") == []

    def test_missing_required_argument(self, app):
        with pytest.raises(InvalidArgumentError, match="Invalid arguments for detect_and_load_context"):
            app.call_tool("detect_and_load_context", {})

    def test_none_arguments(self, app):
        with pytest.raises(InvalidArgumentError, match="persona"):
            app.call_tool("switch_agent_persona", None)

    def test_extra_arguments_ignored(self, app):
        data = json.loads(
            app.call_tool("detect_and_load_context", {"content": "", "verbose": True})
        )
        assert data["detection_results"]["confidence_score"] == 0

    def test_telemetry(self, app, sink):
        app.call_tool("detect_and_load_context", {"content": "tdd"})
        with pytest.raises(InvalidPersonaError):
            app.call_tool("switch_agent_persona", {"persona": "ba"})

        events = sink.named("tool_call")
        assert [e.attributes["tool"] for e in events] == [
            "detect_and_load_context",
            "switch_agent_persona",
        ]
        assert [e.attributes["ok"] for e in events] == [True, False]
        assert all(e.attributes["latency_ms"] >= 0 for e in events)


class TestMcpHandlers:
    @pytest.mark.asyncio
    async def test_list_resources(self, app):
        resources = await handle_list_resources(app)
        assert all(isinstance(r, types.Resource) for r in resources)
        assert str(resources[0].uri) == "constitutional://core-principles"
        assert resources[0].mimeType == "text/markdown"

    @pytest.mark.asyncio
    async def test_read_resource(self, app):
        [contents] = await handle_read_resource(app, "chatmode://dev")
        assert contents.mime_type == "text/markdown"
        assert "Builds and ships features" in contents.content

    @pytest.mark.asyncio
    async def test_list_tools(self, app):
        tools = await handle_list_tools(app)
        assert [t.name for t in tools] == [
            "detect_and_load_context",
            "switch_agent_persona",
            "validate_constitutional_compliance",
        ]

    @pytest.mark.asyncio
    async def test_call_tool(self, app):
        [content] = await handle_call_tool(app, "detect_and_load_context", {"content": "tdd"})
        assert content.type == "text"
        assert json.loads(content.text)["detection_results"]["detected_domains"] == ["testing"]

    @pytest.mark.asyncio
    async def test_call_tool_error_propagates(self, app):
        with pytest.raises(UnknownToolError):
            await handle_call_tool(app, "nope", None)


def test_build_mcp_server_registers_handlers(app):
    server = build_mcp_server(app)
    assert server.name == "spec-kit-mcp-server"
    for request_type in (
        types.ListResourcesRequest,
        types.ReadResourceRequest,
        types.ListToolsRequest,
        types.CallToolRequest,
    ):
        assert request_type in server.request_handlers


def test_sdk_major_version_matches_handler_api():
    assert version("mcp").split(".")[0] == "1"
    for decorator in ("list_resources", "read_resource", "list_tools", "call_tool"):
        assert callable(getattr(Server, decorator, None))
    assert "mimeType" in types.Resource.model_fields
