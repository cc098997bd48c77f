"""CLI handlers that run a single tool without an MCP client."""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from speckit_mcp.cli.serve import config_from_args
from speckit_mcp.errors import SpecKitError
from speckit_mcp.server import SpecKitServer
from speckit_mcp.tools import DETECT_TOOL, SWITCH_PERSONA_TOOL, VALIDATE_TOOL


def _call(args: Namespace, tool: str, arguments: dict) -> str:
    app = SpecKitServer(config_from_args(args))
    try:
        return app.call_tool(tool, arguments)
    except SpecKitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def run_detect(args: Namespace) -> None:
    print(_call(args, DETECT_TOOL, {"content": args.content, "explicit_domains": args.domains}))


def run_validate(args: Namespace) -> None:
    if args.path == "-":
        code = sys.stdin.read()
    else:
        try:
            with open(args.path, encoding="utf-8") as f:
                code = f.read()
        except OSError as exc:
            print(f"Error: cannot read {args.path}: {exc}", file=sys.stderr)
            sys.exit(1)

    output = _call(
        args, VALIDATE_TOOL,
        {"code": code, "type": args.validation_type, "domains": args.domains},
    )
    print(output)
    if not json.loads(output)["constitutional_compliance"]:
        sys.exit(1)


def run_persona(args: Namespace) -> None:
    print(_call(args, SWITCH_PERSONA_TOOL, {"persona": args.persona, "context": args.context}))
