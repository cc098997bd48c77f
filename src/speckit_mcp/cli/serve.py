"""CLI handler for ``speckit-mcp serve``."""

from __future__ import annotations

import asyncio
from argparse import Namespace

from speckit_mcp.config import FrameworkConfig
from speckit_mcp.server import SpecKitServer, run_stdio
from speckit_mcp.telemetry import LoggerTelemetrySink


def config_from_args(args: Namespace) -> FrameworkConfig:
    if args.framework_root:
        return FrameworkConfig(framework_root=args.framework_root, tables_dir=args.tables_dir)
    return FrameworkConfig(tables_dir=args.tables_dir)


def run_serve(args: Namespace) -> None:
    app = SpecKitServer(config_from_args(args), telemetry_sink=LoggerTelemetrySink())
    asyncio.run(run_stdio(app))
