"""CLI entry point: python -m speckit_mcp <command>."""

from __future__ import annotations

import argparse
import logging
import sys

from speckit_mcp.compliance.models import VALIDATION_TYPES


def _configure_logging(level: str) -> None:
    # stdout carries the MCP protocol; logs go to stderr only.
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speckit-mcp",
        description="Spec-Kit MCP server and offline tools",
    )
    parser.add_argument("--framework-root", default=None, help="Directory holding memory/ and chatmodes/")
    parser.add_argument("--tables-dir", default=None, help="Directory of YAML lookup tables")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Run the MCP server on stdio (default)")

    dt = sub.add_parser("detect", help="Detect technologies and domains in some content")
    dt.add_argument("--content", required=True, help="Code or conversation text to analyze")
    dt.add_argument("--domain", action="append", default=[], dest="domains", help="Explicit domain (repeatable)")

    vc = sub.add_parser("validate", help="Check a file for constitutional compliance")
    vc.add_argument("path", help="File to validate, or - for stdin")
    vc.add_argument("--type", required=True, choices=list(VALIDATION_TYPES), dest="validation_type")
    vc.add_argument("--domain", action="append", default=[], dest="domains", help="Domain (repeatable)")

    ps = sub.add_parser("persona", help="Show the report for switching to a persona")
    ps.add_argument("persona", help="Persona id (pm, sa, dev, qa, devops, security, ba, po)")
    ps.add_argument("--context", default="", help="Context carried into the new persona")

    sub.add_parser("check-tables", help="Validate the YAML lookup tables")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    command = args.command or "serve"
    if command == "serve":
        from speckit_mcp.cli.serve import run_serve
        run_serve(args)
    elif command == "detect":
        from speckit_mcp.cli.offline import run_detect
        run_detect(args)
    elif command == "validate":
        from speckit_mcp.cli.offline import run_validate
        run_validate(args)
    elif command == "persona":
        from speckit_mcp.cli.offline import run_persona
        run_persona(args)
    elif command == "check-tables":
        from speckit_mcp.cli.check_tables import run_check_tables
        run_check_tables(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
