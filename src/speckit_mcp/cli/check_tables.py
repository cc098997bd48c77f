"""CLI handler for ``speckit-mcp check-tables``."""

from __future__ import annotations

import sys
from argparse import Namespace

from speckit_mcp.tables.loader import PACKAGED_TABLES_DIR
from speckit_mcp.tables.validator import validate_tables


def run_check_tables(args: Namespace) -> None:
    directory = args.tables_dir or PACKAGED_TABLES_DIR
    errors = validate_tables(directory)
    if errors:
        for err in errors:
            print(err, file=sys.stderr)
        sys.exit(1)
    print(f"OK: lookup tables in {directory} are valid")
