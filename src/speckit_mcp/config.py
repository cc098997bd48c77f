"""Framework configuration: where the server finds its documents.

A FrameworkConfig is the single object every component reads its
settings from.  It contains:

- Location: the framework root holding ``memory/`` and ``chatmodes/``
- Identity: the server name and version advertised over MCP
- Session defaults: which persona a fresh session starts in
- Tables: an optional directory overriding the packaged lookup tables

Example usage::

    config = FrameworkConfig(framework_root="/srv/spec-kit")
    reader = DocumentReader(config)
    reader.read_core_constitution()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# src/speckit_mcp/config.py -> repository root
_DEFAULT_ROOT = Path(__file__).resolve().parents[2]


@dataclass
class FrameworkConfig:
    """Configuration shared by the reader, orchestrator, detector and checker.

    Attributes:
        framework_root: Directory containing ``memory/`` and ``chatmodes/``.
            Defaults to the repository the package was installed from.
        server_name: Name advertised in the MCP initialization handshake.
        server_version: Version advertised in the MCP initialization handshake.
        default_persona: Persona a new session starts in.
        tables_dir: Directory of YAML lookup tables.  None means the
            tables shipped inside the package.
    """

    framework_root: Path = field(default_factory=lambda: _DEFAULT_ROOT)
    server_name: str = "spec-kit-mcp-server"
    server_version: str = "1.0.0"
    default_persona: str = "dev"
    tables_dir: Path | None = None

    def __post_init__(self) -> None:
        self.framework_root = Path(self.framework_root)
        if self.tables_dir is not None:
            self.tables_dir = Path(self.tables_dir)

    @property
    def constitution_path(self) -> Path:
        return self.framework_root / "memory" / "constitution.md"

    @property
    def constitution_dir(self) -> Path:
        return self.framework_root / "memory" / "constitution"

    @property
    def core_principles_path(self) -> Path:
        return self.constitution_dir / "core-principles.constitution.md"

    @property
    def chatmodes_dir(self) -> Path:
        return self.framework_root / "chatmodes"
