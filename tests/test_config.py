"""Tests for FrameworkConfig path resolution."""

from pathlib import Path

from speckit_mcp import FrameworkConfig


class TestFrameworkConfig:
    def test_defaults(self):
        config = FrameworkConfig()
        assert config.server_name == "spec-kit-mcp-server"
        assert config.server_version == "1.0.0"
        assert config.default_persona == "dev"
        assert config.tables_dir is None
        assert config.framework_root.is_absolute()

    def test_default_root_is_repository_root(self):
        config = FrameworkConfig()
        assert (config.framework_root / "src" / "speckit_mcp").is_dir()

    def test_string_paths_are_coerced(self, tmp_path: Path):
        config = FrameworkConfig(framework_root=str(tmp_path), tables_dir=str(tmp_path / "t"))
        assert config.framework_root == tmp_path
        assert config.tables_dir == tmp_path / "t"

    def test_derived_paths(self, tmp_path: Path):
        config = FrameworkConfig(framework_root=tmp_path)
        assert config.constitution_path == tmp_path / "memory" / "constitution.md"
        assert config.constitution_dir == tmp_path / "memory" / "constitution"
        assert config.core_principles_path == (
            tmp_path / "memory" / "constitution" / "core-principles.constitution.md"
        )
        assert config.chatmodes_dir == tmp_path / "chatmodes"
