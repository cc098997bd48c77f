"""Tests for the ``speckit-mcp`` command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import write_chatmode, write_core_constitution

from speckit_mcp.__main__ import build_parser, main


@pytest.fixture()
def root(framework_root: Path) -> Path:
    write_core_constitution(framework_root)
    write_chatmode(framework_root, "qa")
    return framework_root


def _run(root: Path, *argv: str) -> None:
    main(["--framework-root", str(root), *argv])


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.framework_root is None
        assert args.log_level == "WARNING"

    def test_repeatable_domains(self):
        args = build_parser().parse_args(
            ["detect", "--content", "x", "--domain", "security", "--domain", "fintech"]
        )
        assert args.domains == ["security", "fintech"]

    def test_validate_rejects_unknown_type(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["validate", "-", "--type", "docs"])


class TestDetect:
    def test_prints_report(self, root, capsys):
        _run(root, "detect", "--content", "tdd", "--domain", "security")
        data = json.loads(capsys.readouterr().out)
        assert data["detection_results"]["detected_domains"] == ["security", "testing"]


class TestValidate:
    def test_compliant_file(self, root, tmp_path: Path, capsys):
        source = tmp_path / "spec.test.js"
        source.write_text("given a user, when they log in, then it works", encoding="utf-8")
        _run(root, "validate", str(source), "--type", "test")
        assert json.loads(capsys.readouterr().out)["constitutional_compliance"] is True

    def test_violation_exits_nonzero(self, root, tmp_path: Path, capsys):
        source = tmp_path / "it.test.js"
        source.write_text("integration test with jest.mock()", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            _run(root, "validate", str(source), "--type", "test")
        assert excinfo.value.code == 1
        data = json.loads(capsys.readouterr().out)
        assert data["violations"] == [
            "Mocks detected in integration tests - Use real dependencies only",
        ]

    def test_unreadable_file(self, root, tmp_path: Path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(root, "validate", str(tmp_path / "missing.js"), "--type", "code")
        assert excinfo.value.code == 1
        assert "cannot read" in capsys.readouterr().err

    def test_missing_core_constitution(self, framework_root: Path, tmp_path: Path, capsys):
        source = tmp_path / "a.js"
        source.write_text("// test", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            _run(framework_root, "validate", str(source), "--type", "code")
        assert excinfo.value.code == 1
        assert "Core constitutional principles not found" in capsys.readouterr().err


class TestPersona:
    def test_switch(self, root, capsys):
        _run(root, "persona", "qa", "--context", "handover")
        data = json.loads(capsys.readouterr().out)
        assert data["current_persona"] == "qa"
        assert data["previous_persona"] == "dev"
        assert data["transition_context"] == "handover"

    def test_unknown_persona(self, root, capsys):
        with pytest.raises(SystemExit) as excinfo:
            _run(root, "persona", "po")
        assert excinfo.value.code == 1
        assert "Error: Invalid persona: po" in capsys.readouterr().err


class TestCheckTables:
    def test_packaged_tables(self, capsys):
        main(["check-tables"])
        assert capsys.readouterr().out.startswith("OK: lookup tables in ")

    def test_broken_tables(self, tmp_path: Path, capsys):
        (tmp_path / "personas.yaml").write_text("personas: [pm\n", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main(["--tables-dir", str(tmp_path), "check-tables"])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Malformed YAML" in err
        assert "Lookup table not found" in err
