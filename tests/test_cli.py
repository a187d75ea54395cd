"""Tests for the command-line entry point."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from javadoc_to_md.cli import main

UNIT = {
    "path": "p/A.java",
    "package": "p",
    "types": [
        {
            "name": "A",
            "doc": "/** See {@link Missing}. */",
            "methods": [{"name": "size", "returns": "int", "doc": "/** Size. */"}],
        }
    ],
}


def write_units(units_dir: Path, *units: dict) -> None:
    """Write descriptors as YAML files."""
    units_dir.mkdir(parents=True, exist_ok=True)
    for i, unit in enumerate(units):
        (units_dir / f"unit{i}.yml").write_text(yaml.safe_dump(unit), encoding="utf-8")


def run(*argv: str) -> int:
    """Run main() with the given arguments."""
    with patch.object(sys, "argv", ["javadoc-to-md", *argv]):
        return main()


def test_convert_writes_documents(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """The default run writes one document per type and package."""
    write_units(tmp_path / "units", UNIT)
    out = tmp_path / "out"
    assert run(str(tmp_path / "units"), str(out), "--summary") == 0
    assert (out / "p" / "A.md").exists()
    assert (out / "p" / "package-summary.md").exists()
    assert (out / "SUMMARY.md").exists()
    stdout = capsys.readouterr().out
    assert "Generated 3 Markdown documents into:" in stdout
    assert "1 warnings" in stdout


def test_dry_run_writes_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """--dry-run reports counts only."""
    write_units(tmp_path / "units", UNIT)
    out = tmp_path / "out"
    assert run(str(tmp_path / "units"), str(out), "--dry-run") == 0
    assert not out.exists()
    assert "Dry run: 2 documents, 1 warnings" in capsys.readouterr().out


def test_lint(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """--lint prints findings and fails when there are any."""
    write_units(tmp_path / "units", UNIT)
    assert run(str(tmp_path / "units"), str(tmp_path / "out"), "--lint") == 1
    stdout = capsys.readouterr().out
    assert "p.A#size(): missing @return" in stdout
    assert "p.A: no declaration matches Missing from p.A" in stdout
    assert "2 problems found" in stdout


def test_fail_on_unresolved(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Fatal conversion errors exit with status 1 and a message on stderr."""
    write_units(tmp_path / "units", UNIT)
    out = tmp_path / "out"
    assert run(str(tmp_path / "units"), str(out), "--fail-on-unresolved") == 1
    assert "error: 1 unresolved reference(s):" in capsys.readouterr().err
    assert not out.exists()


def test_config_file(tmp_path: Path) -> None:
    """Options come from the YAML config file."""
    write_units(tmp_path / "units", UNIT)
    config = tmp_path / "config.yml"
    config.write_text(yaml.safe_dump({"includeSignatures": False}), encoding="utf-8")
    out = tmp_path / "out"
    assert run(str(tmp_path / "units"), str(out), "--config", str(config)) == 0
    assert "```" not in (out / "p" / "A.md").read_text(encoding="utf-8")


def test_invalid_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Invalid configuration values are reported, not raised."""
    write_units(tmp_path / "units", UNIT)
    config = tmp_path / "config.yml"
    config.write_text(yaml.safe_dump({"outputFormat": "html"}), encoding="utf-8")
    assert run(str(tmp_path / "units"), str(tmp_path / "out"), "--config", str(config)) == 1
    assert "outputFormat must be one of" in capsys.readouterr().err


def test_no_descriptors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """An empty input directory is reported like any other conversion error."""
    (tmp_path / "units").mkdir()
    assert run(str(tmp_path / "units"), str(tmp_path / "out")) == 1
    assert "error: No unit descriptors (*.yml, *.yaml, *.json) found under:" in (
        capsys.readouterr().err
    )
    assert not (tmp_path / "out").exists()


def test_ignore_modifiers(tmp_path: Path) -> None:
    """-i drops declarations carrying the modifier; the config list is extended."""
    unit = {
        "path": "p/A.java",
        "package": "p",
        "types": [
            {
                "name": "A",
                "methods": [
                    {"name": "open", "modifiers": ["public"], "doc": "/** Opens. */"},
                    {"name": "hook", "modifiers": ["protected"], "doc": "/** Hooks. */"},
                    {"name": "old", "modifiers": ["static"], "doc": "/** Old. */"},
                ],
            }
        ],
    }
    write_units(tmp_path / "units", unit)
    config = tmp_path / "config.yml"
    config.write_text(yaml.safe_dump({"ignoreModifiers": ["static"]}), encoding="utf-8")
    out = tmp_path / "out"
    args = [str(tmp_path / "units"), str(out), "--config", str(config), "-i", "protected"]
    assert run(*args) == 0
    content = (out / "p" / "A.md").read_text(encoding="utf-8")
    assert "Opens." in content
    assert "Hooks." not in content
    assert "Old." not in content
