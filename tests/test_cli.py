# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from codechecker.cli import app


def test_check_clean_tree_exits_zero(tmp_path: Path) -> None:
    (tmp_path / "a.php").write_text("<?php\necho 1;\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path)])

    assert result.exit_code == 0
    assert "Running in read-only mode" in result.stdout
    assert "Checked 1 file(s), no problems left" in result.stdout


def test_check_reports_findings_and_exits_one(tmp_path: Path) -> None:
    target = tmp_path / "a.php"
    target.write_bytes(b"<?php\necho 1;   \n")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path)])

    assert result.exit_code == 1
    assert "[FOUND]" in result.stdout
    assert "3 bytes of whitespaces" in result.stdout
    assert "--fix" in result.stdout
    assert target.read_bytes() == b"<?php\necho 1;   \n"


def test_check_fix_rewrites_files(tmp_path: Path) -> None:
    target = tmp_path / "a.php"
    target.write_bytes(b"<?php\necho 1;   \n")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path), "--fix"])

    assert result.exit_code == 0
    assert "[FIX]" in result.stdout
    assert "Reported 1 fix(es)" in result.stdout
    assert "Fixed 1 file(s)" in result.stdout
    assert target.read_bytes() == b"<?php\necho 1;\n"


def test_check_warnings_are_summarised_without_failing(tmp_path: Path) -> None:
    (tmp_path / "a.php").write_text('<?php\n$a = "\\d";\n', encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path)])

    assert result.exit_code == 0
    assert "[WARNING]" in result.stdout
    assert "Reported 1 warning(s)" in result.stdout
    assert "1 warning(s) reported" in result.stdout


def test_check_short_arrays_option_rewrites_literals(tmp_path: Path) -> None:
    target = tmp_path / "a.php"
    target.write_text("<?php\n$a = array(1, 2);\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path), "--fix", "--short-arrays"])

    assert result.exit_code == 0
    assert "uses old array() syntax" in result.stdout
    assert target.read_text(encoding="utf-8") == "<?php\n$a = [1, 2];\n"


def test_check_ignore_option_excludes_files(tmp_path: Path) -> None:
    (tmp_path / "bad.php").write_bytes(b"<?php \n")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path), "-i", "bad.php"])

    assert result.exit_code == 0
    assert "Checked 0 file(s)" in result.stdout


def test_check_missing_path_exits_two(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path / "missing")])

    assert result.exit_code == 2
    assert "does not exist" in result.stdout


def test_check_unknown_skip_exits_two(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path), "--skip", "no_such_task"])

    assert result.exit_code == 2
    assert "Unknown task(s) to skip: no_such_task" in result.stdout


def test_check_invalid_config_exits_two(tmp_path: Path) -> None:
    (tmp_path / ".codechecker.toml").write_text("fix = 'maybe'\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["check", "-d", str(tmp_path)])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.stdout


def test_tasks_lists_pipeline_in_order(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["tasks", "-d", str(tmp_path), "--eol"])

    assert result.exit_code == 0
    output = result.stdout
    assert output.index("bom_fixer") < output.index("utf8_checker") < output.index("newline_normalizer")
    assert "!*.sh" in output
    assert "strict_types_declaration_checker" not in output


def test_no_arguments_shows_help() -> None:
    runner = CliRunner()

    result = runner.invoke(app, [])

    assert "check" in result.output
    assert "tasks" in result.output
