import json
from pathlib import Path

import pytest

from supersql.cli import EXIT_FINDINGS, EXIT_IO_ERROR, EXIT_OK, main
from supersql.migrate import MIGRATION_RULES


def _write_query(tmp_path: Path, text: str, name: str = "query.spq") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_format_prints_formatted_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_query(tmp_path, "from   test  |   count()")

    assert main(["format", str(path)]) == EXIT_OK

    assert capsys.readouterr().out == "from test\n| count()"
    assert path.read_text(encoding="utf-8") == "from   test  |   count()"


def test_format_check_reports_unformatted_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    messy = _write_query(tmp_path, "from   test", "messy.spq")
    clean = _write_query(tmp_path, "from test", "clean.spq")

    assert main(["format", "--check", str(messy), str(clean)]) == EXIT_FINDINGS

    out = capsys.readouterr().out
    assert f"would reformat {messy}" in out
    assert str(clean) not in out


def test_format_write_rewrites_in_place(tmp_path: Path) -> None:
    path = _write_query(tmp_path, "(\nx\n)")

    assert main(["format", "--write", "--tabs", "--final-newline", str(path)]) == EXIT_OK

    assert path.read_text(encoding="utf-8") == "(\n\tx\n)\n"


def test_format_rejects_negative_indent(tmp_path: Path) -> None:
    path = _write_query(tmp_path, "x")

    with pytest.raises(SystemExit):
        main(["format", "--indent-width", "-1", str(path)])


def test_check_prints_one_line_per_diagnostic(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_query(tmp_path, "values 1\ncrop(x) | yield y\n")

    assert main(["check", str(path)]) == EXIT_FINDINGS

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"{path}:2:1: error [removed-crop] {MIGRATION_RULES[12].message}",
        f"{path}:2:11: warning [deprecated-yield] {MIGRATION_RULES[0].message}",
    ]


def test_check_warnings_only_exit_ok(tmp_path: Path) -> None:
    path = _write_query(tmp_path, "yield x")

    assert main(["check", str(path)]) == EXIT_OK


def test_check_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_query(tmp_path, "yield x")

    main(["check", "--json", str(path)])

    report = json.loads(capsys.readouterr().out)
    assert report[0]["path"] == str(path)
    assert report[0]["diagnostics"][0]["code"] == "deprecated-yield"
    assert report[0]["diagnostics"][0]["range"]["end"] == {"line": 0, "character": 5}


def test_fix_write_applies_fixes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_query(tmp_path, "yield x\n| crop(y)\n")

    assert main(["fix", "--write", str(path)]) == EXIT_FINDINGS

    assert path.read_text(encoding="utf-8") == "values x\n| crop(y)\n"
    assert "[removed-crop]" in capsys.readouterr().err


def test_fix_prints_to_stdout_without_write(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_query(tmp_path, "func f")

    assert main(["fix", str(path)]) == EXIT_OK

    assert capsys.readouterr().out == "fn f"
    assert path.read_text(encoding="utf-8") == "func f"


def test_missing_file_is_an_io_error(tmp_path: Path) -> None:
    assert main(["check", str(tmp_path / "missing.spq")]) == EXIT_IO_ERROR


def test_rules_lists_every_rule(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rules"]) == EXIT_OK

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(MIGRATION_RULES)
    assert lines[0].split()[:2] == ["deprecated-yield", "warning"]
    assert any("(no automatic fix)" in line for line in lines)
