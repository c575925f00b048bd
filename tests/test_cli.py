import io
from pathlib import Path

import pytest

from loxpy.cli import EX_DATAERR, EX_NOINPUT, EX_USAGE, build_arg_parser, main, run_prompt, run_source


def _write(tmp_path: Path, source: str) -> Path:
    path = tmp_path / "script.lox"
    path.write_text(source, encoding="utf-8")
    return path


def test_script_prints_prefix_tree(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "1 + 2 * 3\n")

    assert main([str(path)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "(+ 1 (* 2 3))\n"
    assert captured.err == ""


def test_script_prints_rpn(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "1 + 2 * 3")

    assert main([str(path), "--printer", "rpn"]) == 0

    assert capsys.readouterr().out == "1 2 3 * + \n"


def test_script_with_errors_exits_65(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "1 +")

    assert main([str(path)]) == EX_DATAERR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[line 1] Error at end: Expected expression.\n"


def test_script_with_lexical_error_exits_65(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "1 @ 2")

    assert main([str(path)]) == EX_DATAERR

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[line 1] Error: Unexpected character: @.\n"


def test_missing_script_exits_66(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.lox")]) == EX_NOINPUT

    assert "Could not read" in capsys.readouterr().err


def test_non_utf8_script_exits_66(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "binary.lox"
    path.write_bytes(b"1 + \xff 2")

    assert main([str(path)]) == EX_NOINPUT

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Could not read" in captured.err
    assert "not valid UTF-8" in captured.err


def test_too_many_arguments_exits_64(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["a.lox", "b.lox"]) == EX_USAGE

    assert capsys.readouterr().out == "Usage: loxpy [script]\n"


def test_tokens_flag_dumps_token_rows(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "1 +\n2")

    assert main([str(path), "--tokens"]) == 0

    assert capsys.readouterr().out == "1: [NUMBER 1 1.0][PLUS + null]\n2: [NUMBER 2 2.0][EOF  null]\n"


def test_level_flag_limits_grammar(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, "1, 2")

    assert main([str(path), "--level", "equality"]) == 0

    assert capsys.readouterr().out == "1\n"


def test_prompt_treats_each_line_as_fresh_unit() -> None:
    stdin = io.StringIO("1 + 2\n(\n3\n")
    out = io.StringIO()
    err = io.StringIO()

    assert run_prompt(stdin=stdin, out=out, err=err) == 0

    assert out.getvalue() == "> (+ 1 2)\n> > 3\n> \n"
    assert err.getvalue() == "[line 1] Error at end: Expected expression.\n"


def test_prompt_from_main_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("-1\n"))

    assert main([]) == 0

    assert capsys.readouterr().out == "> (- 1)\n> \n"


def test_run_source_reports_error_flag() -> None:
    out = io.StringIO()
    err = io.StringIO()

    assert run_source("(1", out=out, err=err)
    assert not run_source("(1)", out=out, err=err)
    assert out.getvalue() == "(group 1)\n"
    assert err.getvalue() == "[line 1] Error at end: Expected ')' after expression.\n"


def test_arg_parser_rejects_unknown_printer() -> None:
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["--printer", "infix"])
