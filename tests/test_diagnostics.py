import io

from loxpy.diagnostics import (
    SCANNER_UNTERMINATED_STRING,
    Diagnostic,
    collect_diagnostics,
    emit_diagnostics,
    format_diagnostic,
    has_errors,
)


def test_format_diagnostic_without_location() -> None:
    diagnostic = Diagnostic(code="X", message="Unterminated string.", line=4)

    assert format_diagnostic(diagnostic) == "[line 4] Error: Unterminated string."


def test_format_diagnostic_with_location() -> None:
    diagnostic = Diagnostic(code="X", message="Expected expression.", line=1, where=" at '+'")

    assert format_diagnostic(diagnostic) == "[line 1] Error at '+': Expected expression."


def test_format_warning() -> None:
    diagnostic = Diagnostic(code="X", message="Odd.", line=2, severity="warning")

    assert format_diagnostic(diagnostic) == "[line 2] Warning: Odd."


def test_has_errors_ignores_warnings() -> None:
    warning = Diagnostic(code="W", message="w", line=1, severity="warning")
    error = Diagnostic(code="E", message="e", line=1)

    assert not has_errors([])
    assert not has_errors([warning])
    assert has_errors([warning, error])


def test_collect_diagnostics_preserves_order() -> None:
    a = Diagnostic(code="A", message="a", line=1)
    b = Diagnostic(code="B", message="b", line=2)
    c = Diagnostic(code="C", message="c", line=3)

    assert collect_diagnostics([a], [], [b, c]) == [a, b, c]


def test_emit_diagnostics_writes_one_line_each() -> None:
    stream = io.StringIO()
    diagnostics = [
        Diagnostic(code="A", message="first", line=1),
        Diagnostic(code="B", message="second", line=2, where=" at end"),
    ]

    count = emit_diagnostics(diagnostics, stream)

    assert count == 2
    assert stream.getvalue() == "[line 1] Error: first\n[line 2] Error at end: second\n"


def test_emit_diagnostics_defaults_to_stderr(capsys) -> None:
    emit_diagnostics([Diagnostic(code="A", message="boom", line=7)])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[line 7] Error: boom\n"


def test_diagnostic_spec_carries_hint_and_category() -> None:
    assert SCANNER_UNTERMINATED_STRING.code == "SCANNER_UNTERMINATED_STRING"
    assert SCANNER_UNTERMINATED_STRING.category == "scanner"
    assert SCANNER_UNTERMINATED_STRING.hint is not None
