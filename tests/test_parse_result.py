from loxpy.lexer import TokenKind
from loxpy.parser import GrammarLevel, ParserOptions, parse_result
from loxpy.pipeline import ExpressionParseResult


def test_parse_result_exposes_tree_tokens_and_diagnostics() -> None:
    result = parse_result("1 + 2")

    assert isinstance(result, ExpressionParseResult)
    assert result.source_text == "1 + 2"
    assert result.ast_root() is result.parsed.root
    assert [t.kind for t in result.tokens] == [
        TokenKind.NUMBER,
        TokenKind.PLUS,
        TokenKind.NUMBER,
        TokenKind.EOF,
    ]
    assert result.diagnostics == []
    assert not result.has_errors
    assert result.options == ParserOptions()


def test_parse_result_records_resolved_level_options() -> None:
    result = parse_result("1, 2", level=GrammarLevel.EQUALITY)

    assert result.options == ParserOptions.for_level(GrammarLevel.EQUALITY)
    assert result.prefix() == "1"


def test_parse_result_renderings_are_cached() -> None:
    result = parse_result("1 + 2 * 3")

    first = result.prefix()
    second = result.prefix()

    assert first == "(+ 1 (* 2 3))"
    assert first is second
    assert result.rpn() == "1 2 3 * + "
    assert result.render("ast") is first


def test_parse_result_without_tree_renders_none() -> None:
    result = parse_result("1 +")

    assert result.has_errors
    assert result.ast_root() is None
    assert result.prefix() is None
    assert result.rpn() is None


def test_each_parse_result_has_its_own_error_state() -> None:
    failed = parse_result("(")
    clean = parse_result("1")

    assert failed.has_errors
    assert not clean.has_errors
    assert clean.diagnostics == []
