import pytest

from loxpy.ast import Binary, Conditional, Grouping, Literal, Unary
from loxpy.lexer import Token, TokenKind
from loxpy.parser import parse
from loxpy.printers import (
    AstPrinter,
    RPNPrinter,
    RPNTerm,
    format_literal,
    printer_for,
    render_terms,
)

from tests._shared_cases import PRECEDENCE_CASES, ExprCase, case_id

_PLUS = Token(TokenKind.PLUS, "+", None, 1)
_STAR = Token(TokenKind.STAR, "*", None, 1)
_MINUS = Token(TokenKind.MINUS, "-", None, 1)


@pytest.mark.parametrize("case", PRECEDENCE_CASES, ids=case_id)
def test_rpn_printer_cases(case: ExprCase) -> None:
    parsed = parse(case.source)

    assert parsed.root is not None
    assert RPNPrinter().print(parsed.root) == case.rpn


def test_ast_printer_on_hand_built_tree() -> None:
    tree = Binary(
        Unary(_MINUS, Literal(123.0)),
        _STAR,
        Grouping(Literal(45.67)),
    )

    assert AstPrinter().print(tree) == "(* (- 123) (group 45.67))"


def test_rpn_printer_on_hand_built_tree() -> None:
    tree = Binary(Literal(1.0), _PLUS, Binary(Literal(2.0), _STAR, Literal(3.0)))

    assert RPNPrinter().print(tree) == "1 2 3 * + "


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "nil"),
        (True, "true"),
        (False, "false"),
        (3.0, "3"),
        (2.5, "2.5"),
        ("hello", "hello"),
        ("", ""),
    ],
)
def test_literal_forms_in_both_printers(value: object, expected: str) -> None:
    node = Literal(value)  # type: ignore[arg-type]

    assert AstPrinter().print(node) == expected
    assert RPNPrinter().print(node) == expected


def test_format_literal_keeps_fraction() -> None:
    assert format_literal(0.5) == "0.5"
    assert format_literal(100.0) == "100"


def test_conditional_has_prefix_form_but_no_postfix_form() -> None:
    node = Conditional(Literal(True), Literal(1.0), Literal(2.0))

    assert AstPrinter().print(node) == "(?: true 1 2)"
    assert RPNPrinter().print(node) == ""


def test_printing_is_deterministic_and_leaves_tree_untouched() -> None:
    parsed = parse("(1 + 2) * -3, nil")
    assert parsed.root is not None
    before = parsed.root

    first = AstPrinter().print(parsed.root)
    second = AstPrinter().print(parsed.root)

    assert first == second == "(, (* (group (+ 1 2)) (- 3)) nil)"
    assert parsed.root == before


def test_printer_for_known_notations() -> None:
    assert isinstance(printer_for("ast"), AstPrinter)
    assert isinstance(printer_for("rpn"), RPNPrinter)


def test_printer_for_unknown_notation() -> None:
    with pytest.raises(ValueError, match="Unknown notation"):
        printer_for("infix")  # type: ignore[arg-type]


def test_render_terms_spacing() -> None:
    assert render_terms([]) == ""
    assert render_terms([RPNTerm("1")]) == "1"
    assert render_terms([RPNTerm("1"), RPNTerm("-", is_operator=True)]) == "1 - "
    assert (
        render_terms(
            [
                RPNTerm("1"),
                RPNTerm("2"),
                RPNTerm("+", is_operator=True),
                RPNTerm("3"),
                RPNTerm("*", is_operator=True),
            ]
        )
        == "1 2 + 3 * "
    )
