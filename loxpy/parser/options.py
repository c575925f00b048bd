"""Grammar levels and parser configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class GrammarLevel(StrEnum):
    """Expression grammar profile, from the base ladder to the full one."""

    EQUALITY = "equality"  # expression -> equality
    COMMA = "comma"  # expression -> comma -> equality
    TERNARY = "ternary"  # expression -> comma -> ternary -> equality


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling which grammar extensions are recognised."""

    allow_comma_operator: bool = True
    allow_ternary_operator: bool = True

    @staticmethod
    def for_level(level: GrammarLevel) -> "ParserOptions":
        if level == GrammarLevel.EQUALITY:
            return ParserOptions(allow_comma_operator=False, allow_ternary_operator=False)
        if level == GrammarLevel.COMMA:
            return ParserOptions(allow_comma_operator=True, allow_ternary_operator=False)
        return ParserOptions(allow_comma_operator=True, allow_ternary_operator=True)


def resolve_options(
    options: ParserOptions | None,
    level: GrammarLevel | None,
) -> ParserOptions:
    if level is not None and options is not None:
        raise ValueError("Pass either options or level, not both")

    if options is not None:
        return options

    if level is not None:
        return ParserOptions.for_level(GrammarLevel(level))

    return ParserOptions()
