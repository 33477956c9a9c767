"""Which property names can be written without quotes."""

from __future__ import annotations

from typing import Final

__all__ = ("RESERVED_WORDS", "GLOBAL_PROPERTIES", "is_identifier")

RESERVED_WORDS: Final = frozenset(
    {
        "await",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
        # Strict mode
        "implements",
        "interface",
        "let",
        "package",
        "private",
        "protected",
        "public",
        "static",
        "arguments",
        "eval",
    }
)

GLOBAL_PROPERTIES: Final = frozenset(
    {"globalThis", "Infinity", "NaN", "undefined"}
)

_RESERVED: Final = RESERVED_WORDS | GLOBAL_PROPERTIES

# Longer strings are quoted without looking at them.
MAX_LENGTH: Final = 100_000

# Allowed in javascript identifiers but not in python ones.
_EXTRA_START: Final = frozenset("$")
_EXTRA_CONTINUE: Final = frozenset("$\u200c\u200d")


def _is_id_start(c: str) -> bool:
    return c in _EXTRA_START or c.isidentifier()


def _is_id_continue(c: str) -> bool:
    return c in _EXTRA_CONTINUE or ("_" + c).isidentifier()


def is_identifier(value: str) -> bool:
    """Can *value* be used as a bare property name?

    >>> is_identifier("$foo_1")
    True
    >>> is_identifier("foo-bar"), is_identifier("1a"), is_identifier("class")
    (False, False, False)

    Python and javascript mostly agree on what characters can go into an
    identifier (`UAX #31 <https://unicode.org/reports/tr31/>`_), javascript
    also allows ``$`` and the zero width joiners.

    Raises:
      TypeError: if *value* is not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got `{type(value).__name__}`.")
    if len(value) > MAX_LENGTH or not value or value in _RESERVED:
        return False
    first, rest = value[0], value[1:]
    return _is_id_start(first) and all(_is_id_continue(c) for c in rest)
