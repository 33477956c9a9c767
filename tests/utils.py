from __future__ import annotations

import dataclasses
from typing import Any

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def unquote(literal: str) -> str:
    """Decode a javascript string literal.

    Only handles the escapes that :func:`stringify_object.text.quote` emits.

    >>> unquote(r"'it\\'s\\u0007'")
    "it's\\x07"
    """
    quote, body = literal[0], literal[1:-1]
    assert quote in "'\"" and literal[-1] == quote, literal
    out = []
    chars = iter(body)
    for c in chars:
        assert c != quote, f"Unescaped quote in {literal!r}"
        if c != "\\":
            out.append(c)
            continue
        e = next(chars)
        if e == "u":
            out.append(chr(int("".join(next(chars) for _ in range(4)), 16)))
        else:
            out.append(_ESCAPES[e])
    return "".join(out)


@dataclasses.dataclass
class Recorder:
    """A hook that records how it was called"""

    result: Any = None
    calls: list[tuple[Any, ...]] = dataclasses.field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if callable(self.result):
            return self.result(*args)
        return self.result


class Boom:
    "A value that cannot be rendered"

    def __str__(self) -> str:
        raise AssertionError("Boom was rendered")
