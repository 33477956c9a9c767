"""``stringify_object.layout``: Deferred whitespace for compound values
===================================================================

Compound values are rendered as a :class:`Doc`: a tree of plain text and four
layout tokens. The tokens stand in for the whitespace until the whole
rendering of the compound value is known. Only then do we decide whether it
fits on one line (the tokens collapse) or not (the tokens expand into newlines
and indentation)::

    >>> doc = text("[") + NEWLINE + INDENT + text("1") + text(",")
    >>> doc += NEWLINE_OR_SPACE + INDENT + text("2") + NEWLINE + PAD + text("]")
    >>> collapse(doc)
    '[1, 2]'
    >>> expand(doc, padding="", indent="  ")
    '[\\n  1,\\n  2\\n]'

The decision is purely local: the children of a compound value were already
resolved to text when their parent's document gets built.

"""

from __future__ import annotations

import dataclasses
import enum
import io
from typing import Iterable, Iterator, Mapping

__all__ = (
    "Doc",
    "Token",
    "EMPTY",
    "NEWLINE",
    "NEWLINE_OR_SPACE",
    "PAD",
    "INDENT",
    "text",
    "join",
    "collapse",
    "expand",
    "resolve",
)


class Token(enum.Enum):
    "Placeholders for the whitespace of a compound value"
    #: Removed when collapsed, a newline when expanded.
    NEWLINE = enum.auto()
    #: A space when collapsed, a newline when expanded.
    NEWLINE_OR_SPACE = enum.auto()
    #: The padding of the compound value itself (before its closing bracket)
    PAD = enum.auto()
    #: The padding of the children (one indent unit deeper than ``PAD``)
    INDENT = enum.auto()


# doc =
# | DocNil
# | DocCons of doc * doc
# | DocText of string
# | DocToken of token


class Doc:
    """Type used to represent documents

    This constructor should never be called directly

    Documents can be concatenated via the ``+`` operator.
    """

    def __add__(self, other: Doc) -> Doc:
        return DocCons(self, other)


@dataclasses.dataclass(slots=True)
class DocNil(Doc):
    pass


@dataclasses.dataclass(slots=True)
class DocCons(Doc):
    left: Doc
    right: Doc


@dataclasses.dataclass(slots=True)
class DocText(Doc):
    text: str


@dataclasses.dataclass(slots=True)
class DocToken(Doc):
    token: Token


#: The empty document
EMPTY: Doc = DocNil()

NEWLINE: Doc = DocToken(Token.NEWLINE)
NEWLINE_OR_SPACE: Doc = DocToken(Token.NEWLINE_OR_SPACE)
PAD: Doc = DocToken(Token.PAD)
INDENT: Doc = DocToken(Token.INDENT)

COLLAPSED: Mapping[Token, str] = {
    Token.NEWLINE: "",
    Token.NEWLINE_OR_SPACE: " ",
    Token.PAD: "",
    Token.INDENT: "",
}


def text(s: str) -> Doc:
    """
    Turns a string into a document

    Args:
      s(str)

    Returns:
      Doc:
    """
    return DocText(s)


def join(docs: Iterable[Doc], sep: Doc) -> Doc:
    """Concatenate *docs* with *sep* in between each of them.

    Args:
      docs(Iterable[Doc]):
      sep(Doc):

    Returns:
      Doc:
    """
    acc = EMPTY
    first = True
    for doc in docs:
        if not first:
            acc += sep
        else:
            first = False
        acc += doc
    return acc


def _walk(doc: Doc) -> Iterator[str | Token]:
    # Documents are built by folding to the left so they can be as deep as the
    # number of children: don't recurse.
    docs = [doc]
    while docs:
        match docs.pop():
            case DocNil():
                continue
            case DocText(s):
                yield s
            case DocToken(t):
                yield t
            case DocCons(left=l, right=r):
                docs.append(r)
                docs.append(l)
            case _:  # pragma: no cover
                assert False


def _render(doc: Doc, substitutions: Mapping[Token, str]) -> str:
    out = io.StringIO()
    for part in _walk(doc):
        if isinstance(part, Token):
            out.write(substitutions[part])
        else:
            out.write(part)
    return out.getvalue()


def collapse(doc: Doc) -> str:
    "Render *doc* on one line."
    return _render(doc, COLLAPSED)


def expand(doc: Doc, padding: str, indent: str) -> str:
    """Render *doc* on multiple lines.

    Args:
      doc(Doc):
      padding(str): The padding of the line the document starts on.
      indent(str): Added to *padding* for each child.
    """
    return _render(
        doc,
        {
            Token.NEWLINE: "\n",
            Token.NEWLINE_OR_SPACE: "\n",
            Token.PAD: padding,
            Token.INDENT: padding + indent,
        },
    )


def resolve(doc: Doc, padding: str, indent: str, limit: int | None) -> str:
    """Pick the layout of *doc*.

    If *limit* is ``None`` the document is always expanded. Otherwise it is
    collapsed if the collapsed text is at most *limit* characters long.

    >>> doc = text("[") + NEWLINE + INDENT + text("'a'") + NEWLINE + PAD
    >>> doc += text("]")
    >>> resolve(doc, padding="", indent="\\t", limit=5)
    "['a']"
    >>> resolve(doc, padding="", indent="\\t", limit=4)
    "[\\n\\t'a'\\n]"

    Args:
      doc(Doc):
      padding(str):
      indent(str):
      limit(int | None):

    Returns:
      str:
    """
    if limit is not None:
        one_line = collapse(doc)
        if len(one_line) <= limit:
            return one_line
    return expand(doc, padding=padding, indent=indent)
