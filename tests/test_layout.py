from __future__ import annotations

from stringify_object import layout


def mk_list(items, closing="]"):
    body = layout.join(
        (layout.INDENT + layout.text(i) for i in items),
        layout.text(",") + layout.NEWLINE_OR_SPACE,
    )
    return (
        layout.text("[")
        + layout.NEWLINE
        + body
        + layout.NEWLINE
        + layout.PAD
        + layout.text(closing)
    )


L3 = """\
[
    0,
    1,
    2
  ]\
"""


def test_collapse():
    assert layout.collapse(mk_list(["0", "1", "2"])) == "[0, 1, 2]"
    assert layout.collapse(layout.EMPTY) == ""
    assert layout.collapse(layout.text("a") + layout.EMPTY) == "a"


def test_expand():
    doc = mk_list(["0", "1", "2"])
    assert layout.expand(doc, padding="  ", indent="  ") == L3
    assert layout.expand(doc, padding="", indent="\t") == (
        "[\n\t0,\n\t1,\n\t2\n]"
    )


def test_join():
    sep = layout.text("|")
    assert layout.collapse(layout.join([], sep)) == ""
    assert layout.collapse(layout.join([layout.text("a")], sep)) == "a"
    abc = [layout.text(c) for c in "abc"]
    assert layout.collapse(layout.join(abc, sep)) == "a|b|c"


def test_resolve():
    doc = mk_list(["0", "1", "2"])
    assert layout.resolve(doc, padding="", indent="\t", limit=None) == (
        "[\n\t0,\n\t1,\n\t2\n]"
    )
    assert layout.resolve(doc, padding="", indent="\t", limit=9) == "[0, 1, 2]"
    assert layout.resolve(doc, padding="", indent="\t", limit=8) == (
        "[\n\t0,\n\t1,\n\t2\n]"
    )


def test_text_is_not_interpreted():
    # Text that looks like whitespace or like another token stays as is.
    doc = mk_list(["'\\n'", "Token.PAD"])
    assert layout.collapse(doc) == "['\\n', Token.PAD]"
    assert layout.expand(doc, padding="", indent=" ") == (
        "[\n '\\n',\n Token.PAD\n]"
    )


def test_deep_documents():
    # Documents are folded to the left: one level per child
    items = [str(i) for i in range(10_000)]
    doc = mk_list(items)
    assert layout.collapse(doc) == "[" + ", ".join(items) + "]"
