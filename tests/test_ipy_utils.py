from __future__ import annotations

from stringify_object import _ipy_utils, get_highlight_style, highlight


def test_highlight():
    html = highlight("{a: 'b'}")
    assert 'class="stringify-object-highlight"' in html
    assert "<pre>" in html
    # Strings get their own token class
    assert 'class="s1"' in html


def test_highlight_inline():
    html = highlight("[1, 2]", inline=True)
    assert '<span class="stringify-object-highlight"' in html
    assert "<pre>" not in html


def test_style():
    css = get_highlight_style()
    assert ".stringify-object-highlight" in css
    assert get_highlight_style() is css


def test_summarize():
    short = _ipy_utils.summarize("[1, 2]")
    assert '<span class="stringify-object-highlight"' in short
    long = _ipy_utils.summarize("'" + "x" * 200 + "<'")
    assert long.startswith("<tt>&#x27;xxx")
    assert long.endswith("x&lt;&#x27;</tt>")
    assert "..." in long
    assert len(long) < 200
