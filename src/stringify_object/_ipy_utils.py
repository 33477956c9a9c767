from __future__ import annotations

import functools
import html
from typing import Any, Iterable, Iterator

import pygments
import pygments.formatters
import pygments.lexers

CSS_CLASS = "stringify-object-highlight"


@functools.lru_cache()
def get_highlight_style() -> str:
    "The css rules used by the output of :func:`highlight`"
    formatter = pygments.formatters.HtmlFormatter(cssclass=CSS_CLASS)
    styles: str = formatter.get_style_defs(f".{CSS_CLASS}")
    return styles


class InlineHtmlFormatter(
    pygments.formatters.HtmlFormatter  # type: ignore[type-arg]
):
    def wrap(
        self, source: Iterable[tuple[int, str]], *args: Any, **kwargs: Any
    ) -> Iterator[tuple[int, str]]:
        yield 0, (
            f'<span class="{self.cssclass}" '
            'style="background-color: transparent"><tt>'
        )
        yield from source
        yield 0, "</tt></span>"


def highlight(code: str, inline: bool = False) -> str:
    """Syntax highlight javascript *code* as html.

    Args:
      code(str):
      inline(bool): Wrap in a ``<span>`` instead of a ``<div>``.
    """
    lexer = pygments.lexers.JavascriptLexer()
    format_cls = (
        pygments.formatters.HtmlFormatter if not inline else InlineHtmlFormatter
    )
    formatter = format_cls(cssclass=CSS_CLASS)
    res: str = pygments.highlight(code, lexer, formatter)
    return res


LINE_LEN = 120


def summarize(rep: str) -> str:
    "Highlight *rep* inline, or cut it in the middle if it's too long."
    if len(rep) > LINE_LEN:
        trim_size = LINE_LEN // 2 - 2
        cnt = f"{rep[:trim_size]}...{rep[-trim_size:]}"
        return f"<tt>{html.escape(cnt)}</tt>"
    return highlight(rep, inline=True)
