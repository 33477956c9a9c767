"""Render python values as javascript literals"""
from __future__ import annotations

from importlib import metadata

from ._ipy_utils import get_highlight_style, highlight
from .identifiers import is_identifier
from .symbols import Symbol, key_for, symbol_for
from .text import COMPACT, DEFAULT, Options, Stringifier, stringify, to_html
from .values import UNDEFINED, BigInt, Date, Map

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version("stringify-object")

__all__ = (
    "BigInt",
    "Date",
    "Map",
    "Options",
    "Stringifier",
    "Symbol",
    "UNDEFINED",
    "COMPACT",
    "DEFAULT",
    "get_highlight_style",
    "highlight",
    "is_identifier",
    "key_for",
    "stringify",
    "symbol_for",
    "to_html",
)
