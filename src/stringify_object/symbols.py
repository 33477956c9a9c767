"""
``stringify_object.symbols``: javascript symbols
===============================================

Every :class:`Symbol` is unique: two symbols with the same description are
still different values. Symbols can be used as keys of dictionaries, they then
become computed property names::

    >>> from stringify_object import stringify
    >>> print(stringify({Symbol("tag"): 1}, indent="  "))
    {
      [Symbol('tag')]: 1
    }

The well-known symbols are available as attributes of :class:`Symbol`:

    >>> Symbol.iterator
    Symbol('Symbol.iterator')

"""

from __future__ import annotations

import typing
from typing import Final

__all__ = ("Symbol", "symbol_for", "key_for", "well_known")


class Symbol:
    """A unique value with an optional description.

    Symbols compare (and hash) by identity.
    """

    __slots__ = ("_description",)

    # Well-known symbols, filled in below.
    asyncIterator: typing.ClassVar[Symbol]
    hasInstance: typing.ClassVar[Symbol]
    isConcatSpreadable: typing.ClassVar[Symbol]
    iterator: typing.ClassVar[Symbol]
    match: typing.ClassVar[Symbol]
    matchAll: typing.ClassVar[Symbol]
    replace: typing.ClassVar[Symbol]
    search: typing.ClassVar[Symbol]
    species: typing.ClassVar[Symbol]
    split: typing.ClassVar[Symbol]
    toPrimitive: typing.ClassVar[Symbol]
    toStringTag: typing.ClassVar[Symbol]
    unscopables: typing.ClassVar[Symbol]

    def __init__(self, description: object = None) -> None:
        self._description = None if description is None else str(description)

    @property
    def description(self) -> str | None:
        return self._description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


WELL_KNOWN_NAMES: Final = (
    "asyncIterator",
    "hasInstance",
    "isConcatSpreadable",
    "iterator",
    "match",
    "matchAll",
    "replace",
    "search",
    "species",
    "split",
    "toPrimitive",
    "toStringTag",
    "unscopables",
)

_WELL_KNOWN: Final[dict[str, Symbol]] = {}

for _name in WELL_KNOWN_NAMES:
    _WELL_KNOWN[_name] = Symbol(f"Symbol.{_name}")
    setattr(Symbol, _name, _WELL_KNOWN[_name])

del _name


def well_known(name: str) -> Symbol | None:
    """Get the well-known symbol called *name* (e.g. ``"iterator"``)

    >>> well_known("iterator") is Symbol.iterator
    True
    >>> well_known("description") is None
    True
    """
    return _WELL_KNOWN.get(name)


# The global symbol registry. Registered symbols live as long as the process,
# like they do in javascript.
_REGISTRY: dict[str, Symbol] = {}


def symbol_for(key: object) -> Symbol:
    """Javascript's ``Symbol.for``: get the symbol registered under *key*.

    The symbol is created (and registered) the first time the key is used.

    >>> symbol_for("app") is symbol_for("app")
    True
    """
    key = str(key)
    sym = _REGISTRY.get(key)
    if sym is None:
        sym = _REGISTRY[key] = Symbol(key)
    return sym


def key_for(sym: Symbol) -> str | None:
    """Javascript's ``Symbol.keyFor``: the registry key of *sym*, if any.

    >>> key_for(symbol_for("app"))
    'app'
    >>> key_for(Symbol("app")) is None
    True
    """
    if not isinstance(sym, Symbol):
        raise TypeError(f"{sym!r} is not a symbol")
    key = sym.description
    if key is not None and _REGISTRY.get(key) is sym:
        return key
    return None
