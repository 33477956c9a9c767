from __future__ import annotations

import pytest

from stringify_object import Symbol, key_for, symbol_for, symbols


def test_unique():
    assert Symbol("a") is not Symbol("a")
    assert Symbol("a") != Symbol("a")
    s = Symbol("a")
    assert s == s
    assert {s: 1}[s] == 1


def test_description():
    assert Symbol().description is None
    assert Symbol("").description == ""
    assert Symbol(5).description == "5"
    assert repr(Symbol()) == "Symbol()"
    assert repr(Symbol("x")) == "Symbol('x')"


def test_description_is_read_only():
    with pytest.raises(AttributeError):
        Symbol.iterator.description = "Symbol.asyncIterator"
    assert Symbol.iterator.description == "Symbol.iterator"
    app = symbol_for("read-only")
    with pytest.raises(AttributeError):
        app.description = "other"
    assert key_for(app) == "read-only"


@pytest.mark.parametrize("name", symbols.WELL_KNOWN_NAMES)
def test_well_known(name):
    sym = getattr(Symbol, name)
    assert isinstance(sym, Symbol)
    assert sym.description == f"Symbol.{name}"
    assert symbols.well_known(name) is sym
    assert key_for(sym) is None


def test_not_well_known():
    assert symbols.well_known("nope") is None
    assert symbols.well_known("__init__") is None


def test_registry():
    app = symbol_for("registry-test")
    assert symbol_for("registry-test") is app
    assert app.description == "registry-test"
    assert key_for(app) == "registry-test"
    assert key_for(Symbol("registry-test")) is None
    assert key_for(Symbol()) is None
    # Keys are converted to strings
    assert symbol_for(42) is symbol_for("42")


def test_key_for_type_error():
    with pytest.raises(TypeError, match="is not a symbol"):
        key_for("registry-test")
