"""
``stringify_object.text``: Javascript literals
==============================================

Render python values as javascript source code::

    >>> print(stringify({'foo': 'bar', 'list': [1, 2.5, None]}, indent="  "))
    {
      foo: 'bar',
      list: [
        1,
        2.5,
        null
      ]
    }

Compound values are printed on one line if they fit in
*inline_character_limit* characters:

    >>> stringify(['a', {'b': True}], inline_character_limit=40)
    "['a', {b: true}]"

"""

from __future__ import annotations

import collections.abc
import contextlib
import dataclasses
import datetime
import enum
import logging
import pydoc
import re
import sys
import types
from typing import Any, Callable, Final, Iterable, Iterator, Mapping, TypeAlias

from . import _ipy_utils, _number, identifiers, layout, symbols, values

__all__ = (
    "stringify",
    "to_html",
    "quote",
    "classify",
    "Kind",
    "Options",
    "Stringifier",
    "DEFAULT",
    "COMPACT",
)

logger = logging.getLogger(__name__)

Key: TypeAlias = Any
TransformFunction: TypeAlias = Callable[[Any, Key, str], str]
FilterFunction: TypeAlias = Callable[[Any, Key], bool]

#: What we print instead of values that contain themselves.
CIRCULAR: Final = '"[Circular]"'

INVALID_DATE: Final = "new Date('Invalid Date')"

CHARACTER_ESCAPES: Final = {
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\b": r"\b",
    "\f": r"\f",
    "\v": r"\v",
    "\0": r"\0",
}

_CONTROL_CHARACTERS: Final = re.compile(r"[\x00-\x1f\x7f]")
_DIGITS: Final = frozenset("0123456789")

# A `/` preceded by an even number of backslashes
_UNESCAPED_SLASH: Final = re.compile(r"(?<!\\)((?:\\\\)*)/")
# Javascript line terminators can't appear raw in a regex literal.
_LINE_TERMINATORS: Final = str.maketrans(
    {"\n": "\\n", "\r": "\\r", "\u2028": "\\u2028", "\u2029": "\\u2029"}
)

REGEX_FLAGS: Final = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)


@dataclasses.dataclass(frozen=True, slots=True)
class Options:
    """How to render values.

    Args:
      indent(str): Added to the padding for each level of nesting (an empty
        string means a tab).
      single_quotes(bool): Quote strings with ``'`` rather than ``"``.
      inline_character_limit(int | None): Print compound values on one line
        if they fit in that many characters. ``None`` means they are always
        split over several lines.
      transform: Called as ``transform(owner, key, text)`` with the rendered
        text of every element of a list and every value of a dictionary. The
        return value replaces *text*.
      filter: Called as ``filter(owner, key)`` for every key of a
        dictionary. The keys for which it returns a falsy value are skipped.
    """

    indent: str = "\t"
    single_quotes: bool = True
    inline_character_limit: int | None = None
    transform: TransformFunction | None = None
    filter: FilterFunction | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str):
            raise TypeError(
                "indent should be a string, got "
                f"{pydoc.cram(repr(self.indent), 40)}"
            )
        limit = self.inline_character_limit
        if limit is not None:
            if not isinstance(limit, int) or isinstance(limit, bool):
                raise TypeError(
                    "inline_character_limit should be an int, got "
                    f"{pydoc.cram(repr(limit), 40)}"
                )
            if limit < 0:
                raise ValueError(
                    f"inline_character_limit should be positive, got {limit}"
                )
        for name in ("transform", "filter"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise TypeError(
                    f"{name} should be callable, got "
                    f"{pydoc.cram(repr(hook), 40)}"
                )

    def replace(self, **changes: Any) -> Options:
        "Get a copy of these options with some of the fields changed."
        return dataclasses.replace(self, **changes)


#: Tabs, single quotes and every compound value split over several lines.
DEFAULT: Final = Options()

#: Every value on one line.
COMPACT: Final = Options(inline_character_limit=sys.maxsize)


class Kind(enum.Enum):
    "What kind of javascript value a python value turns into."
    NULL = enum.auto()
    UNDEFINED = enum.auto()
    BOOLEAN = enum.auto()
    NUMBER = enum.auto()
    BIGINT = enum.auto()
    CALLABLE = enum.auto()
    PATTERN = enum.auto()
    SYMBOL = enum.auto()
    DATE = enum.auto()
    MAP = enum.auto()
    SET = enum.auto()
    ARRAY = enum.auto()
    RECORD = enum.auto()
    TEXT = enum.auto()


def classify(value: Any) -> Kind:
    """Find out how *value* should be rendered.

    The checks go from the most specific type to the least specific one
    (e.g.: :class:`bool` is a subclass of :class:`int` and
    :class:`~stringify_object.values.Map` is a subclass of :class:`dict`).

    >>> classify(True), classify(1), classify(2**60)
    (<Kind.BOOLEAN: 3>, <Kind.NUMBER: 4>, <Kind.BIGINT: 5>)
    >>> classify(values.Map()), classify({})
    (<Kind.MAP: 10>, <Kind.RECORD: 13>)
    """
    if value is None:
        return Kind.NULL
    if value is values.UNDEFINED:
        return Kind.UNDEFINED
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, values.BigInt):
        return Kind.BIGINT
    if isinstance(value, int):
        if _number.is_safe_integer(value):
            return Kind.NUMBER
        return Kind.BIGINT
    if isinstance(value, float):
        return Kind.NUMBER
    if isinstance(value, re.Pattern):
        return Kind.PATTERN
    if callable(value):
        return Kind.CALLABLE
    if isinstance(value, symbols.Symbol):
        return Kind.SYMBOL
    if isinstance(value, values.Date | datetime.date):
        return Kind.DATE
    if isinstance(value, values.Map) or (
        isinstance(value, collections.abc.Mapping)
        and not isinstance(value, dict)
    ):
        return Kind.MAP
    if isinstance(value, set | frozenset):
        return Kind.SET
    if isinstance(value, list | tuple):
        return Kind.ARRAY
    if isinstance(value, dict | types.SimpleNamespace):
        return Kind.RECORD
    return Kind.TEXT


def _escape_control(match: re.Match[str]) -> str:
    c = match.group()
    # `\0` followed by a digit would read as an octal escape
    if c == "\0" and match.string[match.end() : match.end() + 1] in _DIGITS:
        return "\\u0000"
    escape = CHARACTER_ESCAPES.get(c)
    if escape is None:
        return f"\\u{ord(c):04x}"
    return escape


def quote(s: str, single_quotes: bool = True) -> str:
    r"""Turn *s* into a javascript string literal.

    >>> print(quote("it's\n"))
    'it\'s\n'
    >>> print(quote('say "hi"\x07', single_quotes=False))
    "say \"hi\"\u0007"
    """
    escaped = _CONTROL_CHARACTERS.sub(_escape_control, s.replace("\\", "\\\\"))
    if single_quotes:
        return "'" + escaped.replace("'", "\\'") + "'"
    return '"' + escaped.replace('"', '\\"') + '"'


def property_name(key: Any) -> str:
    """The name of the property a dictionary key turns into.

    >>> property_name(1.0), property_name(None), property_name(False)
    ('1', 'null', 'false')
    """
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if key is values.UNDEFINED:
        return "undefined"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int | float):
        return _number.format_number(key)
    return str(key)


def own_keys(fields: Mapping[Any, Any]) -> list[Any]:
    "All the keys of *fields* with the symbols moved at the end."
    keys = [key for key in fields if not isinstance(key, symbols.Symbol)]
    keys.extend(key for key in fields if isinstance(key, symbols.Symbol))
    return keys


def format_pattern(pattern: re.Pattern[Any]) -> str:
    r"""
    >>> print(format_pattern(re.compile("a/b+", re.I | re.M)))
    /a\/b+/im
    """
    source = pattern.pattern
    if isinstance(source, bytes):
        source = source.decode("latin-1")
    if not source:
        source = "(?:)"
    source = _UNESCAPED_SLASH.sub(r"\1\\/", source)
    source = source.translate(_LINE_TERMINATORS)
    flags = "".join(flag for bit, flag in REGEX_FLAGS if pattern.flags & bit)
    return f"/{source}/{flags}"


def format_date(value: values.Date | datetime.date) -> str:
    if isinstance(value, values.Date):
        date = value
    else:
        date = values.Date.from_datetime(value)
    if not date.is_valid:
        return INVALID_DATE
    return f"new Date('{date.isoformat()}')"


SEPARATOR: Final = layout.text(",") + layout.NEWLINE_OR_SPACE


def block(opening: str, items: Iterable[str], closing: str) -> layout.Doc:
    "Lay out *items* between two brackets."
    body = layout.join(
        (layout.INDENT + layout.text(item) for item in items), SEPARATOR
    )
    return (
        layout.text(opening)
        + layout.NEWLINE
        + body
        + layout.NEWLINE
        + layout.PAD
        + layout.text(closing)
    )


class Stringifier:
    """Render values as javascript literals.

    A stringifier keeps track of the compound values that are being rendered
    (to detect circular references), an instance should only be used for one
    top-level value at a time.
    """

    options: Options
    indent: str
    seen: list[Any]

    def __init__(self, options: Options = DEFAULT) -> None:
        self.options = options
        self.indent = options.indent or "\t"
        self.seen = []

    @contextlib.contextmanager
    def visiting(self, value: Any) -> Iterator[None]:
        self.seen.append(value)
        try:
            yield
        finally:
            popped = self.seen.pop()
            assert popped is value

    def is_visiting(self, value: Any) -> bool:
        return any(value is elt for elt in self.seen)

    def resolve(self, doc: layout.Doc, padding: str) -> str:
        return layout.resolve(
            doc,
            padding=padding,
            indent=self.indent,
            limit=self.options.inline_character_limit,
        )

    def stringify(self, value: Any, padding: str = "") -> str:
        if self.is_visiting(value):
            logger.debug(
                "Circular reference to a %s value", type(value).__name__
            )
            return CIRCULAR
        match classify(value):
            case Kind.NULL:
                return "null"
            case Kind.UNDEFINED:
                return "undefined"
            case Kind.BOOLEAN:
                return "true" if value else "false"
            case Kind.NUMBER:
                return _number.format_number(value)
            case Kind.BIGINT:
                return f"{_number.format_integer(value)}n"
            case Kind.CALLABLE:
                return str(value)
            case Kind.PATTERN:
                return format_pattern(value)
            case Kind.SYMBOL:
                return self.format_symbol(value)
            case Kind.DATE:
                return format_date(value)
            case Kind.MAP:
                return self.format_map(value, padding)
            case Kind.SET:
                return self.format_set(value, padding)
            case Kind.ARRAY:
                return self.format_array(value, padding)
            case Kind.RECORD:
                return self.format_record(value, padding)
            case Kind.TEXT:
                return self.format_text(value)
        assert False, value  # pragma: no cover

    def format_text(self, value: Any) -> str:
        if not isinstance(value, str):
            logger.debug("Rendering a %s as a string", type(value).__name__)
        return quote(str(value), single_quotes=self.options.single_quotes)

    def format_symbol(self, sym: symbols.Symbol) -> str:
        description = sym.description
        if description is None:
            return "Symbol()"
        if description.startswith("Symbol."):
            if symbols.well_known(description[len("Symbol.") :]) is sym:
                return description
        key = symbols.key_for(sym)
        if key is not None:
            return f"Symbol.for({self.stringify(key)})"
        return f"Symbol({self.stringify(description)})"

    def format_map(self, value: Mapping[Any, Any], padding: str) -> str:
        if not value:
            return "new Map()"
        child = padding + self.indent
        with self.visiting(value):
            entries = [
                f"[{self.stringify(k, child)}, {self.stringify(v, child)}]"
                for k, v in value.items()
            ]
        return self.resolve(block("new Map([", entries, "])"), padding)

    def format_set(self, value: collections.abc.Set[Any], padding: str) -> str:
        if not value:
            return "new Set()"
        child = padding + self.indent
        with self.visiting(value):
            entries = [self.stringify(elt, child) for elt in value]
        return self.resolve(block("new Set([", entries, "])"), padding)

    def format_array(
        self, value: list[Any] | tuple[Any, ...], padding: str
    ) -> str:
        if not value:
            return "[]"
        child = padding + self.indent
        transform = self.options.transform
        items = []
        with self.visiting(value):
            for index, element in enumerate(value):
                rendered = self.stringify(element, child)
                if transform is not None:
                    rendered = transform(value, index, rendered)
                items.append(rendered)
        return self.resolve(block("[", items, "]"), padding)

    def format_key(self, key: Any) -> str:
        if isinstance(key, symbols.Symbol):
            return f"[{self.stringify(key)}]"
        name = property_name(key)
        if identifiers.is_identifier(name):
            return name
        return self.format_text(name)

    def format_record(
        self, value: dict[Any, Any] | types.SimpleNamespace, padding: str
    ) -> str:
        if isinstance(value, types.SimpleNamespace):
            fields = vars(value)
        else:
            fields = value
        keys = own_keys(fields)
        keep = self.options.filter
        if keep is not None:
            keys = [key for key in keys if keep(value, key)]
        if not keys:
            return "{}"
        child = padding + self.indent
        transform = self.options.transform
        pairs = []
        with self.visiting(value):
            for key in keys:
                name = self.format_key(key)
                rendered = self.stringify(fields[key], child)
                if transform is not None:
                    rendered = transform(value, key, rendered)
                pairs.append(f"{name}: {rendered}")
        return self.resolve(block("{", pairs, "}"), padding)


def stringify(
    value: Any, options: Options | None = None, pad: str = "", **kwargs: Any
) -> str:
    """Render *value* as a javascript literal.

    Args:
      value: The value to render.
      options(Options | None): Defaults to :data:`DEFAULT`.
      pad(str): Padding of the line the value starts on. It is used to
        indent the lines after the first one.
      **kwargs: Override individual fields of *options* (e.g.:
        ``stringify(v, indent="  ")``).

    Returns:
      str:
    """
    if options is None:
        options = DEFAULT
    if kwargs:
        options = options.replace(**kwargs)
    return Stringifier(options).stringify(value, pad)


def to_html(
    value: Any,
    options: Options | None = None,
    pad: str = "",
    *,
    inline: bool = False,
    **kwargs: Any,
) -> str:
    """Render *value* and syntax highlight the result as html.

    The css for the highlighting is returned by
    :func:`~stringify_object.get_highlight_style`. With *inline* the result is
    meant to be embedded in a line of text: it is cut in the middle if it is
    too long.
    """
    rendered = stringify(value, options, pad, **kwargs)
    if inline:
        return _ipy_utils.summarize(rendered)
    return _ipy_utils.highlight(rendered)
