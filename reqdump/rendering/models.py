"""Value objects consumed by the table renderers."""

from __future__ import annotations

import builtins
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Optional, Tuple

from reqdump.common.exceptions import RenderContractError

DEFAULT_CHUNK_LIMIT = 100
NULL_TEXT = '(null)'
NO_TYPE_TEXT = '(n/a)'
_LINE_BREAKS = str.maketrans({'\r': '\\r', '\n': '\\n'})


def single_line(text: str) -> str:
    """Escape CR and LF so a cell never spans more than its own physical line."""
    return text.translate(_LINE_BREAKS)


def type_label_of(value: Any) -> str:
    """Return the runtime type name shown in the object table."""
    if value is None:
        return NO_TYPE_TEXT
    cls = type(value)
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f'{cls.__module__}.{cls.__qualname__}'


def display_text_of(value: Any) -> str:
    """Return the textual form of a value; sequences are shown element by element."""
    if value is None:
        return NULL_TEXT
    if isinstance(value, (list, tuple)):
        return single_line('[' + ', '.join(str(item) for item in value) + ']')
    return single_line(str(value))


@dataclass(frozen=True)
class DescribedValue:
    """A raw value paired with its type label and display text."""

    type_label: str
    display_text: str

    @classmethod
    def of(cls, value: Any) -> DescribedValue:
        return cls(type_label=type_label_of(value), display_text=display_text_of(value))


@dataclass(frozen=True)
class Entry:
    """One table row.

    ``value`` carries the text for string tables. ``raw_value`` carries the
    raw object for object tables and is described lazily.
    """

    name: str
    value: Optional[str] = None
    raw_value: Any = None

    @property
    def text(self) -> str:
        return NULL_TEXT if self.value is None else single_line(self.value)

    @cached_property
    def described(self) -> DescribedValue:
        return DescribedValue.of(self.raw_value)


@dataclass(frozen=True)
class Table:
    """Title, wrap limit and ordered entries for one rendered box."""

    title: str
    chunk_limit: int = DEFAULT_CHUNK_LIMIT
    entries: Tuple[Entry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.title is None:
            raise RenderContractError('Table title must not be None')
        if isinstance(self.chunk_limit, bool) or not isinstance(self.chunk_limit, int) or self.chunk_limit < 1:
            raise RenderContractError(f'chunk_limit must be a positive integer, got {self.chunk_limit!r}')
        object.__setattr__(self, 'title', single_line(self.title))
        object.__setattr__(self, 'entries', tuple(self.entries))

    @classmethod
    def of_strings(cls, title: str, values: Mapping[str, Optional[str]] | Iterable[Tuple[str, Optional[str]]], chunk_limit: int = DEFAULT_CHUNK_LIMIT) -> Table:
        """Build a string table, replacing ``None`` values with ``(null)``."""
        items = values.items() if isinstance(values, Mapping) else values
        entries = tuple(Entry(name=single_line(str(name)), value=NULL_TEXT if value is None else single_line(str(value))) for name, value in items)
        return cls(title=title, chunk_limit=chunk_limit, entries=entries)

    @classmethod
    def of_objects(cls, title: str, values: Mapping[str, Any] | Iterable[Tuple[str, Any]], chunk_limit: int = DEFAULT_CHUNK_LIMIT) -> Table:
        """Build an object table; each value is kept raw for type description."""
        items = values.items() if isinstance(values, Mapping) else values
        entries = tuple(Entry(name=single_line(str(name)), raw_value=value) for name, value in items)
        return cls(title=title, chunk_limit=chunk_limit, entries=entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries
