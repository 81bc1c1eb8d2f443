"""Column width resolution for dump tables."""

from dataclasses import dataclass

from .models import Table


@dataclass(frozen=True)
class ColumnWidths:
    """Widths of a string table; ``total`` excludes the two outer borders."""

    name: int
    value: int
    total: int


@dataclass(frozen=True)
class ObjectColumnWidths:
    """Widths of an object table; value lines span ``total``."""

    name: int
    type: int
    total: int


def _clamped_max(current: int, length: int, limit: int) -> int:
    # An over-limit value pins the width to the limit, even below an earlier maximum.
    if length <= limit and length > current:
        return length
    if length > limit:
        return limit
    return current


def resolve_string_widths(table: Table) -> ColumnWidths:
    """Compute name/value widths so the box fits both the title and the widest value chunk."""
    title_len = len(table.title)
    if table.is_empty:
        return ColumnWidths(name=0, value=0, total=title_len)

    name_width = 0
    value_width = 0
    for entry in table.entries:
        name_width = max(name_width, len(entry.name))
        value_width = _clamped_max(value_width, len(entry.text), table.chunk_limit)

    if name_width + value_width + 1 > title_len:
        total = name_width + value_width + 1
    else:
        total = title_len
        value_width = total - (name_width + 1)
    return ColumnWidths(name=name_width, value=value_width, total=total)


def resolve_object_widths(table: Table) -> ObjectColumnWidths:
    """Compute name/type widths and the full-width value column of an object table."""
    title_len = len(table.title)
    if table.is_empty:
        return ObjectColumnWidths(name=0, type=0, total=title_len)

    name_width = 0
    type_width = 0
    value_width = title_len
    for entry in table.entries:
        described = entry.described
        name_width = max(name_width, len(entry.name))
        type_width = max(type_width, len(described.type_label))
        value_width = _clamped_max(value_width, len(described.display_text), table.chunk_limit)

    # the title line must still fit once a long value has pinned the width
    value_width = max(value_width, title_len)

    if name_width + type_width + 1 > value_width:
        value_width = name_width + type_width + 1
    else:
        type_width = value_width - (name_width + 1)
    return ObjectColumnWidths(name=name_width, type=type_width, total=value_width)
