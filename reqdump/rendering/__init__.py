"""Fixed-width table rendering for diagnostic dumps."""

from io import StringIO
from typing import Any, Mapping, Optional, TextIO

from .box import BoxWriter, split_chunks
from .models import DEFAULT_CHUNK_LIMIT, DescribedValue, Entry, Table
from .widths import ColumnWidths, ObjectColumnWidths, resolve_object_widths, resolve_string_widths


def write_string_table(sink: TextIO, title: str, values: Mapping[str, Optional[str]], chunk_limit: int = DEFAULT_CHUNK_LIMIT) -> None:
    """Render name→text pairs as a bordered table into ``sink``."""
    table = Table.of_strings(title, values, chunk_limit)
    BoxWriter(sink).write_strings(table, resolve_string_widths(table))


def write_object_table(sink: TextIO, title: str, values: Mapping[str, Any], chunk_limit: int = DEFAULT_CHUNK_LIMIT) -> None:
    """Render name→object pairs, with type labels, as a bordered table into ``sink``."""
    table = Table.of_objects(title, values, chunk_limit)
    BoxWriter(sink).write_objects(table, resolve_object_widths(table))


def format_string_table(title: str, values: Mapping[str, Optional[str]], chunk_limit: int = DEFAULT_CHUNK_LIMIT) -> str:
    buffer = StringIO()
    write_string_table(buffer, title, values, chunk_limit)
    return buffer.getvalue()


def format_object_table(title: str, values: Mapping[str, Any], chunk_limit: int = DEFAULT_CHUNK_LIMIT) -> str:
    buffer = StringIO()
    write_object_table(buffer, title, values, chunk_limit)
    return buffer.getvalue()


__all__ = [
    'BoxWriter',
    'ColumnWidths',
    'DEFAULT_CHUNK_LIMIT',
    'DescribedValue',
    'Entry',
    'ObjectColumnWidths',
    'Table',
    'format_object_table',
    'format_string_table',
    'resolve_object_widths',
    'resolve_string_widths',
    'split_chunks',
    'write_object_table',
    'write_string_table',
]
