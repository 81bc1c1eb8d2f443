"""Line drawing for bordered dump tables."""

from typing import List, TextIO

from .models import Table
from .widths import ColumnWidths, ObjectColumnWidths


def split_chunks(text: str, limit: int) -> List[str]:
    """Cut ``text`` into ``limit``-sized pieces; an empty text yields one empty piece."""
    if not text:
        return ['']
    return [text[start : start + limit] for start in range(0, len(text), limit)]


class BoxWriter:
    """Streams one bordered table to a text sink."""

    def __init__(self, sink: TextIO):
        self.sink = sink

    def _line(self, *parts: str) -> None:
        self.sink.write(''.join(parts))
        self.sink.write('\n')

    def _rule(self, *widths: int) -> None:
        self._line('+', '+'.join('-' * width for width in widths), '+')

    def _head(self, table: Table, total: int) -> None:
        self._rule(total)
        self._line('|', table.title.ljust(total), '|')

    def write_strings(self, table: Table, widths: ColumnWidths) -> None:
        """Write a name/value table; continuation lines leave the name column blank."""
        self._head(table, widths.total)
        if table.is_empty:
            self._rule(widths.total)
            return

        self._rule(widths.name, widths.value)
        blank_name = ' ' * widths.name
        for entry in table.entries:
            name_cell = entry.name.ljust(widths.name)
            for chunk in split_chunks(entry.text, table.chunk_limit):
                self._line('|', name_cell, '|', chunk.ljust(widths.value), '|')
                name_cell = blank_name
        self._rule(widths.name, widths.value)

    def write_objects(self, table: Table, widths: ObjectColumnWidths) -> None:
        """Write a name/type table; each value follows on full-width lines below its row."""
        self._head(table, widths.total)
        if table.is_empty:
            self._rule(widths.total)
            return

        self._rule(widths.name, widths.type)
        for entry in table.entries:
            described = entry.described
            self._line('|', entry.name.ljust(widths.name), '|', described.type_label.ljust(widths.type), '|')
            for chunk in split_chunks(described.display_text, table.chunk_limit):
                self._line('|', chunk.ljust(widths.total), '|')
        self._rule(widths.total)
