"""Tests for column width resolution."""

import pytest

from reqdump.rendering.models import Table
from reqdump.rendering.widths import ColumnWidths, ObjectColumnWidths, resolve_object_widths, resolve_string_widths


@pytest.mark.parametrize(
    'scenario,title,chunk_limit,values,expected',
    [
        ('single short value', 'X', 5, {'a': 'hello'}, ColumnWidths(name=1, value=5, total=7)),
        ('value wider than limit is clamped', 'X', 3, {'a': 'hello'}, ColumnWidths(name=1, value=3, total=5)),
        ('empty table is bounded by title', 'Title', 100, {}, ColumnWidths(name=0, value=0, total=5)),
        ('title wider than columns widens value', 'A long title here', 4, {'k': 'abcdefghij'}, ColumnWidths(name=1, value=15, total=17)),
        ('null value counts as placeholder', 'T', 100, {'name': None}, ColumnWidths(name=4, value=6, total=11)),
        ('empty value', 'T', 100, {'k': ''}, ColumnWidths(name=1, value=0, total=2)),
    ],
)
def test_string_widths(scenario, title, chunk_limit, values, expected):
    """Test string table width resolution scenarios."""
    table = Table.of_strings(title, values, chunk_limit)
    assert resolve_string_widths(table) == expected


@pytest.mark.parametrize(
    'lengths,expected_value',
    [
        ([8, 15, 9], 10),
        ([15, 3], 10),
        ([3, 15], 10),
        ([3, 7, 5], 7),
        ([10, 11], 10),
    ],
)
def test_string_value_width_clamped_running_max(lengths, expected_value):
    """An over-limit value pins the value column to the chunk limit whatever order values arrive in."""
    values = {f'k{i}': 'x' * length for i, length in enumerate(lengths)}
    widths = resolve_string_widths(Table.of_strings('', values, 10))
    assert widths.value == expected_value
    assert widths.total == widths.name + widths.value + 1


def test_string_widths_never_negative():
    widths = resolve_string_widths(Table.of_strings('', {}, 1))
    assert widths == ColumnWidths(name=0, value=0, total=0)


def test_object_widths_list_value():
    """The value column is seeded with the title length and grows with the display text."""
    table = Table.of_objects('Attrs', {'x': [1, 2, 3]})
    assert resolve_object_widths(table) == ObjectColumnWidths(name=1, type=7, total=9)


def test_object_widths_name_and_type_drive_total():
    table = Table.of_objects('T', {'attribute': None})
    # 'attribute' + '(n/a)' + separator
    assert resolve_object_widths(table) == ObjectColumnWidths(name=9, type=5, total=15)


def test_object_widths_long_value_keeps_title_width():
    """A wrapped value pins the width to the chunk limit, but never below the title."""
    table = Table.of_objects('T' * 12, {'k': 'abcdefgh'}, chunk_limit=5)
    assert resolve_object_widths(table) == ObjectColumnWidths(name=1, type=10, total=12)


def test_object_widths_long_value_clamped_to_limit():
    table = Table.of_objects('T', {'k': 'a' * 30, 'j': 'b' * 4}, chunk_limit=8)
    widths = resolve_object_widths(table)
    assert widths.total == 8
    assert widths.type == 6


def test_object_widths_empty():
    assert resolve_object_widths(Table.of_objects('Session Attributes', {})) == ObjectColumnWidths(name=0, type=0, total=18)
