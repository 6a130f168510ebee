"""
bdfont.writer - write BDF records to a text stream

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .bitmap import row_digits
from .properties import (
    escape_string, format_property, is_single_line, is_bare_value,
)
from . import entry


def _format_bitmap_row(bitmap, y):
    """Convert a bitmap row to uppercase hex, left-aligned on a byte boundary."""
    width = bitmap.width
    value = 0
    # leftmost pixel becomes the most significant bit
    for x in range(width):
        value = (value << 1) | bitmap.get(x, y)
    value <<= -width % 8
    return f'{value:0{row_digits(width)}X}'


# records written as an unquoted string after the keyword
_BARE_ENTRIES = (
    entry.StartFont, entry.ContentVersion, entry.FontName, entry.StartChar,
)


def _check_value(record, value, bare):
    """Raise ValueError if a string value would not read back unchanged."""
    if not is_single_line(value):
        raise ValueError(
            f'{type(record).__name__} value {value!r} contains a line break.'
        )
    if bare and not is_bare_value(value):
        raise ValueError(
            f'{type(record).__name__} value {value!r} must be non-empty '
            'without surrounding whitespace.'
        )


def format_entry(record):
    """Convert a record to the list of lines that represent it."""
    if not isinstance(record, entry.Entry):
        raise TypeError(f'Expected Entry, got {type(record).__name__}.')
    keyword = record.keyword
    if isinstance(record, entry.Unknown):
        raise TypeError(f'Unknown entry `{record.keyword}` cannot be written.')
    if isinstance(record, entry.Comment):
        _check_value(record, record.text, bare=False)
        return [f'{keyword} {escape_string(record.text)}']
    if isinstance(record, entry.Property):
        if not is_bare_value(record.name) or len(record.name.split()) != 1:
            raise ValueError(f'Invalid property name {record.name!r}.')
        if isinstance(record.value, str):
            _check_value(record, record.value, bare=False)
        return [f'{record.name} {format_property(record.value)}']
    if isinstance(record, _BARE_ENTRIES):
        _check_value(record, record[0], bare=True)
        return [f'{keyword} {record[0]}']
    if isinstance(record, entry.Encoding):
        return [f'{keyword} {ord(record.char)}']
    if isinstance(record, entry.MetricsSet):
        return [f'{keyword} {int(record.direction)}']
    if isinstance(record, (entry.FontBoundingBox, entry.GlyphBoundingBox)):
        return [f'{keyword} {record.bounds}']
    if isinstance(record, entry.GlyphBitmap):
        bitmap = record.bitmap
        return [keyword] + [
            _format_bitmap_row(bitmap, _y) for _y in range(bitmap.height)
        ]
    # scalars and tuples of scalars, no value for end markers
    return [' '.join((keyword, *(str(_v) for _v in record)))]


class Writer:
    """Write BDF records to a text stream."""

    def __init__(self, outstream):
        """Create writer on a text stream."""
        self._stream = outstream

    def write_entry(self, record):
        """Write the line(s) for one record."""
        lines = format_entry(record)
        logging.debug('writing %r', record)
        self._stream.write(''.join(f'{_line}\n' for _line in lines))
