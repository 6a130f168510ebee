"""
bdfont.reader - read BDF records from a line source

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .basetypes import BoundingBox, Direction, to_int, UINT16, UINT32, INT32
from .bitmap import Bitmap, row_digits
from .magic import (
    ParseError, MissingVersion, MissingValue, InvalidCodepoint,
    MissingBoundingBox,
)
from .properties import parse_property, unescape_string
from . import entry


# BDF specification: https://adobe-type-tools.github.io/font-tech-notes/pdfs/5005.BDF_Spec.pdf

# keywords that take a single string
_STRING_ENTRIES = {
    'FONT': entry.FontName,
    'CONTENTVERSION': entry.ContentVersion,
    'STARTCHAR': entry.StartChar,
}

# keywords that take a single count
_COUNT_ENTRIES = {
    'CHARS': entry.Chars,
    'STARTPROPERTIES': entry.StartProperties,
}

# keywords that take no value; any value given is ignored
_BARE_ENTRIES = {
    'ENDFONT': entry.EndFont,
    'ENDCHAR': entry.EndChar,
    'ENDPROPERTIES': entry.EndProperties,
}

_METRICSSET = {
    '0': Direction.DEFAULT,
    '1': Direction.ALTERNATE,
    '2': Direction.BOTH,
}

_SURROGATES = range(0xd800, 0xe000)
_MAX_CODEPOINT = 0x10ffff

# bitmap rows are plain hex digits, no sign, prefix or separators
_HEX_ROW = re.compile('[0-9A-Fa-f]+')


def tokenize(line):
    """
    Split a line into keyword and argument.
    The argument is None if there is no space after the keyword.
    """
    line = line.strip()
    keyword, sep, argument = line.partition(' ')
    if not sep:
        return keyword, None
    return keyword, argument.strip()


class Reader:
    """Read BDF records from a line source."""

    def __init__(self, instream, *, property_parser=parse_property):
        """
        Create reader on a line source.

        instream: iterable of text lines, e.g. a text stream
        property_parser: function converting a property value string to str or int
        """
        self._lines = iter(instream)
        self._property_parser = property_parser
        # number of the last line read
        self.line_number = 0
        # bounding box set by FONTBOUNDINGBOX
        self._default_bounds = None
        # bounding box set by BBX, reset after each BITMAP
        self._current_bounds = None

    def __iter__(self):
        return self

    def __next__(self):
        record = self.read_entry()
        if record is None:
            raise StopIteration
        return record

    def _readline(self):
        """Read the next physical line; None at end of input."""
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        self.line_number += 1
        return line.rstrip('\r\n')

    def read_entry(self):
        """
        Read the next record.
        Returns None when the line source is exhausted.
        """
        while True:
            line = self._readline()
            if line is None:
                return None
            if line.strip():
                break
        record = self._decode(line)
        logging.debug('line %d: %r', self.line_number, record)
        return record

    def _decode(self, line):
        """Convert a non-blank line to a record."""
        keyword, argument = tokenize(line)
        if keyword in _BARE_ENTRIES:
            return _BARE_ENTRIES[keyword]()
        if keyword == 'BITMAP':
            return entry.GlyphBitmap(self._read_bitmap(line))
        if keyword == 'COMMENT':
            if argument is None:
                return entry.Comment('')
            return entry.Comment(unescape_string(argument))
        if keyword == 'STARTFONT':
            if argument is None:
                raise MissingVersion(line=line, line_number=self.line_number)
            return entry.StartFont(argument)
        if keyword in _STRING_ENTRIES:
            value, = self._split(keyword, argument, 1, line)
            return _STRING_ENTRIES[keyword](value)
        if keyword in _COUNT_ENTRIES:
            value, = self._split(keyword, argument, 1, line)
            return _COUNT_ENTRIES[keyword](self._int(value, line, UINT32))
        if keyword == 'ENCODING':
            value, = self._split(keyword, argument, 1, line)
            return entry.Encoding(self._char(value, line))
        if keyword == 'METRICSSET':
            value, = self._split(keyword, argument, 1, line)
            try:
                return entry.MetricsSet(_METRICSSET[value])
            except KeyError:
                raise MissingValue(
                    keyword, line=line, line_number=self.line_number
                ) from None
        if keyword == 'SIZE':
            fields = self._split(keyword, argument, 3, line)
            return entry.Size(*(self._int(_f, line, UINT16) for _f in fields))
        if keyword in ('FONTBOUNDINGBOX', 'BBX'):
            bounds = self._bounds(keyword, argument, line)
            if keyword == 'BBX':
                self._current_bounds = bounds
                return entry.GlyphBoundingBox(bounds)
            self._default_bounds = bounds
            return entry.FontBoundingBox(bounds)
        if keyword in entry.METRIC_ENTRIES:
            fields = self._split(keyword, argument, 2, line)
            return entry.METRIC_ENTRIES[keyword](
                *(self._int(_f, line, INT32) for _f in fields)
            )
        if argument is not None:
            return entry.Property(keyword, self._property_parser(argument))
        return entry.Unknown(keyword)

    def _split(self, keyword, argument, count, line):
        """Split argument into the given number of fields."""
        if argument is None:
            raise MissingValue(keyword, line=line, line_number=self.line_number)
        if count == 1:
            return (argument,)
        fields = argument.split()
        if len(fields) != count:
            raise MissingValue(
                keyword,
                f'Expected {count} values for {keyword}, found {len(fields)}.',
                line=line, line_number=self.line_number
            )
        return fields

    def _int(self, value, line, limits):
        """Convert field to integer in range."""
        try:
            return to_int(value, limits)
        except ValueError as e:
            raise ParseError(
                str(e), line=line, line_number=self.line_number
            ) from e

    def _char(self, value, line):
        """Convert ENCODING value to character."""
        codepoint = self._int(value, line, None)
        if not 0 <= codepoint <= _MAX_CODEPOINT or codepoint in _SURROGATES:
            raise InvalidCodepoint(line=line, line_number=self.line_number)
        return chr(codepoint)

    def _bounds(self, keyword, argument, line):
        """Convert FONTBOUNDINGBOX or BBX value to bounding box."""
        width, height, x, y = self._split(keyword, argument, 4, line)
        return BoundingBox(
            self._int(width, line, UINT32),
            self._int(height, line, UINT32),
            self._int(x, line, INT32),
            self._int(y, line, INT32),
        )

    def _read_bitmap(self, line):
        """Read the bitmap rows following a BITMAP line."""
        bounds = self._current_bounds
        if bounds is None:
            bounds = self._default_bounds
        if bounds is None:
            raise MissingBoundingBox(line=line, line_number=self.line_number)
        width, height = bounds.width, bounds.height
        bitmap = Bitmap(width, height)
        # rows are left-aligned to a byte boundary
        padding = (8 - width % 8) % 8
        digits = row_digits(width)
        for y in range(height):
            row = self._readline()
            if row is None:
                raise ParseError(
                    f'Unexpected end of input in bitmap: '
                    f'found {y} of {height} rows.',
                    line_number=self.line_number,
                )
            hexstr = row.strip()
            if not _HEX_ROW.fullmatch(hexstr):
                raise ParseError(
                    'Could not parse bitmap row.',
                    line=row, line_number=self.line_number
                )
            value = int(hexstr[:digits], 16)
            value >>= padding
            # most significant bit is the leftmost pixel
            for x in range(width):
                bitmap.set(width - x - 1, y, (value >> x) & 1)
        self._current_bounds = None
        return bitmap
