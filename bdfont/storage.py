"""
bdfont.storage - load and save fonts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys
import logging

from .basetypes import Direction, Size
from .bitmap import Bitmap
from .font import Font
from .glyph import Glyph
from .magic import MalformedFont, MalformedProperties, MalformedChar
from .properties import parse_property
from .reader import Reader
from .streams import Stream
from .writer import Writer
from . import entry


##############################################################################
# loading

def load(infile='', *, property_parser=parse_property):
    """
    Read font from BDF file.

    infile: path or stream (default: stdin)
    property_parser: function converting a property value string to str or int
    """
    infile = infile or sys.stdin
    with Stream(infile, 'r') as stream:
        logging.debug('Loading BDF font from `%s`.', stream.name)
        return read(stream.text, property_parser=property_parser)


# font-level and glyph-level attributes set by metric entries
_METRIC_ATTRS = {
    entry.ScalableWidth: 'scalable_width',
    entry.DeviceWidth: 'device_width',
    entry.AlternateScalableWidth: 'alternate_scalable_width',
    entry.AlternateDeviceWidth: 'alternate_device_width',
    entry.Vector: 'vector',
}

# states of the assembler
_OUTSIDE_FONT = 'outside-font'
_IN_FONT = 'in-font'
_IN_PROPERTIES = 'in-properties'
_IN_CHAR = 'in-char'

# error to raise when input ends in each state
_TRUNCATED = {
    _OUTSIDE_FONT: MalformedFont,
    _IN_FONT: MalformedFont,
    _IN_PROPERTIES: MalformedProperties,
    _IN_CHAR: MalformedChar,
}


def read(instream, *, property_parser=parse_property):
    """
    Read font from a text stream or other iterable of lines.
    Raises a FileFormatError subclass if the font is incomplete or malformed.
    """
    reader = Reader(instream, property_parser=property_parser)
    assembler = _Assembler(reader)
    return assembler.run()


class _Assembler:
    """Build a font from a stream of records."""

    def __init__(self, reader):
        self._reader = reader
        self._state = _OUTSIDE_FONT
        self._font = Font()
        self._glyph = None
        self._has_bitmap = False
        # declared counts, for consistency checks
        self._nchars = None
        self._nprops = None

    def run(self):
        """Consume records until ENDFONT."""
        while True:
            record = self._reader.read_entry()
            if record is None:
                raise _TRUNCATED[self._state](
                    'Unexpected end of input.',
                    line_number=self._reader.line_number
                )
            if self._state == _OUTSIDE_FONT:
                self._outside_font(record)
            elif self._state == _IN_PROPERTIES:
                self._in_properties(record)
            elif self._state == _IN_CHAR:
                self._in_char(record)
            elif isinstance(record, entry.EndFont):
                return self._end_font()
            else:
                self._in_font(record)

    def _error(self, error_class, record):
        """Create structural error for an unexpected record."""
        return error_class(
            f'Unexpected {record!r} {self._state.replace("-", " ")}.',
            line_number=self._reader.line_number
        )

    def _outside_font(self, record):
        if not isinstance(record, entry.StartFont):
            raise self._error(MalformedFont, record)
        self._font.format = record.version
        self._state = _IN_FONT

    def _in_font(self, record):
        font = self._font
        if isinstance(record, entry.Comment):
            font.comments.append(record.text)
        elif isinstance(record, entry.ContentVersion):
            font.version = record.version
        elif isinstance(record, entry.FontName):
            font.name = record.name
        elif isinstance(record, entry.Size):
            font.size = Size(*record)
        elif isinstance(record, entry.Chars):
            self._nchars = record.count
        elif isinstance(record, entry.FontBoundingBox):
            font.bounds = record.bounds
        elif isinstance(record, entry.MetricsSet):
            font.direction = record.direction
        elif type(record) in _METRIC_ATTRS:
            setattr(font, _METRIC_ATTRS[type(record)], tuple(record))
        elif isinstance(record, entry.StartProperties):
            self._nprops = record.count
            self._state = _IN_PROPERTIES
        elif isinstance(record, entry.StartChar):
            self._glyph = Glyph(record.name)
            self._glyph.direction = font.direction
            self._has_bitmap = False
            self._state = _IN_CHAR
        else:
            raise self._error(MalformedFont, record)

    def _in_properties(self, record):
        font = self._font
        if isinstance(record, entry.Property):
            font.properties[record.name] = record.value
        elif isinstance(record, entry.Comment):
            font.comments.append(record.text)
        elif isinstance(record, entry.EndProperties):
            if self._nprops != len(font.properties):
                logging.warning(
                    'Number of properties found (%d) does not match '
                    'STARTPROPERTIES declaration (%d).',
                    len(font.properties), self._nprops
                )
            self._state = _IN_FONT
        else:
            raise self._error(MalformedProperties, record)

    def _in_char(self, record):
        glyph = self._glyph
        if isinstance(record, entry.Encoding):
            glyph.codepoint = record.char
        elif isinstance(record, entry.MetricsSet):
            glyph.direction = record.direction
        elif type(record) in _METRIC_ATTRS:
            setattr(glyph, _METRIC_ATTRS[type(record)], tuple(record))
        elif isinstance(record, entry.GlyphBoundingBox):
            glyph.bounds = record.bounds
        elif isinstance(record, entry.GlyphBitmap):
            glyph.bitmap = record.bitmap
            self._has_bitmap = True
        elif isinstance(record, entry.Comment):
            glyph.comments.append(record.text)
        elif isinstance(record, entry.EndChar):
            self._end_char()
        else:
            raise self._error(MalformedChar, record)

    def _end_char(self):
        glyph = self._glyph
        if glyph.codepoint is None:
            raise MalformedChar(
                f'Glyph `{glyph.name}` has no encoding.',
                line_number=self._reader.line_number
            )
        if glyph.bounds is None:
            glyph.bounds = self._font.bounds
        if not self._has_bitmap and glyph.bounds is not None:
            glyph.bitmap = Bitmap(glyph.bounds.width, glyph.bounds.height)
        if glyph.codepoint in self._font.glyphs:
            logging.warning(
                'Duplicate encoding %d for glyph `%s`: replacing `%s`.',
                ord(glyph.codepoint), glyph.name,
                self._font.glyphs[glyph.codepoint].name
            )
        self._font.add_glyph(glyph)
        self._glyph = None
        self._state = _IN_FONT

    def _end_font(self):
        font = self._font
        if self._nchars is not None and self._nchars != len(font.glyphs):
            logging.warning(
                'Number of characters found (%d) does not match '
                'CHARS declaration (%d).',
                len(font.glyphs), self._nchars
            )
        logging.info(
            'Read BDF %s font `%s` with %d glyphs and %d properties.',
            font.format, font.name, len(font.glyphs), len(font.properties)
        )
        return font


##############################################################################
# saving

def save(font, outfile='', *, overwrite=False):
    """
    Write font to BDF file.

    font: Font to write
    outfile: path or stream (default: stdout)
    overwrite: if outfile is a path, replace existing file
    """
    outfile = outfile or sys.stdout
    # validate before creating any file
    _check(font)
    with Stream(outfile, 'w', overwrite=overwrite) as stream:
        logging.debug('Saving BDF font to `%s`.', stream.name)
        _write(stream.text, font)


def _check(font):
    """Raise MalformedFont or MalformedChar if font can't be written."""
    font.check()
    for glyph in font.glyphs.values():
        glyph.check(font)


def write(outstream, font):
    """Write font to a text stream."""
    _check(font)
    _write(outstream, font)


def _write(outstream, font):
    """Write checked font to a text stream."""
    writer = Writer(outstream)
    for record in flatten(font):
        writer.write_entry(record)


def flatten(font):
    """Generate the records for a font, in file order."""
    yield entry.StartFont(font.format)
    yield from _flatten_comments(font)
    yield entry.FontName(font.name)
    yield entry.Size(*font.size)
    if font.version is not None:
        yield entry.ContentVersion(font.version)
    yield entry.FontBoundingBox(font.bounds)
    if font.direction != Direction.DEFAULT:
        yield entry.MetricsSet(font.direction)
    yield from _flatten_metrics(font)
    if font.properties:
        yield entry.StartProperties(len(font.properties))
        for name, value in font.properties.items():
            yield entry.Property(name, value)
        yield entry.EndProperties()
    yield entry.Chars(len(font.glyphs))
    for codepoint, glyph in font.glyphs.items():
        yield entry.StartChar(glyph.name)
        yield from _flatten_comments(glyph)
        yield entry.Encoding(codepoint)
        if glyph.direction != font.direction:
            yield entry.MetricsSet(glyph.direction)
        yield from _flatten_metrics(glyph)
        yield entry.GlyphBoundingBox(glyph.bounds)
        yield entry.GlyphBitmap(glyph.bitmap)
        yield entry.EndChar()
    yield entry.EndFont()


def _flatten_metrics(item):
    """Generate metric pair records for a font or glyph."""
    for entry_class, attr in _METRIC_ATTRS.items():
        value = getattr(item, attr)
        if value is not None:
            yield entry_class(*value)


def _flatten_comments(item):
    """Generate one comment record per line of comment."""
    for comment in item.comments:
        for line in comment.splitlines() or ('',):
            yield entry.Comment(line)
