"""
bdfont test suite
record reader tests
"""

import unittest

import bdfont
from bdfont import entry, Bitmap, BoundingBox, Direction, Reader
from bdfont.reader import tokenize
from .base import BaseTester, get_stringio, read_entries


class TestTokenize(BaseTester):
    """Test the line tokenizer."""

    def test_keyword_only(self):
        self.assertEqual(tokenize('ENDFONT'), ('ENDFONT', None))

    def test_argument(self):
        self.assertEqual(tokenize('SIZE 16 100 100'), ('SIZE', '16 100 100'))

    def test_argument_trimmed(self):
        self.assertEqual(tokenize('FONT   some name  \n'), ('FONT', 'some name'))

    def test_trailing_space(self):
        self.assertEqual(tokenize('STARTFONT '), ('STARTFONT', None))


class TestReader(BaseTester):
    """Test decoding single records."""

    def assert_entry(self, text, record):
        """Last record decoded from text equals the given record."""
        *_, last = read_entries(text)
        self.assertEqual(last, record)
        # same payload, other type is not equal
        self.assertIs(type(last), type(record))

    def test_start_font(self):
        self.assert_entry('STARTFONT 2.2\n', entry.StartFont('2.2'))

    def test_comment(self):
        self.assert_entry('COMMENT "hue"\n', entry.Comment('hue'))

    def test_comment_escaped(self):
        self.assert_entry(
            'COMMENT "this is a ""test"""\n', entry.Comment('this is a "test"')
        )

    def test_comment_unquoted(self):
        self.assert_entry('COMMENT just text\n', entry.Comment('just text'))

    def test_comment_empty(self):
        self.assert_entry('COMMENT\n', entry.Comment(''))

    def test_content_version(self):
        self.assert_entry('CONTENTVERSION 1.0.0\n', entry.ContentVersion('1.0.0'))

    def test_font(self):
        name = '-Gohu-GohuFont-Bold-R-Normal--11-80-100-100-C-60-ISO10646-1'
        self.assert_entry(f'FONT {name}\n', entry.FontName(name))

    def test_size(self):
        record, = read_entries('SIZE 16 100 100\n')
        self.assertEqual(record, entry.Size(16, 100, 100))
        self.assertEqual(record.pt, 16)
        self.assertEqual(record.x, 100)
        self.assertEqual(record.y, 100)

    def test_chars(self):
        self.assert_entry('CHARS 42\n', entry.Chars(42))

    def test_font_bounding_box(self):
        self.assert_entry(
            'FONTBOUNDINGBOX 6 11 0 -2\n',
            entry.FontBoundingBox(BoundingBox(6, 11, 0, -2))
        )

    def test_end_font(self):
        self.assert_entry('ENDFONT\n', entry.EndFont())

    def test_end_ignores_argument(self):
        self.assert_entry('ENDCHAR whatever\n', entry.EndChar())

    def test_start_properties(self):
        self.assert_entry('STARTPROPERTIES 23\n', entry.StartProperties(23))

    def test_property_string(self):
        self.assert_entry(
            'FOUNDRY "GohuFont"\n', entry.Property('FOUNDRY', 'GohuFont')
        )

    def test_property_integer(self):
        self.assert_entry('X_HEIGHT 4\n', entry.Property('X_HEIGHT', 4))

    def test_property_negative(self):
        self.assert_entry('UNDERLINE_POSITION -1\n', entry.Property('UNDERLINE_POSITION', -1))

    def test_property_quoted_number(self):
        self.assert_entry('FONT_VERSION "41"\n', entry.Property('FONT_VERSION', '41'))

    def test_property_unquoted_string(self):
        self.assert_entry('SPACING C\n', entry.Property('SPACING', 'C'))

    def test_property_not_decimal(self):
        """Values that only Python would read as numbers stay strings."""
        self.assert_entry('WEIGHT 1_0\n', entry.Property('WEIGHT', '1_0'))
        self.assert_entry('WEIGHT \u0661\n', entry.Property('WEIGHT', '\u0661'))

    def test_property_parser(self):
        """The property rule can be replaced."""
        reader = Reader(get_stringio('X_HEIGHT 4\n'), property_parser=str)
        self.assertEqual(reader.read_entry(), entry.Property('X_HEIGHT', '4'))

    def test_end_properties(self):
        self.assert_entry('ENDPROPERTIES\n', entry.EndProperties())

    def test_start_char(self):
        self.assert_entry('STARTCHAR <control>\n', entry.StartChar('<control>'))

    def test_encoding(self):
        self.assert_entry('ENCODING 0\n', entry.Encoding('\0'))

    def test_encoding_unicode(self):
        self.assert_entry('ENCODING 8364\n', entry.Encoding('€'))

    def test_metricsset(self):
        self.assert_entry('METRICSSET 0\n', entry.MetricsSet(Direction.DEFAULT))
        self.assert_entry('METRICSSET 1\n', entry.MetricsSet(Direction.ALTERNATE))
        self.assert_entry('METRICSSET 2\n', entry.MetricsSet(Direction.BOTH))

    def test_scalable_width(self):
        self.assert_entry('SWIDTH 392 0\n', entry.ScalableWidth(392, 0))

    def test_device_width(self):
        self.assert_entry('DWIDTH 6 0\n', entry.DeviceWidth(6, 0))

    def test_alternate_widths(self):
        self.assert_entry('SWIDTH1 0 -1000\n', entry.AlternateScalableWidth(0, -1000))
        self.assert_entry('DWIDTH1 0 -16\n', entry.AlternateDeviceWidth(0, -16))

    def test_vector(self):
        self.assert_entry('VVECTOR 4 14\n', entry.Vector(4, 14))

    def test_bounding_box(self):
        self.assert_entry(
            'BBX 6 11 0 -2\n',
            entry.GlyphBoundingBox(BoundingBox(6, 11, 0, -2))
        )

    def test_tuple_extra_whitespace(self):
        self.assert_entry('BBX  6 11\t0 -2 \n', entry.GlyphBoundingBox(BoundingBox(6, 11, 0, -2)))

    def test_end_char(self):
        self.assert_entry('ENDCHAR\n', entry.EndChar())

    def test_unknown(self):
        self.assert_entry('HUE', entry.Unknown('HUE'))

    def test_different_types_not_equal(self):
        self.assertNotEqual(entry.FontName('x'), entry.StartChar('x'))
        self.assertNotEqual(entry.ScalableWidth(1, 0), entry.DeviceWidth(1, 0))
        self.assertNotEqual(entry.EndFont(), entry.EndChar())

    def test_not_equal_to_plain_tuple(self):
        self.assertNotEqual(entry.Comment('a'), ('a',))
        self.assertNotEqual(('a',), entry.Comment('a'))
        self.assertFalse(entry.Size(8, 72, 72) == (8, 72, 72))
        self.assertTrue(entry.EndFont() != ())


class TestReaderBitmap(BaseTester):
    """Test decoding bitmaps."""

    def test_bitmap(self):
        text = 'BBX 6 11 0 -2\nBITMAP\n' + '\n'.join(self.sample_A_hex) + '\n'
        *_, record = read_entries(text)
        self.assertEqual(record, entry.GlyphBitmap(Bitmap.from_text(self.sample_A)))
        self.assertEqual(record.bitmap.as_text(), self.sample_A)

    def test_bitmap_pixels(self):
        """Most significant bit is the leftmost pixel."""
        *_, record = read_entries('BBX 3 1 0 0\nBITMAP\n80\n')
        bitmap = record.bitmap
        self.assertEqual(bitmap.as_matrix(), ((True, False, False),))

    def test_bitmap_default_bounds(self):
        text = 'FONTBOUNDINGBOX 2 2 0 0\nBITMAP\nC0\n40\n'
        *_, record = read_entries(text)
        self.assertEqual(record.bitmap.as_text(), '@@\n.@\n')

    def test_bitmap_current_bounds_precedence(self):
        text = 'FONTBOUNDINGBOX 2 2 0 0\nBBX 3 1 0 0\nBITMAP\nA0\n'
        *_, record = read_entries(text)
        self.assertEqual(record.bitmap.as_text(), '@.@\n')

    def test_bitmap_current_bounds_cleared(self):
        """After a bitmap, glyphs without BBX revert to the font bounding box."""
        text = (
            'FONTBOUNDINGBOX 2 2 0 0\n'
            'BBX 3 1 0 0\nBITMAP\nA0\nENDCHAR\n'
            'BITMAP\n80\n40\n'
        )
        *_, record = read_entries(text)
        self.assertEqual(record.bitmap.as_text(), '@.\n.@\n')

    def test_bitmap_wide(self):
        text = 'BBX 10 2 0 0\nBITMAP\nFFC0\n8040\n'
        *_, record = read_entries(text)
        self.assertEqual(record.bitmap.as_text(), '@@@@@@@@@@\n@........@\n')

    def test_bitmap_excess_digits(self):
        """Rows padded beyond the byte boundary are truncated."""
        text = 'BBX 3 2 0 0\nBITMAP\nA0000000\n4000\n'
        *_, record = read_entries(text)
        self.assertEqual(record.bitmap.as_text(), '@.@\n.@.\n')

    def test_bitmap_zero_height(self):
        text = 'BBX 0 0 0 0\nBITMAP\nENDCHAR\n'
        bitmap_record, end = read_entries(text)[-2:]
        self.assertEqual(bitmap_record.bitmap, Bitmap(0, 0))
        self.assertEqual(end, entry.EndChar())

    def test_bitmap_rows_not_skipped(self):
        """Bitmap rows are read verbatim; blank rows are errors."""
        with self.assertRaises(bdfont.ParseError):
            read_entries('BBX 2 2 0 0\nBITMAP\n\n80\n')

    def test_missing_bounding_box(self):
        with self.assertRaises(bdfont.MissingBoundingBox) as context:
            read_entries('STARTCHAR A\nBITMAP\n00\n')
        self.assertEqual(context.exception.line_number, 2)

    def test_bitmap_bad_hex(self):
        with self.assertRaises(bdfont.ParseError) as context:
            read_entries('BBX 2 2 0 0\nBITMAP\n80\nXY\n')
        self.assertEqual(context.exception.line_number, 4)
        self.assertEqual(context.exception.line, 'XY')
        self.assertIn('line 4', str(context.exception))

    def test_bitmap_truncated(self):
        with self.assertRaises(bdfont.ParseError):
            read_entries('BBX 2 3 0 0\nBITMAP\n80\n40\n')

    def test_bitmap_not_plain_hex(self):
        """Signs, prefixes and separators are not hex digits."""
        for bounds, row in (('8 1', '-1'), ('16 1', '0x80'), ('16 1', 'F_F0'), ('8 1', '+8')):
            with self.subTest(row=row):
                with self.assertRaises(bdfont.ParseError) as context:
                    read_entries(f'BBX {bounds} 0 0\nBITMAP\n{row}\n')
                self.assertEqual(context.exception.line_number, 3)

    def test_bitmap_excess_digits_must_be_hex(self):
        with self.assertRaises(bdfont.ParseError):
            read_entries('BBX 3 1 0 0\nBITMAP\nA0zz\n')


class TestReaderErrors(BaseTester):
    """Test decoding errors."""

    def test_missing_version(self):
        with self.assertRaises(bdfont.MissingVersion):
            read_entries('STARTFONT\n')

    def test_missing_value(self):
        for keyword in (
                'FONT', 'CONTENTVERSION', 'CHARS', 'STARTCHAR',
                'STARTPROPERTIES', 'ENCODING', 'SIZE', 'FONTBOUNDINGBOX',
                'BBX', 'SWIDTH', 'DWIDTH', 'SWIDTH1', 'DWIDTH1', 'VVECTOR',
                'METRICSSET',
            ):
            with self.subTest(keyword=keyword):
                with self.assertRaises(bdfont.MissingValue) as context:
                    read_entries(f'{keyword}\n')
                self.assertEqual(context.exception.keyword, keyword)

    def test_wrong_arity(self):
        with self.assertRaises(bdfont.MissingValue):
            read_entries('SIZE 16 100\n')
        with self.assertRaises(bdfont.MissingValue):
            read_entries('BBX 6 11 0\n')
        with self.assertRaises(bdfont.MissingValue):
            read_entries('DWIDTH 6 0 0\n')

    def test_bad_metricsset(self):
        with self.assertRaises(bdfont.MissingValue):
            read_entries('METRICSSET 3\n')

    def test_not_a_number(self):
        with self.assertRaises(bdfont.ParseError) as context:
            read_entries('COMMENT\nSIZE 16 x 100\n')
        self.assertEqual(context.exception.line_number, 2)
        self.assertEqual(context.exception.line, 'SIZE 16 x 100')
        # parse errors are also value errors
        self.assertIsInstance(context.exception, ValueError)

    def test_out_of_range(self):
        with self.assertRaises(bdfont.ParseError):
            read_entries('SIZE 70000 100 100\n')
        with self.assertRaises(bdfont.ParseError):
            read_entries('BBX -6 11 0 -2\n')
        with self.assertRaises(bdfont.ParseError):
            read_entries('CHARS -1\n')

    def test_encoding_not_a_number(self):
        with self.assertRaises(bdfont.ParseError):
            read_entries('ENCODING A\n')

    def test_digit_separators(self):
        with self.assertRaises(bdfont.ParseError):
            read_entries('SIZE 1_6 100 100\n')
        with self.assertRaises(bdfont.ParseError):
            read_entries('ENCODING 6_5\n')

    def test_non_ascii_digits(self):
        with self.assertRaises(bdfont.ParseError):
            read_entries('SIZE \u0661\u0666 100 100\n')
        with self.assertRaises(bdfont.ParseError):
            read_entries('CHARS \uff13\n')

    def test_explicit_sign(self):
        *_, record = read_entries('BBX 1 1 +1 -1\n')
        self.assertEqual(record.bounds, BoundingBox(1, 1, 1, -1))

    def test_invalid_codepoint(self):
        for value in ('-1', '1114112', '55296'):
            with self.subTest(value=value):
                with self.assertRaises(bdfont.InvalidCodepoint):
                    read_entries(f'ENCODING {value}\n')


class TestReaderStream(BaseTester):
    """Test iteration over the line source."""

    def test_blank_lines_skipped(self):
        records = read_entries('\n\nSTARTFONT 2.1\n   \n\nENDFONT\n\n')
        self.assertEqual(records, [entry.StartFont('2.1'), entry.EndFont()])

    def test_line_number(self):
        reader = Reader(get_stringio('\nSTARTFONT 2.1\n\nENDFONT\n'))
        reader.read_entry()
        self.assertEqual(reader.line_number, 2)
        reader.read_entry()
        self.assertEqual(reader.line_number, 4)

    def test_end(self):
        """Reading past ENDFONT gives the end marker, not an error."""
        reader = Reader(get_stringio('STARTFONT 2.1\nENDFONT\n'))
        self.assertEqual(reader.read_entry(), entry.StartFont('2.1'))
        self.assertEqual(reader.read_entry(), entry.EndFont())
        self.assertIsNone(reader.read_entry())
        self.assertIsNone(reader.read_entry())

    def test_iteration_stops_at_end(self):
        reader = Reader(['STARTFONT 2.1', 'ENDFONT'])
        self.assertEqual(len(list(reader)), 2)
        with self.assertRaises(StopIteration):
            next(reader)

    def test_iteration_raises_errors(self):
        reader = Reader(get_stringio('STARTFONT 2.1\nSIZE x\nENDFONT\n'))
        with self.assertRaises(bdfont.MissingValue):
            list(reader)

    def test_crlf(self):
        records = read_entries('STARTFONT 2.1\r\nBBX 1 1 0 0\r\nBITMAP\r\n80\r\n')
        self.assertEqual(records[-1].bitmap.as_text(), '@\n')

    def test_sample_file(self):
        with open(self.font_path / 'sample.bdf') as f:
            records = list(Reader(f))
        self.assertEqual(records[0], entry.StartFont('2.1'))
        self.assertEqual(records[-1], entry.EndFont())
        bitmaps = [_r for _r in records if isinstance(_r, entry.GlyphBitmap)]
        self.assertEqual(len(bitmaps), 3)
        self.assertEqual(bitmaps[1].bitmap.as_text(), self.sample_A)


if __name__ == '__main__':
    unittest.main()
