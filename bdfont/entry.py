"""
bdfont.entry - BDF line records

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple
from operator import itemgetter


class Entry:
    """
    Base class for BDF records.

    Each subclass is a named tuple for the payload of one line type.
    Records of different types never compare equal, even with equal payload.
    """

    __slots__ = ()

    # BDF keyword for this line type
    keyword = None

    def __eq__(self, other):
        if not isinstance(other, Entry):
            # a bare tuple with the same payload is not a record
            return False if isinstance(other, tuple) else NotImplemented
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))


def _entry(name, fields, keyword, doc):
    """Create an Entry subclass with the given payload fields."""
    return type(name, (Entry, namedtuple(name, fields)), dict(
        __slots__=(),
        __doc__=doc,
        keyword=keyword,
    ))


StartFont = _entry(
    'StartFont', 'version', 'STARTFONT',
    'Start of the font declaration, with the BDF format version.'
)
Comment = _entry(
    'Comment', 'text', 'COMMENT',
    'Comment, with quoting removed.'
)
ContentVersion = _entry(
    'ContentVersion', 'version', 'CONTENTVERSION',
    'Version of the font contents.'
)
FontName = _entry(
    'FontName', 'name', 'FONT',
    'Name of the font.'
)
Size = _entry(
    'Size', 'pt x y', 'SIZE',
    'Point size and x and y resolution in dpi.'
)
Chars = _entry(
    'Chars', 'count', 'CHARS',
    'Number of characters in the font.'
)
FontBoundingBox = _entry(
    'FontBoundingBox', 'bounds', 'FONTBOUNDINGBOX',
    'Default bounding box for glyphs.'
)
EndFont = _entry(
    'EndFont', '', 'ENDFONT',
    'End of the font declaration.'
)
StartProperties = _entry(
    'StartProperties', 'count', 'STARTPROPERTIES',
    'Start of the properties block, with the number of properties.'
)
Property = _entry(
    'Property', 'name value', None,
    'Property name and str or int value.'
)
EndProperties = _entry(
    'EndProperties', '', 'ENDPROPERTIES',
    'End of the properties block.'
)
StartChar = _entry(
    'StartChar', 'name', 'STARTCHAR',
    'Start of a character declaration, with the glyph name.'
)
Encoding = _entry(
    'Encoding', 'char', 'ENCODING',
    'Character for the glyph.'
)
MetricsSet = _entry(
    'MetricsSet', 'direction', 'METRICSSET',
    'Writing direction of the glyph or font.'
)
ScalableWidth = _entry(
    'ScalableWidth', 'x y', 'SWIDTH',
    'Scalable width, in 1/1000 em.'
)
DeviceWidth = _entry(
    'DeviceWidth', 'x y', 'DWIDTH',
    'Device width, in pixels.'
)
AlternateScalableWidth = _entry(
    'AlternateScalableWidth', 'x y', 'SWIDTH1',
    'Scalable width for the alternate direction.'
)
AlternateDeviceWidth = _entry(
    'AlternateDeviceWidth', 'x y', 'DWIDTH1',
    'Device width for the alternate direction.'
)
Vector = _entry(
    'Vector', 'x y', 'VVECTOR',
    'Offset from the default origin to the alternate origin.'
)
GlyphBoundingBox = _entry(
    'GlyphBoundingBox', 'bounds', 'BBX',
    'Bounding box of the glyph.'
)
GlyphBitmap = _entry(
    'GlyphBitmap', 'bitmap', 'BITMAP',
    'Pixels of the glyph.'
)
EndChar = _entry(
    'EndChar', '', 'ENDCHAR',
    'End of a character declaration.'
)
Unknown = _entry(
    'Unknown', 'keyword', None,
    'Unsupported keyword without a value.'
)
# the keyword is payload here, not a class constant
Unknown.keyword = property(itemgetter(0), doc='Unsupported keyword.')


# metric pair entries by keyword
METRIC_ENTRIES = {
    _cls.keyword: _cls
    for _cls in (
        ScalableWidth, DeviceWidth,
        AlternateScalableWidth, AlternateDeviceWidth,
        Vector,
    )
}
