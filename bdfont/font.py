"""
bdfont.font - font definition

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import Direction
from .constants import DEFAULT_FORMAT
from .magic import MalformedFont
from .properties import is_single_line, is_bare_value


class Font:
    """BDF font: global metrics, properties and glyphs."""

    def __init__(self, name=None, version=None):
        """
        Create font.

        name: font name (FONT), usually an XLFD name
        version: content version (CONTENTVERSION)
        """
        # BDF format version (STARTFONT)
        self.format = DEFAULT_FORMAT
        self.name = name
        self.version = version
        # Size(pt, x, y)
        self.size = None
        # default BoundingBox
        self.bounds = None
        self.direction = Direction.DEFAULT
        # default metric pairs, (x, y) tuples or None
        self.scalable_width = None
        self.device_width = None
        self.alternate_scalable_width = None
        self.alternate_device_width = None
        self.vector = None
        # property name -> str or int, in file order
        self.properties = {}
        # character -> Glyph, in file order
        self.glyphs = {}
        self.comments = []

    def __repr__(self):
        return (
            f'<{type(self).__name__} name={self.name!r} '
            f'glyphs={len(self.glyphs)}>'
        )

    def add_glyph(self, glyph):
        """Add or replace glyph, keyed on its codepoint."""
        self.glyphs[glyph.codepoint] = glyph

    def get_glyph(self, char, default=None):
        """Get glyph for a character."""
        return self.glyphs.get(char, default)

    def check(self):
        """Raise MalformedFont if the global definition is incomplete."""
        if self.name is None:
            raise MalformedFont('Font has no name.')
        if self.size is None:
            raise MalformedFont(f'Font `{self.name}` has no size.')
        if self.bounds is None:
            raise MalformedFont(f'Font `{self.name}` has no bounding box.')
        for label, value in (('name', self.name), ('format', self.format)):
            if not is_bare_value(value):
                raise MalformedFont(f'Font {label} {value!r} cannot be written.')
        if self.version is not None and not is_bare_value(self.version):
            raise MalformedFont(f'Font version {self.version!r} cannot be written.')
        for name, value in self.properties.items():
            if not is_bare_value(name) or len(name.split()) != 1:
                raise MalformedFont(f'Invalid property name {name!r}.')
            if isinstance(value, str) and not is_single_line(value):
                raise MalformedFont(f'Property {name} contains a line break.')
