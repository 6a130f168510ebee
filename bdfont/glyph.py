"""
bdfont.glyph - glyph definition

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import Direction
from .bitmap import Bitmap
from .magic import MalformedChar
from .properties import is_bare_value


class Glyph:
    """Character metrics and bitmap."""

    def __init__(self, name=None, codepoint=None, *, bounds=None, bitmap=None):
        """
        Create glyph.

        name: glyph name (STARTCHAR)
        codepoint: single-character string (ENCODING)
        bounds: BoundingBox (BBX)
        bitmap: Bitmap; blank bitmap of the bounds size if not given
        """
        self.name = name
        self.codepoint = codepoint
        self.direction = Direction.DEFAULT
        # metric pairs, (x, y) tuples or None
        self.scalable_width = None
        self.device_width = None
        self.alternate_scalable_width = None
        self.alternate_device_width = None
        self.vector = None
        self.bounds = bounds
        if bitmap is None:
            if bounds is not None:
                bitmap = Bitmap(bounds.width, bounds.height)
            else:
                bitmap = Bitmap()
        self.bitmap = bitmap
        self.comments = []

    def __repr__(self):
        return (
            f'<{type(self).__name__} name={self.name!r} '
            f'codepoint={self.codepoint!r} bounds={self.bounds}>'
        )

    @property
    def width(self):
        return self.bitmap.width

    @property
    def height(self):
        return self.bitmap.height

    def get(self, x, y):
        """Get pixel value at column x, row y."""
        return self.bitmap.get(x, y)

    def set(self, x, y, value):
        """Set pixel value at column x, row y."""
        self.bitmap.set(x, y, value)

    def pixels(self):
        """Iterate over ((x, y), value) for all pixels, row by row."""
        for y, row in enumerate(self.bitmap.as_matrix()):
            for x, value in enumerate(row):
                yield (x, y), value

    def as_text(self, *, ink='@', paper='.'):
        """Convert bitmap to text."""
        return self.bitmap.as_text(ink=ink, paper=paper)

    def check(self, font=None):
        """
        Raise MalformedChar if the definition is incomplete.
        Alternate metrics may be inherited from the font, if given.
        """
        label = self.name or repr(self.codepoint)
        if self.name is None:
            raise MalformedChar('Glyph has no name.')
        if not is_bare_value(self.name):
            raise MalformedChar(f'Glyph name {self.name!r} cannot be written.')
        if self.codepoint is None:
            raise MalformedChar(f'Glyph `{label}` has no encoding.')
        if self.bounds is None:
            raise MalformedChar(f'Glyph `{label}` has no bounding box.')
        if (self.bitmap.width, self.bitmap.height) != self.bounds[:2]:
            raise MalformedChar(
                f'Glyph `{label}` bitmap size '
                f'{self.bitmap.width}x{self.bitmap.height} does not match '
                f'bounding box {self.bounds.width}x{self.bounds.height}.'
            )
        alternates = (self.alternate_scalable_width, self.alternate_device_width)
        if self.direction == Direction.DEFAULT:
            if any(_m is not None for _m in alternates):
                raise MalformedChar(
                    f'Glyph `{label}` has alternate metrics but METRICSSET 0.'
                )
            return
        if font is not None:
            alternates = tuple(
                _default if _own is None else _own
                for _own, _default in zip(alternates, (
                    font.alternate_scalable_width, font.alternate_device_width
                ))
            )
        if any(_m is None for _m in alternates):
            raise MalformedChar(
                f'Glyph `{label}` has METRICSSET {int(self.direction)} '
                'but no alternate metrics.'
            )
