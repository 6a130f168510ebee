"""
bdfont - read and write Glyph Bitmap Distribution Format fonts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .basetypes import BoundingBox, Size, Direction
from .bitmap import Bitmap
from .glyph import Glyph
from .font import Font
from .properties import parse_property
from .reader import Reader, tokenize
from .writer import Writer
from .storage import load, save, read, write
from .magic import (
    FileFormatError, ParseError, MissingVersion, MissingValue,
    InvalidCodepoint, MissingBoundingBox,
    MalformedFont, MalformedProperties, MalformedChar,
)
from . import entry
