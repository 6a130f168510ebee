"""
bdfont.basetypes - base data types and converters

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
from collections import namedtuple
from enum import IntEnum


# integer ranges for the numeric fields of the format
UINT16 = (0, 2**16 - 1)
UINT32 = (0, 2**32 - 1)
INT32 = (-2**31, 2**31 - 1)

# optional sign and ascii decimal digits only
_DECIMAL = re.compile(r'[+-]?[0-9]+')


def to_int(int_str, limits=None):
    """
    Convert decimal string to int, optionally checking the range.
    Raises ValueError if not an integer or out of range.
    """
    if not _DECIMAL.fullmatch(int_str):
        raise ValueError(f'Not a decimal integer: {int_str!r}.')
    value = int(int_str, 10)
    if limits is not None:
        low, high = limits
        if not low <= value <= high:
            raise ValueError(
                f'Value {value} out of range [{low}, {high}].'
            )
    return value


class _VectorMixin:
    """Vector operations on tuple."""

    def __str__(self):
        return ' '.join(f'{_e}' for _e in self)


class BoundingBox(_VectorMixin, namedtuple('BoundingBox', 'width height x y')):
    """
    Ink rectangle of a glyph, or default for the font.

    width, height: size in pixels, non-negative
    x, y: offset of the lower left corner from the origin, may be negative
    """

    @classmethod
    def create(cls, width=0, height=0, x=0, y=0):
        if width < 0 or height < 0:
            raise ValueError('Bounding box width and height must be non-negative.')
        return cls(width, height, x, y)


class Size(_VectorMixin, namedtuple('Size', 'pt x y')):
    """Point size and horizontal and vertical resolution in dpi."""


class Direction(IntEnum):
    """Writing direction, selecting which metrics sets are defined."""

    # typically left-to-right
    DEFAULT = 0
    # typically vertical or right-to-left
    ALTERNATE = 1
    BOTH = 2
