"""
bdfont.bitmap - glyph bit grid

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


def row_digits(width):
    """Number of hex digits that encode a bitmap row: whole bytes, at least one."""
    return max(1, -(-width // 8)) * 2


class Bitmap:
    """Rectangular grid of bits, stored row-major in a flat array."""

    def __init__(self, width=0, height=0):
        """Create blank bitmap."""
        if width < 0 or height < 0:
            raise ValueError('Bitmap width and height must be non-negative.')
        self._width = width
        self._height = height
        self._bits = bytearray(width * height)

    @classmethod
    def from_matrix(cls, matrix):
        """Create bitmap from sequence of rows of truthy/falsy values."""
        matrix = tuple(tuple(_row) for _row in matrix)
        height = len(matrix)
        width = len(matrix[0]) if matrix else 0
        if any(len(_row) != width for _row in matrix):
            raise ValueError('All rows must have the same length.')
        bitmap = cls(width, height)
        bitmap._bits = bytearray(
            bool(_bit) for _row in matrix for _bit in _row
        )
        return bitmap

    @classmethod
    def from_text(cls, text, *, ink='@'):
        """Create bitmap from text representation, one line per row."""
        return cls.from_matrix(
            (_c == ink for _c in _row)
            for _row in text.splitlines()
            if _row
        )

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def _index(self, x, y):
        """Get flat index, checking bounds."""
        if not 0 <= x < self._width or not 0 <= y < self._height:
            raise IndexError(
                f'Pixel ({x}, {y}) outside of {self._width}x{self._height} bitmap.'
            )
        return y * self._width + x

    def get(self, x, y):
        """Get pixel value at column x, row y."""
        return bool(self._bits[self._index(x, y)])

    def set(self, x, y, value):
        """Set pixel value at column x, row y."""
        self._bits[self._index(x, y)] = bool(value)

    def row(self, y):
        """Get a row of pixels as tuple of bool."""
        if not 0 <= y < self._height:
            raise IndexError(f'Row {y} outside of {self._height}-row bitmap.')
        offset = y * self._width
        return tuple(bool(_b) for _b in self._bits[offset:offset+self._width])

    def as_matrix(self):
        """Return tuple of rows of bool."""
        return tuple(self.row(_y) for _y in range(self._height))

    def as_text(self, *, ink='@', paper='.', end='\n'):
        """Convert bitmap to text."""
        return ''.join(
            ''.join(ink if _bit else paper for _bit in _row) + end
            for _row in self.as_matrix()
        )

    def copy(self):
        """Create an independent copy."""
        bitmap = type(self)(self._width, self._height)
        bitmap._bits = bytearray(self._bits)
        return bitmap

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._bits == other._bits
        )

    __hash__ = None

    def __repr__(self):
        """Text representation."""
        if not self._height:
            return f'{type(self).__name__}(width={self._width})'
        rows = ''.join(
            f"\n  '{_row}',"
            for _row in self.as_text(end='\n').splitlines()
        )
        return f'{type(self).__name__}(({rows}\n))'
