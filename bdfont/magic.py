"""
bdfont.magic - format errors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class FileFormatError(Exception):
    """Incorrect file format."""

    default_message = 'Incorrect BDF file.'

    def __init__(self, message='', *, line=None, line_number=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.line = line
        self.line_number = line_number

    def __str__(self):
        message = self.message
        if self.line is not None:
            message = f'{message} `{self.line}`'
        if self.line_number is not None:
            message = f'line {self.line_number}: {message}'
        return message


class ParseError(FileFormatError, ValueError):
    """A numeric field or bitmap row could not be parsed."""

    default_message = 'Could not parse value.'


class MissingVersion(FileFormatError):
    """STARTFONT without format version."""

    default_message = 'Missing version from STARTFONT.'


class MissingValue(FileFormatError):
    """Keyword with missing or malformed value."""

    def __init__(self, keyword, message='', **kwargs):
        super().__init__(message or f'Missing value for {keyword}.', **kwargs)
        self.keyword = keyword


class InvalidCodepoint(FileFormatError):
    """ENCODING value is not a Unicode scalar value."""

    default_message = 'An invalid codepoint has been found.'


class MissingBoundingBox(FileFormatError):
    """BITMAP without bounding box."""

    default_message = 'Missing bounding box.'


class MalformedFont(FileFormatError):
    """Incorrect font structure."""

    default_message = 'Malformed font definition.'


class MalformedProperties(FileFormatError):
    """Incorrect properties block."""

    default_message = 'Malformed properties definition.'


class MalformedChar(FileFormatError):
    """Incorrect character block."""

    default_message = 'Malformed character definition.'
