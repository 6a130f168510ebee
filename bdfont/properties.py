"""
bdfont.properties - property values and quoted strings

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import to_int


def escape_string(unquoted):
    """Return quoted version of string, doubling embedded quotes."""
    return '"{}"'.format(unquoted.replace('"', '""'))


def unescape_string(quoted):
    """
    Remove surrounding quotes and collapse doubled quotes.
    Strings that don't start with a quote are returned unchanged.
    """
    if not quoted.startswith('"'):
        return quoted
    if len(quoted) > 1 and quoted.endswith('"'):
        quoted = quoted[1:-1]
    else:
        # unterminated string
        quoted = quoted[1:]
    return quoted.replace('""', '"')


def parse_property(value):
    """
    Convert a property value to str or int.

    A value with a leading quote is always a string, so that "41" stays text.
    Unquoted values are integers if they parse as decimal, else raw strings.
    """
    if value.startswith('"'):
        return unescape_string(value)
    try:
        return to_int(value)
    except ValueError:
        return value


def format_property(value):
    """Convert a str or int property value to its BDF representation."""
    if isinstance(value, str):
        return escape_string(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise TypeError(
        f'Property value must be str or int, not {type(value).__name__}.'
    )


def is_single_line(text):
    """Check that a string contains no line breaks."""
    return '\n' not in text and '\r' not in text


def is_bare_value(text):
    """Check that an unquoted value reads back unchanged: non-empty, no surrounding whitespace."""
    return bool(text) and text == text.strip() and is_single_line(text)
