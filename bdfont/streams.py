"""
bdfont.streams - file stream tools

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from pathlib import Path

from .magic import FileFormatError


class StreamWrapper:
    """Wrapper object to emulate a single stream."""

    def __init__(self, stream, mode='', name=''):
        self._stream = stream
        self.name = name or get_name(stream)
        self.mode = mode[:1]
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """Ensure stream is closed."""
        self.close()

    def __repr__(self):
        """String representation."""
        return (
            f"<{type(self).__name__} name='{self.name}' mode='{self.mode}'"
            f"{' [closed]' if self.closed else ''}>"
        )

    def __getattr__(self, attr):
        """Delegate undefined attributes to wrapped stream."""
        return getattr(self._stream, attr)

    def __iter__(self):
        # dunder methods not delegated
        return self._stream.__iter__()

    def close(self):
        self._stream.close()
        self.closed = True


class KeepOpen(StreamWrapper):
    """Wrapper to avoid closing wrapped stream."""

    def close(self):
        """Don't close underlying stream."""
        self._stream.flush()
        self.closed = True


class Stream(StreamWrapper):
    """Manage file resource."""

    def __init__(self, file, mode, *, overwrite=False):
        """
        Ensure file is a stream of the right type, open or wrap if necessary.
            file: stream, string or path-like object
            mode: 'r' or 'w'
            overwrite: allow replacing an existing file
        """
        if not file:
            raise ValueError('No file name, path or stream provided.')
        mode = mode[:1]
        if mode not in ('r', 'w'):
            raise ValueError(f"Unsupported mode '{mode}'.")
        # if a path is provided, open a (binary) stream
        if isinstance(file, (str, Path)):
            name = str(file)
            file = self._open_path(file, mode, overwrite)
        else:
            name = get_name(file)
            # don't close externally provided stream
            file = KeepOpen(file, mode)
        super().__init__(file, mode=mode, name=name)
        self._ensure_rw()
        # text wrapper, created on demand
        self._textstream = None
        if not is_binary(self._stream):
            self._textstream = self._stream

    @staticmethod
    def _open_path(file, mode, overwrite):
        """Open a binary stream on the filesystem."""
        path = Path(file)
        if not overwrite and mode == 'w' and path.exists():
            raise FileExistsError(
                f'Use option `overwrite` to replace existing file `{file}`.'
            )
        logging.debug("Opening file `%s` for mode '%s'.", file, mode)
        return io.open(path, mode + 'b')

    def _ensure_rw(self):
        """Ensure r/w mode is consistent."""
        if self.mode == 'r' and not self._stream.readable():
            raise FileFormatError('Expected readable stream, got writable.')
        if self.mode == 'w' and not self._stream.writable():
            raise FileFormatError('Expected writable stream, got readable.')

    @property
    def text(self):
        """Return underlying text stream or wrap underlying binary stream with utf-8 wrapper."""
        if not self._textstream:
            encoding = 'utf-8-sig' if self.mode == 'r' else 'utf-8'
            self._textstream = io.TextIOWrapper(
                self._stream, encoding=encoding,
                # BDF is ascii; don't break on slightly damaged files
                errors='ignore', newline=None if self.mode == 'r' else '\n',
            )
        return self._textstream

    def close(self):
        """Close stream, flushing any text wrapper."""
        if self.closed:
            return
        if self._textstream and self._textstream is not self._stream:
            # detach so that closing the wrapper won't close an external stream
            self._textstream.flush()
            self._textstream.detach()
        super().close()


def is_binary(stream):
    """Check if stream is binary."""
    if stream.readable():
        # read 0 bytes - the return type will tell us if this is a text or binary stream
        return isinstance(stream.read(0), bytes)
    # write empty bytes - error if text stream
    try:
        stream.write(b'')
    except TypeError:
        return False
    return True


def get_name(stream):
    """Get stream name, if available."""
    try:
        return stream.name
    except AttributeError:
        # not all streams have one (e.g. BytesIO)
        return ''
