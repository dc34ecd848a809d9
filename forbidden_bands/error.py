"""Exceptions raised when building or encoding fixed-length strings."""

__all__ = ('ForbiddenBandsError', 'LengthMismatch', 'LengthExceeded',
           'UnmappableCharacter')


class ForbiddenBandsError(Exception):
    """Base class of all errors raised by this package."""


class LengthMismatch(ForbiddenBandsError, ValueError):
    """Raw bytes do not have the declared fixed length."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            'expected exactly {0} bytes, got {1}'.format(expected, actual))


class LengthExceeded(ForbiddenBandsError, ValueError):
    """Encoded bytes, shift controls included, do not fit the fixed length."""

    def __init__(self, limit, actual):
        self.limit = limit
        self.actual = actual
        super().__init__(
            'encoded {0} bytes, exceeds fixed length of {1}'.format(
                actual, limit))


class UnmappableCharacter(ForbiddenBandsError, ValueError):
    """A character has no PETSCII representation in either character set."""

    def __init__(self, char, position=None):
        self.char = char
        self.position = position
        where = '' if position is None else ' at position {0}'.format(position)
        super().__init__(
            'no PETSCII representation for {0!r} (U+{1:04X}){2}'.format(
                char, ord(char), where))

    @property
    def reason(self):
        """Short reason, suitable for :class:`UnicodeEncodeError`."""
        return 'character maps to <undefined>'
