"""
Fixed-length 8-bit strings.

Commodore disk directories and file headers store names and labels in
records of a fixed size.  :class:`FixedString` holds exactly one such record
and refuses any other length; padding or truncation only ever happens when
the caller asks for it through :meth:`FixedString.fit`.
"""
# std imports
import enum
import functools
import logging

# local
from .error import LengthExceeded, LengthMismatch

__all__ = ('FixedString', 'FillPolicy', 'SPACE', 'SHIFTED_SPACE')

#: PETSCII space, the usual fill byte for text records
SPACE = 0x20
#: PETSCII shifted space, the fill byte of Commodore DOS file names
SHIFTED_SPACE = 0xA0

logger = logging.getLogger('forbidden_bands.fixedstring')


class FillPolicy(enum.Enum):
    """What to do when data is not exactly the fixed length."""

    #: never pad nor truncate
    FAIL = 'fail'
    #: pad short data with the fill byte, refuse long data
    PAD = 'pad'
    #: pad short data with the fill byte, cut long data at the fixed length
    TRUNCATE = 'truncate'


@functools.total_ordering
class FixedString(object):
    """
    An immutable string of exactly ``length`` 8-bit code units.

    Equality, ordering and hashing are byte-wise.  Example::

        >>> FixedString(3, b'ABC')
        FixedString(3, b'ABC')
        >>> FixedString(3, b'AB')
        Traceback (most recent call last):
          ...
        forbidden_bands.error.LengthMismatch: expected exactly 3 bytes, got 2
    """

    __slots__ = ('_data',)

    def __init__(self, length, data):
        data = bytes(data)
        if len(data) != length:
            raise LengthMismatch(length, len(data))
        self._data = data

    @classmethod
    def fit(cls, length, data, policy=FillPolicy.FAIL, fill=SPACE):
        """
        Create a string of ``length`` from ``data`` under ``policy``.

        Short ``data`` is padded with ``fill`` under ``PAD`` and
        ``TRUNCATE``, long ``data`` is cut only under ``TRUNCATE``.  The
        ``FAIL`` policy raises :class:`LengthMismatch` for short data, and
        both ``FAIL`` and ``PAD`` raise :class:`LengthExceeded` for long data.
        """
        data = bytes(data)
        policy = FillPolicy(policy)
        if not 0 <= fill <= 0xFF:
            raise ValueError('fill must be a byte value, got {0!r}'.format(fill))
        if len(data) > length:
            if policy is not FillPolicy.TRUNCATE:
                raise LengthExceeded(length, len(data))
            logger.debug('truncate %d bytes to %d', len(data), length)
            data = data[:length]
        elif len(data) < length and policy is not FillPolicy.FAIL:
            logger.debug('pad %d bytes to %d with 0x%02X',
                         len(data), length, fill)
            data = data + bytes([fill]) * (length - len(data))
        return cls(length, data)

    @property
    def data(self):
        """The raw code units, as :class:`bytes`."""
        return self._data

    def rstrip(self, fill=SHIFTED_SPACE):
        """Return the raw bytes without trailing ``fill`` padding."""
        return self._data.rstrip(bytes([fill]))

    def __setattr__(self, name, value):
        if hasattr(self, '_data'):
            raise AttributeError('FixedString is immutable')
        object.__setattr__(self, name, value)

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __bytes__(self):
        return self._data

    def __eq__(self, other):
        if not isinstance(other, FixedString):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other):
        if not isinstance(other, FixedString):
            return NotImplemented
        return self._data < other._data

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return '{0}({1}, {2!r})'.format(
            type(self).__name__, len(self._data), self._data)
