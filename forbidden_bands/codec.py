"""
Encode and decode PETSCII fixed-length strings.

Decoding is total: every byte value decodes to something.  Printable bytes
become the character of the active character set, shift controls (0x0E,
0x8E) switch the set and produce nothing, and all other control codes pass
through as the C0/C1 control character of the same value (0x0D becomes
``'\\r'``, 0x93 becomes ``'\\x93'``), so no byte is ever dropped.

Encoding mirrors the shift state machine: a character is emitted in the
current character set when it exists there, otherwise a shift control is
written first.  Characters without any PETSCII form raise
:class:`~.error.UnmappableCharacter`.
"""
# std imports
import logging

# local
from . import shift, tables
from .error import UnmappableCharacter
from .fixedstring import FillPolicy, FixedString, SPACE

__all__ = ('decode', 'decode_bytes', 'encode', 'encode_bytes', 'encode_char')

logger = logging.getLogger('forbidden_bands.codec')


def decode_bytes(data):
    """
    Decode any sequence of PETSCII bytes to text.

    Example::

        >>> decode_bytes(b'\\x0eHELLO\\x8e!')
        'hello!'
    """
    return ''.join(tables.DECODING_TABLES[mode][byte]
                   for byte, mode in shift.scan(data))


def decode(string, padding=None):
    """
    Decode :class:`~.FixedString` ``string`` to text.

    When ``padding`` is a byte value, trailing padding bytes are left out,
    as for Commodore file names padded with shifted space (0xA0).
    """
    data = string.data if padding is None else string.rstrip(padding)
    return decode_bytes(data)


def encode_char(char, mode):
    """
    Encode a single character ``char`` while in character set ``mode``.

    Returns the encoded bytes, a shift control first when the character set
    changes, and the mode after them.
    """
    pairs = tables.reverse_lookup(char)
    if not pairs:
        raise UnmappableCharacter(char)
    for byte, candidate in pairs:
        if candidate is mode:
            return bytes([byte]), mode
    byte, wanted = pairs[0]
    return shift.transition(mode, wanted) + bytes([byte]), wanted


def encode_bytes(text):
    """Encode ``text`` to PETSCII bytes of whatever length it needs."""
    output = bytearray()
    mode = shift.INITIAL_MODE
    for position, char in enumerate(text):
        try:
            chunk, mode = encode_char(char, mode)
        except UnmappableCharacter as err:
            raise UnmappableCharacter(char, position) from err
        output.extend(chunk)
    return bytes(output)


def encode(text, length, policy=FillPolicy.FAIL, fill=SPACE):
    """
    Encode ``text`` to a :class:`~.FixedString` of ``length`` bytes.

    Shift controls count towards ``length``.  What happens when the encoded
    bytes do not fit is decided by ``policy``, see :meth:`FixedString.fit`.
    """
    data = encode_bytes(text)
    logger.debug('encoded %d characters to %d bytes', len(text), len(data))
    return FixedString.fit(length, data, policy=policy, fill=fill)
