"""
Human-readable dumps of fixed-length strings.

The dump shows raw bytes, not a decode: every glyph is taken from the
unshifted character set whatever shift controls the string holds, so the
same bytes always print the same way.
"""
# 3rd party
import wcwidth

# local
from .accessories import name_unicode
from .shift import Mode
from .tables import lookup

__all__ = ('CONTROL_NAMES', 'PLACEHOLDER', 'glyph', 'describe', 'format_debug')

#: shown for control codes and glyphs that do not fill exactly one cell
PLACEHOLDER = '.'

CONTROL_NAMES = {
    0x03: 'STOP', 0x05: 'WHT', 0x07: 'BELL', 0x08: 'DISH', 0x09: 'ENSH',
    0x0A: 'LF', 0x0D: 'RETURN', 0x0E: 'SWLC', 0x11: 'DOWN', 0x12: 'RVS ON',
    0x13: 'HOME', 0x14: 'DEL', 0x1B: 'ESC', 0x1C: 'RED', 0x1D: 'RIGHT',
    0x1E: 'GRN', 0x1F: 'BLU', 0x81: 'ORN', 0x85: 'F1', 0x86: 'F3',
    0x87: 'F5', 0x88: 'F7', 0x89: 'F2', 0x8A: 'F4', 0x8B: 'F6', 0x8C: 'F8',
    0x8D: 'SHIFT RETURN', 0x8E: 'SWUC', 0x90: 'BLK', 0x91: 'UP',
    0x92: 'RVS OFF', 0x93: 'CLR', 0x94: 'INST', 0x95: 'BRN', 0x96: 'LRED',
    0x97: 'GRY1', 0x98: 'GRY2', 0x99: 'LGRN', 0x9A: 'LBLU', 0x9B: 'GRY3',
    0x9C: 'PUR', 0x9D: 'LEFT', 0x9E: 'YEL', 0x9F: 'CYN',
}


def glyph(byte):
    """Return a one-cell glyph for ``byte`` in the unshifted set, or :data:`PLACEHOLDER`."""
    char = lookup(byte, Mode.UNSHIFTED)
    if char is None or wcwidth.wcwidth(char) != 1:
        return PLACEHOLDER
    return char


def describe(byte):
    """
    Return the listing name of control code ``byte``, or its glyph.

    Example::

        >>> describe(0x93), describe(0x01), describe(0x41)
        ('{CLR}', '{^A}', 'A')
    """
    if byte in CONTROL_NAMES:
        return '{{{0}}}'.format(CONTROL_NAMES[byte])
    char = lookup(byte, Mode.UNSHIFTED)
    if char is None:
        return '{{{0}}}'.format(name_unicode(chr(byte)))
    return glyph(byte)


def format_debug(string, width=16):
    """
    Return a hexdump of :class:`~.FixedString` ``string``.

    The first line gives the length, then each row shows the offset, up to
    ``width`` bytes in hex, and their glyphs between bars.
    """
    data = bytes(string)
    lines = ['length: {0}'.format(len(data))]
    for offset in range(0, len(data), width):
        chunk = data[offset:offset + width]
        hexes = ' '.join('{0:02x}'.format(byte) for byte in chunk)
        glyphs = ''.join(glyph(byte) for byte in chunk)
        lines.append('{0:04x}  {1:<{2}}  |{3}|'.format(
            offset, hexes, width * 3 - 1, glyphs))
    return '\n'.join(lines)
