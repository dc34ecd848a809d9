"""
PETSCII to C64 screen code conversion.

Screen memory does not store PETSCII: the VIC-II reads screen codes, which
index the character ROM directly.  Screen codes 0x00-0x7F are the 128 glyphs
of the active character set and bit 7 selects reverse video.  Both shift
states share the same screen codes; the character set alone decides whether
screen code 0x01 shows ``A`` or ``a``.
"""
# local
from . import shift
from .tables import is_control

__all__ = ('SCREEN_CODE_TABLE', 'petscii_to_screen_code',
           'screen_code_to_petscii', 'to_screen_codes')

# Offsets added to a PETSCII byte, by 32-byte range.  The control ranges
# land on reverse-video letters, which is how quote mode lists them.
_RANGE_OFFSETS = (0x80, 0x00, -0x40, -0x20, 0x40, -0x40, -0x80, -0x80)


def _build_screen_code_table():
    table = [(code + _RANGE_OFFSETS[code // 32]) & 0xFF for code in range(256)]
    # pi repeats 0xDE, not 0xDF
    table[0xFF] = 0x5E
    return tuple(table)


SCREEN_CODE_TABLE = _build_screen_code_table()


def petscii_to_screen_code(byte, quote_mode=False):
    """
    Return the screen code showing PETSCII ``byte``.

    Control codes are not shown on screen and raise :class:`ValueError`,
    unless ``quote_mode`` asks for their reverse-video listing form.
    """
    if is_control(byte) and not quote_mode:
        raise ValueError('control code 0x{0:02X} has no screen code'.format(byte))
    return SCREEN_CODE_TABLE[byte]


def screen_code_to_petscii(code):
    """
    Return ``(byte, reverse)`` for screen code ``code``.

    ``byte`` is the canonical PETSCII byte of the glyph, ``reverse`` whether
    the screen code is in reverse video.
    """
    base = code & 0x7F
    if base < 0x20:
        byte = base + 0x40
    elif base < 0x40:
        byte = base
    elif base < 0x60:
        byte = base + 0x80
    else:
        byte = base + 0x40
    return byte, bool(code & 0x80)


def to_screen_codes(string, quote_mode=False):
    """
    Return the screen codes showing :class:`~.FixedString` ``string``.

    Shift controls select the character set and take no screen cell.
    """
    return bytes(petscii_to_screen_code(byte, quote_mode=quote_mode)
                 for byte, _ in shift.scan(string))
