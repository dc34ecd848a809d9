"""
PETSCII shift state machine.

A Commodore screen shows one of two character sets at a time.  The active
set is switched in-band: byte 0x0E selects the shifted (lowercase) set and
byte 0x8E selects the unshifted (uppercase and graphics) set.  Both bytes
are consumed by the state machine and produce no character.

The mode is always a local value threaded through a single scan, starting at
:attr:`Mode.UNSHIFTED`.  Nothing here keeps state between calls, so every
string decodes from its own bytes alone, and a string that ends while still
shifted is perfectly valid.
"""
# std imports
import enum
from typing import Iterable, Iterator, Tuple

__all__ = ('Mode', 'SHIFT_OUT', 'SHIFT_IN', 'SHIFT_CODES', 'INITIAL_MODE',
           'step', 'scan', 'transition')


class Mode(enum.Enum):
    """PETSCII character set selected by the shift state."""

    #: uppercase letters and block graphics, the power-on default
    UNSHIFTED = 'unshifted'
    #: lowercase and uppercase letters, fewer graphics
    SHIFTED = 'shifted'


#: switch to the shifted (lowercase) character set
SHIFT_OUT = 0x0E
#: switch to the unshifted (uppercase/graphics) character set
SHIFT_IN = 0x8E

SHIFT_CODES = {SHIFT_OUT: Mode.SHIFTED, SHIFT_IN: Mode.UNSHIFTED}

INITIAL_MODE = Mode.UNSHIFTED

_ENTER = {Mode.SHIFTED: SHIFT_OUT, Mode.UNSHIFTED: SHIFT_IN}


def step(mode: Mode, byte: int) -> Tuple[Mode, bool]:
    """
    Advance the state machine by one ``byte``.

    Returns the mode after ``byte`` and whether ``byte`` was consumed as a
    shift control.  Any other byte leaves the mode unchanged and should be
    looked up under the returned mode.
    """
    try:
        return SHIFT_CODES[byte], True
    except KeyError:
        return mode, False


def scan(data: Iterable[int]) -> Iterator[Tuple[int, Mode]]:
    """
    Yield ``(byte, mode)`` for every data byte of ``data``.

    Shift controls are consumed and not yielded.  ``mode`` is the character
    set active when the byte is read.  Example::

        >>> [(hex(b), m.name) for b, m in scan(b'A\\x0eA\\x8eA')]
        [('0x41', 'UNSHIFTED'), ('0x41', 'SHIFTED'), ('0x41', 'UNSHIFTED')]
    """
    mode = INITIAL_MODE
    for byte in data:
        mode, consumed = step(mode, byte)
        if not consumed:
            yield byte, mode


def transition(current: Mode, wanted: Mode) -> bytes:
    """Return the control bytes that move the encoder from ``current`` to ``wanted``."""
    if current is wanted:
        return b''
    return bytes([_ENTER[wanted]])
