"""Accessory functions."""
# std imports
import logging

__all__ = ('name_unicode', 'make_logger', 'parse_byte')


def name_unicode(ucs):
    """Return 7-bit ascii printable of any string."""
    # more or less the same as curses.ascii.unctrl -- but curses
    # module is conditionally excluded from many python distributions!
    bits = ord(ucs)
    if 32 <= bits <= 126:
        # ascii printable as one cell, as-is
        rep = chr(bits)
    elif bits == 127:
        rep = "^?"
    elif bits < 32:
        rep = "^" + chr(((bits & 0x7f) | 0x20) + 0x20)
    else:
        rep = r'\x{:02x}'.format(bits)
    return rep


def parse_byte(value):
    """
    Parse a byte value given as decimal, ``0x``/``$`` hex, or bare hex.

    Example::

        >>> parse_byte('0xa0'), parse_byte('$A0'), parse_byte('160')
        (160, 160, 160)
    """
    text = value.strip()
    if text.startswith('$'):
        number = int(text[1:], 16)
    elif text.lower().startswith('0x'):
        number = int(text, 16)
    elif text.isdigit():
        number = int(text, 10)
    else:
        number = int(text, 16)
    if not 0 <= number <= 0xFF:
        raise ValueError('not a byte value: {0!r}'.format(value))
    return number


_DEFAULT_LOGFMT = ' '.join(('%(asctime)s',
                            '%(levelname)s',
                            '%(filename)s:%(lineno)d',
                            '%(message)s'))


def make_logger(name, loglevel='info', logfile=None, logfmt=_DEFAULT_LOGFMT):
    """Create and return simple logger for given arguments."""
    lvl = getattr(logging, loglevel.upper())
    logging.getLogger().setLevel(lvl)

    _cfg = {'format': logfmt}
    if logfile:
        _cfg['filename'] = logfile
    logging.basicConfig(**_cfg)
    return logging.getLogger(name)
