# 3rd party
import pytest

# local
from forbidden_bands.accessories import name_unicode, parse_byte


def test_name_unicode():
    """ Test mapping of ascii table to name_unicode result. """
    given_expected = {
        chr(0): r'^@',
        chr(1): r'^A',
        chr(26): r'^Z',
        chr(31): r'^_',
        chr(32): r' ',
        chr(126): r'~',
        chr(127): r'^?',
        chr(128): r'\x80',
        chr(255): r'\xff',
    }
    for given, expected in sorted(given_expected.items()):
        # exercise,
        result = name_unicode(given)

        # verify,
        assert result == expected


def test_parse_byte():
    """ Test the accepted spellings of a byte value. """
    given_expected = {
        '0xa0': 0xA0,
        '0XA0': 0xA0,
        '$A0': 0xA0,
        'a0': 0xA0,
        '160': 160,
        '32': 32,
        ' 0x20 ': 0x20,
    }
    for given, expected in sorted(given_expected.items()):
        assert parse_byte(given) == expected


@pytest.mark.parametrize("value", ["0x100", "256", "-1", "zz", ""])
def test_parse_byte_rejects(value):
    with pytest.raises(ValueError):
        parse_byte(value)
