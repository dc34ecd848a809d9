"""Tests for the PETSCII mapping tables."""

# 3rd party
import pytest

# local
from forbidden_bands.shift import SHIFT_IN, SHIFT_OUT, Mode
from forbidden_bands.tables import (
    CONTROL_CODES,
    DECODING_TABLES,
    ENCODING_TABLE,
    SHIFTED_TABLE,
    UNSHIFTED_TABLE,
    is_control,
    lookup,
    reverse_lookup,
)


def test_table_sizes():
    assert len(UNSHIFTED_TABLE) == 256
    assert len(SHIFTED_TABLE) == 256
    assert DECODING_TABLES[Mode.UNSHIFTED] is UNSHIFTED_TABLE
    assert DECODING_TABLES[Mode.SHIFTED] is SHIFTED_TABLE


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DECODING_TABLES[Mode.SHIFTED] = UNSHIFTED_TABLE
    with pytest.raises(TypeError):
        ENCODING_TABLE["A"] = ((0x41, Mode.UNSHIFTED),)


def test_control_regions():
    assert CONTROL_CODES == frozenset(range(0x20)) | frozenset(range(0x80, 0xA0))
    for byte in range(256):
        assert is_control(byte) == (byte < 0x20 or 0x80 <= byte < 0xA0)


@pytest.mark.parametrize("mode", list(Mode))
def test_lookup_control_is_none(mode):
    for byte in CONTROL_CODES:
        assert lookup(byte, mode) is None


@pytest.mark.parametrize("mode", list(Mode))
def test_control_passthrough(mode):
    for byte in CONTROL_CODES:
        assert DECODING_TABLES[mode][byte] == chr(byte)


@pytest.mark.parametrize("mode", list(Mode))
def test_ascii_range_shared(mode):
    data = "".join(lookup(byte, mode) for byte in range(0x20, 0x40))
    assert data == " !\"#$%&'()*+,-./0123456789:;<=>?"


def test_unshifted_letters():
    letters = "".join(lookup(b, Mode.UNSHIFTED) for b in range(0x41, 0x5B))
    assert letters == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_shifted_letters():
    lower = "".join(lookup(b, Mode.SHIFTED) for b in range(0x41, 0x5B))
    upper = "".join(lookup(b, Mode.SHIFTED) for b in range(0xC1, 0xDB))
    mirror = "".join(lookup(b, Mode.SHIFTED) for b in range(0x61, 0x7B))
    assert lower == "abcdefghijklmnopqrstuvwxyz"
    assert upper == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert mirror == upper


@pytest.mark.parametrize(
    "byte_val,expected",
    [
        pytest.param(0x40, "@", id="at"),
        pytest.param(0x5C, "£", id="pound"),
        pytest.param(0x5E, "↑", id="up_arrow"),
        pytest.param(0x5F, "←", id="left_arrow"),
        pytest.param(0xA0, "\xa0", id="shifted_space"),
        pytest.param(0xA6, "▒", id="medium_shade"),
        pytest.param(0xB0, "┌", id="box_down_right"),
        pytest.param(0xC0, "─", id="horizontal_line"),
        pytest.param(0xC1, "♠", id="spade"),
        pytest.param(0xC2, "\U0001fb72", id="vertical_eighth_4"),
        pytest.param(0xD3, "♥", id="heart"),
        pytest.param(0xDE, "π", id="pi"),
        pytest.param(0xFF, "π", id="pi_mirror"),
    ],
)
def test_unshifted_glyphs(byte_val, expected):
    assert lookup(byte_val, Mode.UNSHIFTED) == expected


@pytest.mark.parametrize(
    "byte_val,unshifted,shifted",
    [
        pytest.param(0xA9, "◤", "\U0001fb99", id="triangle_vs_fill"),
        pytest.param(0xBA, "\U0001fb7f", "✓", id="corner_vs_check"),
        pytest.param(0xDE, "π", "\U0001fb96", id="pi_vs_checker"),
        pytest.param(0xDF, "◥", "\U0001fb98", id="triangle_vs_diagonal"),
    ],
)
def test_mode_specific_glyphs(byte_val, unshifted, shifted):
    assert lookup(byte_val, Mode.UNSHIFTED) == unshifted
    assert lookup(byte_val, Mode.SHIFTED) == shifted


@pytest.mark.parametrize("mode", list(Mode))
def test_mirror_ranges(mode):
    table = DECODING_TABLES[mode]
    for byte in range(0x60, 0x80):
        assert table[byte] == table[byte + 0x60]
    for byte in range(0xE0, 0xFF):
        assert table[byte] == table[byte - 0x40]
    assert table[0xFF] == table[0xDE]


def test_reverse_lookup_unmapped():
    assert reverse_lookup("é") == ()
    assert reverse_lookup("\x0e") == ()
    assert reverse_lookup("\x8e") == ()


def test_reverse_lookup_order():
    assert reverse_lookup("A") == ((0x41, Mode.UNSHIFTED), (0xC1, Mode.SHIFTED), (0x61, Mode.SHIFTED))
    assert reverse_lookup("a") == ((0x41, Mode.SHIFTED),)
    assert reverse_lookup("π") == ((0xDE, Mode.UNSHIFTED), (0x7E, Mode.UNSHIFTED), (0xFF, Mode.UNSHIFTED))


def test_reverse_lookup_controls():
    assert reverse_lookup("\r") == ((0x0D, Mode.UNSHIFTED), (0x0D, Mode.SHIFTED))


@pytest.mark.parametrize("mode", list(Mode))
def test_every_decode_has_preimage(mode):
    table = DECODING_TABLES[mode]
    for byte in range(256):
        if byte in (SHIFT_OUT, SHIFT_IN):
            continue
        assert (byte, mode) in reverse_lookup(table[byte])


@pytest.mark.parametrize("mode", list(Mode))
def test_one_scalar_per_byte(mode):
    for char in DECODING_TABLES[mode]:
        assert len(char) == 1
