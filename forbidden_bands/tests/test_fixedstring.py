"""Tests for the fixed-length string container."""

# 3rd party
import pytest

# local
from forbidden_bands.error import ForbiddenBandsError, LengthExceeded, LengthMismatch
from forbidden_bands.fixedstring import SHIFTED_SPACE, SPACE, FillPolicy, FixedString


def test_construct_exact_length():
    string = FixedString(5, [0x41, 0x42, 0x43, 0x44, 0x8E])
    assert len(string) == 5
    assert string.data == b"ABCD\x8e"
    assert bytes(string) == b"ABCD\x8e"
    assert list(string) == [0x41, 0x42, 0x43, 0x44, 0x8E]
    assert string[0] == 0x41
    assert string[1:3] == b"BC"


def test_construct_empty():
    assert len(FixedString(0, b"")) == 0


@pytest.mark.parametrize("data", [b"", b"ABCD", b"ABCDEF"])
def test_construct_length_mismatch(data):
    with pytest.raises(LengthMismatch) as exc_info:
        FixedString(5, data)
    assert exc_info.value.expected == 5
    assert exc_info.value.actual == len(data)
    assert isinstance(exc_info.value, ForbiddenBandsError)
    assert isinstance(exc_info.value, ValueError)


def test_immutable():
    string = FixedString(3, b"ABC")
    with pytest.raises(AttributeError):
        string._data = b"XYZ"
    with pytest.raises(TypeError):
        string[0] = 0x58
    assert string.data == b"ABC"


def test_data_is_a_copy_of_mutable_input():
    raw = bytearray(b"ABC")
    string = FixedString(3, raw)
    raw[0] = 0x58
    assert string.data == b"ABC"


def test_equality_and_hash():
    assert FixedString(3, b"ABC") == FixedString(3, b"ABC")
    assert FixedString(3, b"ABC") != FixedString(3, b"ABD")
    assert FixedString(3, b"ABC") != b"ABC"
    assert hash(FixedString(3, b"ABC")) == hash(FixedString(3, b"ABC"))
    assert len({FixedString(3, b"ABC"), FixedString(3, b"ABC")}) == 1


def test_ordering_is_bytewise():
    strings = [FixedString(2, b"\xa0A"), FixedString(2, b"AB"), FixedString(2, b"AA")]
    assert sorted(strings) == [strings[2], strings[1], strings[0]]
    assert FixedString(2, b"AA") <= FixedString(2, b"AA")
    assert FixedString(2, b"AB") > FixedString(2, b"AA")


def test_ordering_other_type():
    with pytest.raises(TypeError):
        FixedString(2, b"AA") < b"AB"


def test_repr():
    assert repr(FixedString(2, b"A\x0e")) == "FixedString(2, b'A\\x0e')"


def test_rstrip():
    string = FixedString(6, b"DISK\xa0\xa0")
    assert string.rstrip() == b"DISK"
    assert string.rstrip(SHIFTED_SPACE) == b"DISK"
    assert FixedString(4, b"AB  ").rstrip(SPACE) == b"AB"
    assert FixedString(2, b"\xa0\xa0").rstrip() == b""


@pytest.mark.parametrize("policy", list(FillPolicy))
def test_fit_exact(policy):
    assert FixedString.fit(3, b"ABC", policy) == FixedString(3, b"ABC")


def test_fit_fail_short():
    with pytest.raises(LengthMismatch):
        FixedString.fit(5, b"ABC", FillPolicy.FAIL)


@pytest.mark.parametrize("policy", [FillPolicy.FAIL, FillPolicy.PAD])
def test_fit_long_raises(policy):
    with pytest.raises(LengthExceeded) as exc_info:
        FixedString.fit(5, b"ABCDEF", policy)
    assert exc_info.value.limit == 5
    assert exc_info.value.actual == 6


@pytest.mark.parametrize("policy", [FillPolicy.PAD, FillPolicy.TRUNCATE])
def test_fit_pads(policy):
    string = FixedString.fit(5, b"AB", policy, fill=SHIFTED_SPACE)
    assert string.data == b"AB\xa0\xa0\xa0"


def test_fit_default_fill_is_space():
    assert FixedString.fit(4, b"AB", FillPolicy.PAD).data == b"AB  "


def test_fit_truncate():
    assert FixedString.fit(5, b"ABCDEF", FillPolicy.TRUNCATE).data == b"ABCDE"


def test_fit_policy_by_value():
    assert FixedString.fit(4, b"AB", "pad").data == b"AB  "


def test_fit_bad_fill():
    with pytest.raises(ValueError):
        FixedString.fit(4, b"AB", FillPolicy.PAD, fill=0x100)
