"""Tests for the PETSCII shift state machine."""

# 3rd party
import pytest

# local
from forbidden_bands.shift import (
    INITIAL_MODE,
    SHIFT_IN,
    SHIFT_OUT,
    Mode,
    scan,
    step,
    transition,
)


def test_initial_mode_is_unshifted():
    assert INITIAL_MODE is Mode.UNSHIFTED


@pytest.mark.parametrize(
    "mode,byte,expected",
    [
        pytest.param(Mode.UNSHIFTED, SHIFT_OUT, (Mode.SHIFTED, True), id="shift_out"),
        pytest.param(Mode.SHIFTED, SHIFT_IN, (Mode.UNSHIFTED, True), id="shift_in"),
        pytest.param(Mode.SHIFTED, SHIFT_OUT, (Mode.SHIFTED, True), id="shift_out_again"),
        pytest.param(Mode.UNSHIFTED, SHIFT_IN, (Mode.UNSHIFTED, True), id="shift_in_again"),
        pytest.param(Mode.SHIFTED, 0x41, (Mode.SHIFTED, False), id="data_shifted"),
        pytest.param(Mode.UNSHIFTED, 0x0D, (Mode.UNSHIFTED, False), id="other_control"),
    ],
)
def test_step(mode, byte, expected):
    assert step(mode, byte) == expected


def test_scan_without_controls_is_unshifted():
    data = bytes(b for b in range(256) if b not in (SHIFT_OUT, SHIFT_IN))
    assert list(scan(data)) == [(b, Mode.UNSHIFTED) for b in data]


def test_scan_consumes_shift_bytes():
    result = list(scan(bytes([SHIFT_OUT, 0x41, SHIFT_IN, 0x42])))
    assert result == [(0x41, Mode.SHIFTED), (0x42, Mode.UNSHIFTED)]


def test_scan_ends_shifted():
    result = list(scan(bytes([0x41, SHIFT_OUT, 0x42])))
    assert result == [(0x41, Mode.UNSHIFTED), (0x42, Mode.SHIFTED)]


def test_scan_is_stateless_across_calls():
    list(scan(bytes([SHIFT_OUT])))
    assert list(scan(b"A")) == [(0x41, Mode.UNSHIFTED)]


def test_scan_only_controls():
    assert list(scan(bytes([SHIFT_OUT, SHIFT_IN, SHIFT_OUT]))) == []


@pytest.mark.parametrize(
    "current,wanted,expected",
    [
        pytest.param(Mode.UNSHIFTED, Mode.UNSHIFTED, b"", id="stay_unshifted"),
        pytest.param(Mode.SHIFTED, Mode.SHIFTED, b"", id="stay_shifted"),
        pytest.param(Mode.UNSHIFTED, Mode.SHIFTED, b"\x0e", id="to_shifted"),
        pytest.param(Mode.SHIFTED, Mode.UNSHIFTED, b"\x8e", id="to_unshifted"),
    ],
)
def test_transition(current, wanted, expected):
    assert transition(current, wanted) == expected
