import logging

import pytest

import wsprenc.api
from wsprenc import EncodeError, InvalidCallsign, InvalidChar, InvalidLocator, InvalidPower, Station, WsprConstants


def test_station_is_frozen():
    st = Station("VK3XE ", "QF22", 23)
    with pytest.raises(AttributeError):
        st.power_dbm = 30


def test_invalid_callsign_before_anything_else():
    with pytest.raises(InvalidCallsign):
        Station("VK3X", "!!", 200).encode()


def test_invalid_char_carries_byte():
    with pytest.raises(InvalidChar) as exc:
        Station("VK3XE ", "QF2#", 23).encode()
    assert exc.value.byte == ord("#")


@pytest.mark.parametrize(
    "station, err",
    [
        (Station("VK3XE ", "QF2", 23), InvalidLocator),
        (Station("VK3XE ", "QF22", 61), InvalidPower),
        (Station("VK3XE ", "QF22", -5), InvalidPower),
    ],
)
def test_other_station_errors(station, err):
    with pytest.raises(err):
        station.encode()
    with pytest.raises(EncodeError):
        station.message_str()


def test_failed_input_never_reaches_fec(monkeypatch):
    def boom(_msg):
        raise AssertionError("convolve called after an encode error")

    monkeypatch.setattr(wsprenc.api, "convolve", boom)
    with pytest.raises(InvalidChar):
        Station("VK3XE ", "ZZ22", 23).encode()


def test_encode_logs_packed_message(caplog):
    with caplog.at_level(logging.DEBUG, logger="wsprenc.api"):
        Station("VK3XE ", "QF22", 23).encode()
    assert "D5 50 1C E1 85 15 C0" in caplog.text


def test_constants():
    const = WsprConstants()
    assert const.num_symbols == 162
    assert const.num_tones == 4
    assert const.message_bits == const.call_bits + const.m_bits
    assert const.message_bytes * 8 - const.message_bits == 6


def test_bad_locator_with_bad_power_is_invalid_char():
    with pytest.raises(InvalidChar) as exc:
        Station("VK3XE ", "ZZ22", 99).encode()
    assert exc.value.byte == ord("Z")


def test_float_power_is_invalid_power():
    with pytest.raises(InvalidPower):
        Station("VK3XE ", "QF22", 23.0).encode()


def test_message_not_rendered_without_debug(monkeypatch, caplog):
    def boom(_msg):
        raise AssertionError("message_str rendered with debug logging off")

    monkeypatch.setattr(wsprenc.api, "message_str", boom)
    with caplog.at_level(logging.INFO, logger="wsprenc.api"):
        symbols = Station("VK3XE ", "QF22", 23).encode()
    assert symbols.shape == (162,)
