"""Tests for the usb2snes wire codec and reply structures."""

from __future__ import annotations

import json

import msgspec
import pytest

from snesbridge.errors import InvalidReplyError
from snesbridge.protocol import protocol
from snesbridge.protocol.encoding import (
    decode_response,
    encode_request,
    format_address,
    format_hex,
)
from snesbridge.protocol.protocol import Opcode, Space
from snesbridge.protocol.structures import DeviceInfo, MemoryWrite, Request, Response


def test_memory_map_constants() -> None:
    assert protocol.ROM_START == 0x000000
    assert protocol.WRAM_START == 0xF50000
    assert protocol.WRAM_SIZE == 0x020000
    assert protocol.WRAM_END == 0xF70000
    assert protocol.SRAM_START == 0xE00000


def test_request_serialises_fields_in_wire_order() -> None:
    text = encode_request(Request(opcode=Opcode.MENU))

    assert text == '{"Opcode":"Menu","Space":"SNES","Operands":[]}'


def test_request_with_operands() -> None:
    request = Request(
        opcode=Opcode.PUT_ADDRESS,
        space=Space.CMD,
        operands=("2C00", "1F", "2C00", "1"),
    )

    assert json.loads(encode_request(request)) == {
        "Opcode": "PutAddress",
        "Space": "CMD",
        "Operands": ["2C00", "1F", "2C00", "1"],
    }


@pytest.mark.parametrize(
    ("opcode", "wire_name"),
    [
        (Opcode.DEVICE_LIST, "DeviceList"),
        (Opcode.ATTACH, "Attach"),
        (Opcode.INFO, "Info"),
        (Opcode.NAME, "Name"),
        (Opcode.BOOT, "Boot"),
        (Opcode.MENU, "Menu"),
        (Opcode.RESET, "Reset"),
        (Opcode.GET_ADDRESS, "GetAddress"),
        (Opcode.PUT_ADDRESS, "PutAddress"),
    ],
)
def test_opcode_wire_names(opcode: Opcode, wire_name: str) -> None:
    assert json.loads(encode_request(Request(opcode=opcode)))["Opcode"] == wire_name


def test_format_address_pads_to_six_digits() -> None:
    assert format_address(0x7E0010) == "7E0010"
    assert format_address(0xF50000) == "F50000"
    assert format_address(0x10) == "000010"


def test_format_hex_is_unpadded_uppercase() -> None:
    assert format_hex(31) == "1F"
    assert format_hex(0) == "0"
    assert format_hex(0x1000) == "1000"


def test_format_rejects_negative_values() -> None:
    with pytest.raises(ValueError):
        format_address(-1)
    with pytest.raises(ValueError):
        format_hex(-5)


def test_format_address_rejects_values_beyond_24_bits() -> None:
    assert format_address(protocol.MAX_SNES_ADDRESS) == "FFFFFF"
    with pytest.raises(ValueError):
        format_address(0x1000000)


def test_decode_response_accepts_text_and_bytes() -> None:
    payload = '{"Results":["SD2SNES COM3","EMUNWA"]}'

    assert decode_response(payload).results == ["SD2SNES COM3", "EMUNWA"]
    assert decode_response(memoryview(payload.encode())).results == [
        "SD2SNES COM3",
        "EMUNWA",
    ]


def test_decode_response_ignores_unknown_fields_and_defaults_results() -> None:
    assert decode_response('{"Extra":1}').results == []


def test_decode_response_rejects_malformed_payload() -> None:
    with pytest.raises(msgspec.DecodeError):
        decode_response(b"not json")
    with pytest.raises(msgspec.DecodeError):
        decode_response('{"Results":"oops"}')


def test_device_info_without_flags() -> None:
    info = DeviceInfo.from_response(Response(results=["1.9.0", "usb2snes", "/games/smw.sfc"]))

    assert info.firmware_version == "1.9.0"
    assert info.version_string == "usb2snes"
    assert info.rom == "/games/smw.sfc"
    assert info.flags == ""


def test_device_info_takes_flags_from_fourth_result_when_five_present() -> None:
    info = DeviceInfo.from_response(
        Response(results=["1.9.0", "usb2snes", "smw.sfc", "NO_ROM_WRITE", "NO_CONTROL_CMD"])
    )

    assert info.flags == "NO_ROM_WRITE"


def test_device_info_ignores_lone_fourth_result() -> None:
    info = DeviceInfo.from_response(Response(results=["1.9.0", "usb2snes", "smw.sfc", "X"]))

    assert info.flags == ""


def test_device_info_rejects_short_reply() -> None:
    with pytest.raises(InvalidReplyError):
        DeviceInfo.from_response(Response(results=["1.9.0", "usb2snes"]))


def test_memory_write_end() -> None:
    assert MemoryWrite(address=0xF50010, data=b"\x01\x02").end == 0xF50012
