"""IM871A HCI checksum implementation."""

from wmbus_crc.protocol.constants import CRC16_INIT_VALUE, CRC16_POLY, START_OF_FRAME
from wmbus_crc.protocol.crc import (
    CRC16_TABLE,
    build_crc16_table,
    calculate_checksum,
    crc16_bitwise,
    crc16_table,
    hex_checksum,
    verify_crc16,
)
from wmbus_crc.protocol.frames import HciMessage, split_fcs
from wmbus_crc.protocol.hexcodec import HexDecodeError, InvalidHexDigit, OddLengthInput, hex_decode

__all__ = [
    "HciMessage",
    "split_fcs",
    "hex_decode",
    "HexDecodeError",
    "InvalidHexDigit",
    "OddLengthInput",
    "crc16_table",
    "crc16_bitwise",
    "build_crc16_table",
    "calculate_checksum",
    "hex_checksum",
    "verify_crc16",
    "CRC16_TABLE",
    "CRC16_INIT_VALUE",
    "CRC16_POLY",
    "START_OF_FRAME",
]
