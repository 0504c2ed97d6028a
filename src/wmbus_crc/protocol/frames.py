"""HCI message construction and parsing for the IM871A dongle."""

import logging
import struct
from typing import Optional

from .constants import (
    CONTROL_CRC,
    CONTROL_RSSI,
    CONTROL_TIMESTAMP,
    ENDPOINT_MASK,
    FCS_LEN,
    HCI_HEADER_LEN,
    HCI_MIN_LEN,
    MAX_PAYLOAD_LEN,
    RSSI_LEN,
    START_OF_FRAME,
    TIMESTAMP_LEN,
)
from .crc import calculate_checksum
from .hexcodec import HexInput, hex_decode

logger = logging.getLogger(__name__)


def split_fcs(data: bytes) -> tuple[bytes, int]:
    """
    Split the trailing FCS from a message body.

    Args:
        data: Message bytes ending with the two FCS bytes

    Returns:
        (body, fcs) with the FCS decoded little-endian

    Raises:
        ValueError: If data is shorter than the FCS
    """
    if len(data) < FCS_LEN:
        raise ValueError(f"Message too short for FCS: {len(data)} bytes")
    return data[:-FCS_LEN], struct.unpack("<H", data[-FCS_LEN:])[0]


class HciMessage:
    """
    Represents an IM871A HCI message.

    Message structure:
    [A5][CONTROL][MSG_ID][LEN][PAYLOAD...][TIMESTAMP(4)][RSSI(1)][FCS_L][FCS_H]

    TIMESTAMP, RSSI and FCS are present only when the matching control flag
    is set. The CRC covers CONTROL through the last trailer byte.

    Attributes:
        control: Control field (flags in high nibble, endpoint in low nibble)
        message_id: Message identifier
        payload: Payload bytes (LEN bytes)
        trailer: Optional timestamp/RSSI bytes following the payload
        fcs: FCS carried by the message, or None if unsent or not attached
    """

    def __init__(
        self,
        control: int,
        message_id: int,
        payload: bytes = b"",
        trailer: bytes = b"",
        fcs: Optional[int] = None,
    ):
        if len(payload) > MAX_PAYLOAD_LEN:
            raise ValueError(f"Payload too long: {len(payload)} bytes (max {MAX_PAYLOAD_LEN})")
        self.control = control
        self.message_id = message_id
        self.payload = payload
        self.trailer = trailer
        self.fcs = fcs

    @property
    def endpoint(self) -> int:
        """Endpoint id from the control field."""
        return self.control & ENDPOINT_MASK

    @property
    def has_timestamp(self) -> bool:
        return bool(self.control & CONTROL_TIMESTAMP)

    @property
    def has_rssi(self) -> bool:
        return bool(self.control & CONTROL_RSSI)

    @property
    def has_crc_field(self) -> bool:
        return bool(self.control & CONTROL_CRC)

    @property
    def trailer_len(self) -> int:
        """Trailer length implied by the timestamp and RSSI flags."""
        return (TIMESTAMP_LEN if self.has_timestamp else 0) + (RSSI_LEN if self.has_rssi else 0)

    @property
    def checksum_data(self) -> bytes:
        """Bytes covered by the CRC (start byte and FCS excluded)."""
        return bytes([self.control, self.message_id, len(self.payload)]) + self.payload + self.trailer

    @property
    def checksum(self) -> int:
        """FCS value calculated from the message contents."""
        return calculate_checksum(self.checksum_data)

    @property
    def fcs_valid(self) -> bool:
        """True if the carried FCS matches the calculated one."""
        return self.fcs is not None and self.fcs == self.checksum

    def to_bytes(self) -> bytes:
        """
        Convert message to bytes for transmission.

        A fresh FCS is calculated when the CRC flag is set; any carried FCS
        is ignored.

        Example:
            >>> msg = HciMessage(control=0x82, message_id=0x03, payload=b"\\x44")
            >>> msg.to_bytes()[0] == 0xA5  # START_OF_FRAME
            True
        """
        body = self.checksum_data
        fcs = struct.pack("<H", calculate_checksum(body)) if self.has_crc_field else b""
        return bytes([START_OF_FRAME]) + body + fcs

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional["HciMessage"]:
        """
        Parse a message from received bytes.

        The FCS is not checked here; inspect ``fcs_valid`` on the result.

        Args:
            data: Raw message bytes, start byte through FCS

        Returns:
            Parsed HciMessage, or None if malformed
        """
        if len(data) < HCI_HEADER_LEN + 1:
            logger.debug(f"Message too short: {len(data)} bytes")
            return None

        if data[0] != START_OF_FRAME:
            logger.debug(f"Bad start byte 0x{data[0]:02X}")
            return None

        if data[1] & CONTROL_CRC:
            if len(data) < HCI_MIN_LEN + 1:
                logger.debug(f"Message too short for FCS: {len(data)} bytes")
                return None
            body, fcs = split_fcs(data[1:])
        else:
            body, fcs = data[1:], None

        length = body[2]
        payload_end = HCI_HEADER_LEN + length
        if len(body) < payload_end:
            logger.debug(f"Length field {length} exceeds body of {len(body)} bytes")
            return None

        msg = cls(
            control=body[0],
            message_id=body[1],
            payload=body[HCI_HEADER_LEN:payload_end],
            trailer=body[payload_end:],
            fcs=fcs,
        )
        if len(msg.trailer) != msg.trailer_len:
            logger.debug(f"Trailer of {len(msg.trailer)} bytes, control 0x{msg.control:02X} implies {msg.trailer_len}")
            return None

        return msg

    @classmethod
    def from_hex(cls, text: HexInput, *, strict: bool = True) -> Optional["HciMessage"]:
        """
        Parse a message from a hex capture.

        Raises:
            HexDecodeError: In strict mode, if text is not valid hex
        """
        return cls.from_bytes(hex_decode(text, strict=strict))

    def __repr__(self) -> str:
        """String representation for debugging."""
        fcs = "None" if self.fcs is None else f"0x{self.fcs:04X}"
        return (
            f"HciMessage(ctrl=0x{self.control:02X}, ep={self.endpoint}, id=0x{self.message_id:02X}, "
            f"payload_len={len(self.payload)}, fcs={fcs})"
        )
