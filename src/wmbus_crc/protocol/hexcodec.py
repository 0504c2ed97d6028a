"""ASCII hex-pair decoding for captured HCI messages."""

import logging
from typing import Optional, Union

logger = logging.getLogger(__name__)

HexInput = Union[str, bytes, bytearray]

_ORD_0 = ord("0")
_ORD_A = ord("A")
_ORD_LOWER_A = ord("a")


class HexDecodeError(ValueError):
    """Raised when hex input cannot be decoded."""


class InvalidHexDigit(HexDecodeError):
    """Raised in strict mode for a character outside 0-9, A-F, a-f."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid hex digit {char!r} at position {position}")


class OddLengthInput(HexDecodeError):
    """Raised in strict mode when the character count is odd."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Hex input length must be even, got {length}")


def _strict_nibble(code: int, position: int) -> int:
    if _ORD_0 <= code <= _ORD_0 + 9:
        return code - _ORD_0
    if _ORD_A <= code <= _ORD_A + 5:
        return code - _ORD_A + 10
    if _ORD_LOWER_A <= code <= _ORD_LOWER_A + 5:
        return code - _ORD_LOWER_A + 10
    raise InvalidHexDigit(chr(code), position)


def _legacy_nibble(code: int) -> int:
    # Anything at or above 'A' counts as a letter digit; callers mask the result
    return code - _ORD_A + 10 if code >= _ORD_A else code - _ORD_0


def hex_decode(data: HexInput, byte_count: Optional[int] = None, *, strict: bool = True) -> bytes:
    """
    Decode ASCII hex-digit pairs into raw bytes.

    The first digit of each pair is the high nibble, the second the low
    nibble. ``byte_count`` is the number of characters to consume, as the
    receive path hands over the character length of the capture; half as
    many bytes are produced.

    Args:
        data: Hex characters as str or ASCII bytes
        byte_count: Characters to consume (defaults to ``len(data)``)
        strict: Validate digits and length. When False, reproduce the
            historical permissive decoder bit-for-bit: no validation, any
            character >= 'A' is a letter digit, a trailing odd character
            is dropped.

    Returns:
        Decoded bytes

    Raises:
        InvalidHexDigit: Strict mode, non-hex character
        OddLengthInput: Strict mode, odd character count
        HexDecodeError: ``byte_count`` exceeds the input length or is negative

    Example:
        >>> hex_decode("4142", 4)
        b'AB'
    """
    codes = [ord(c) for c in data] if isinstance(data, str) else bytes(data)

    if byte_count is None:
        byte_count = len(codes)
    if byte_count < 0 or byte_count > len(codes):
        raise HexDecodeError(f"byte_count {byte_count} out of range for input of length {len(codes)}")

    if strict and byte_count % 2:
        logger.debug(f"Rejecting odd-length hex input ({byte_count} chars)")
        raise OddLengthInput(byte_count)

    out = bytearray()
    for pos in range(0, byte_count - 1, 2):
        if strict:
            hi = _strict_nibble(codes[pos], pos)
            lo = _strict_nibble(codes[pos + 1], pos + 1)
        else:
            hi = _legacy_nibble(codes[pos])
            lo = _legacy_nibble(codes[pos + 1])
        out.append(((hi << 4) & 0xFF) | (lo & 0x0F))

    return bytes(out)
