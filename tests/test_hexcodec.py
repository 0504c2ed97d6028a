"""Unit tests for hex-pair decoding."""

import pytest

from wmbus_crc.protocol.hexcodec import HexDecodeError, InvalidHexDigit, OddLengthInput, hex_decode


class TestStrictDecode:
    """Tests for the validating decoder (default)."""

    def test_decode_basic(self):
        assert hex_decode("4142", 4) == bytes([0x41, 0x42])

    def test_decode_default_count(self):
        """Test byte_count defaults to the whole input."""
        assert hex_decode("a5820327") == b"\xa5\x82\x03\x27"

    def test_decode_partial_count(self):
        """Test only byte_count characters are consumed."""
        assert hex_decode("41424344", 4) == b"AB"

    @pytest.mark.parametrize("text", ["abcdef", "ABCDEF", "aBcDeF"])
    def test_decode_either_case(self, text):
        assert hex_decode(text) == b"\xab\xcd\xef"

    def test_decode_all_digits(self):
        assert hex_decode("0123456789") == b"\x01\x23\x45\x67\x89"

    def test_decode_bytes_input(self):
        assert hex_decode(b"4142") == b"AB"
        assert hex_decode(bytearray(b"ff00")) == b"\xff\x00"

    def test_decode_empty(self):
        assert hex_decode("") == b""
        assert hex_decode("4142", 0) == b""

    def test_decode_odd_length(self):
        with pytest.raises(OddLengthInput) as exc_info:
            hex_decode("414", 3)
        assert exc_info.value.length == 3

    @pytest.mark.parametrize(
        "text,char,position",
        [
            ("4G", "G", 1),
            ("g0", "g", 0),
            ("41 2", " ", 2),
            ("41:2", ":", 2),
            ("é0", "é", 0),
        ],
    )
    def test_decode_invalid_digit(self, text, char, position):
        with pytest.raises(InvalidHexDigit) as exc_info:
            hex_decode(text)
        assert exc_info.value.char == char
        assert exc_info.value.position == position

    def test_errors_are_value_errors(self):
        """Test callers can catch decode failures as ValueError."""
        assert issubclass(InvalidHexDigit, HexDecodeError)
        assert issubclass(OddLengthInput, HexDecodeError)
        assert issubclass(HexDecodeError, ValueError)


class TestLegacyDecode:
    """Tests for the permissive historical decoder."""

    def test_decode_basic(self):
        assert hex_decode("4142", 4, strict=False) == b"AB"

    def test_decode_lowercase(self):
        """Test lowercase digits decode correctly thanks to nibble masking."""
        assert hex_decode("abcdef", strict=False) == b"\xab\xcd\xef"

    def test_decode_odd_length_drops_last(self):
        assert hex_decode("414", 3, strict=False) == b"A"
        assert hex_decode("4", strict=False) == b""

    def test_letters_past_f_are_not_rejected(self):
        """Test 'G' is taken as nibble 16 and masked instead of failing."""
        assert hex_decode("G0", strict=False) == b"\x00"
        assert hex_decode("0G", strict=False) == b"\x00"

    def test_punctuation_is_not_rejected(self):
        """Test characters below '0' wrap instead of failing."""
        assert hex_decode(" 1", strict=False) == b"\x01"

    def test_matches_strict_on_valid_input(self):
        text = "82032d442d2c5768663230028d207cc2dd0320f8325c5952304521c530f237b6"
        assert hex_decode(text, strict=False) == hex_decode(text)


class TestByteCount:
    """Tests for byte_count bounds."""

    @pytest.mark.parametrize("strict", [True, False])
    def test_count_exceeds_input(self, strict):
        with pytest.raises(HexDecodeError):
            hex_decode("4142", 6, strict=strict)

    @pytest.mark.parametrize("strict", [True, False])
    def test_negative_count(self, strict):
        with pytest.raises(HexDecodeError):
            hex_decode("4142", -2, strict=strict)
