"""Protocol constants for IM871A HCI checksum handling."""

# ============================================================================
# CRC16
# ============================================================================

# G(x) = x^16 + x^12 + x^5 + 1 (0x1021), bit-reversed for LSB-first shifting
CRC16_POLY = 0x8408
CRC16_INIT_VALUE = 0xFFFF
CRC16_MASK = 0xFFFF

# ============================================================================
# HCI Message Structure
# ============================================================================

START_OF_FRAME = 0xA5
HCI_HEADER_LEN = 3  # CONTROL(1) + MSG_ID(1) + LEN(1)
FCS_LEN = 2  # CRC16, little-endian
HCI_MIN_LEN = HCI_HEADER_LEN + FCS_LEN

ENDPOINT_MASK = 0x0F

# Control field flags (high nibble)
CONTROL_CRC = 0x80  # FCS attached
CONTROL_RSSI = 0x40
CONTROL_TIMESTAMP = 0x20

TIMESTAMP_LEN = 4
RSSI_LEN = 1
MAX_PAYLOAD_LEN = 0xFF
