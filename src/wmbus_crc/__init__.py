"""CRC16 verification for IM871A wireless M-Bus HCI messages."""

__version__ = "0.1.0"
