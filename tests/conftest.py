"""Shared test fixtures."""

import random

import pytest

# First sample capture, start byte and FCS stripped (FCS 0x8538, "38 85" on the wire)
SAMPLE_FRAME_HEX = "820327442d2c5768663230028d20cb103407201d82040f26a7e808ff3449f9e9d2e4b28bd7e7c6f1c6df"


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible property checks."""
    return random.Random(0x8408)


@pytest.fixture
def received_message_hex() -> str:
    """Full capture as received from the dongle: A5 + body + FCS."""
    return "a5" + SAMPLE_FRAME_HEX + "3885"
