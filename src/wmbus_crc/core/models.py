"""Data models for checksum reports."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ChecksumResult(BaseModel):
    """Checksum of one message computed by both CRC engines."""

    name: str = Field(..., min_length=1, description="Sample name")
    frame: str = Field(..., description="Hex text of the bytes covered by the CRC")
    table_crc: int = Field(..., ge=0, le=0xFFFF, description="FCS from the table-driven engine")
    bitwise_crc: int = Field(..., ge=0, le=0xFFFF, description="FCS from the bitwise engine")
    expected: int | None = Field(None, ge=0, le=0xFFFF, description="Documented FCS value")

    @property
    def agree(self) -> bool:
        """True if both engines produced the same value."""
        return self.table_crc == self.bitwise_crc

    @property
    def matches(self) -> bool:
        """True if the engines agree with each other and the documented value (when known)."""
        return self.agree and (self.expected is None or self.table_crc == self.expected)

    @property
    def fcs_hex(self) -> str:
        """Checksum as hex in wire order (low byte first)."""
        return self.table_crc.to_bytes(2, "little").hex()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "sample-0",
                "frame": "820327442d2c5768663230028d20cb10...",
                "table_crc": 0x8538,
                "bitwise_crc": 0x8538,
                "expected": 0x8538,
            }
        }
    )


class DemoReport(BaseModel):
    """Results of a demonstration run."""

    timestamp: datetime = Field(default_factory=datetime.now, description="Run timestamp")
    results: list[ChecksumResult] = Field(default_factory=list, description="Per-sample results")

    @property
    def all_agree(self) -> bool:
        return all(result.agree for result in self.results)

    @property
    def all_match(self) -> bool:
        return all(result.matches for result in self.results)
