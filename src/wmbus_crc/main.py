"""Demonstration entry point: checksum the sample captures with both engines."""

import logging
import sys
from typing import Iterable, Optional

from wmbus_crc import __version__
from wmbus_crc.core.config import Settings, setup_logging
from wmbus_crc.core.models import ChecksumResult, DemoReport
from wmbus_crc.protocol.crc import calculate_checksum
from wmbus_crc.protocol.hexcodec import hex_decode
from wmbus_crc.samples import SAMPLES, Sample

logger = logging.getLogger(__name__)


def check_sample(sample: Sample, strict: bool = True) -> ChecksumResult:
    """Compute one sample's FCS with both engines."""
    data = hex_decode(sample.frame, len(sample.frame), strict=strict)
    return ChecksumResult(
        name=sample.name,
        frame=sample.frame,
        table_crc=calculate_checksum(data, use_table=True),
        bitwise_crc=calculate_checksum(data, use_table=False),
        expected=sample.expected,
    )


def run_demo(settings: Optional[Settings] = None, samples: Iterable[Sample] = SAMPLES) -> DemoReport:
    """Run every sample through both engines."""
    settings = settings or Settings()
    report = DemoReport()

    for sample in samples:
        result = check_sample(sample, strict=settings.strict_hex)
        if not result.matches:
            logger.warning(
                f"{result.name}: table=0x{result.table_crc:04x} bitwise=0x{result.bitwise_crc:04x} "
                f"expected={'-' if result.expected is None else f'0x{result.expected:04x}'}"
            )
        report.results.append(result)

    logger.info(f"Checked {len(report.results)} samples, all match: {report.all_match}")
    return report


def format_result(result: ChecksumResult) -> str:
    status = "OK" if result.matches else "MISMATCH"
    return (
        f"{result.name:<10} table={result.table_crc:04x} bitwise={result.bitwise_crc:04x} "
        f"fcs={result.fcs_hex} {status}"
    )


def main() -> int:
    """Run the demonstration (for CLI entry point)."""
    settings = Settings()
    setup_logging(settings.log_level)
    logger.info(f"wmbus-crc v{__version__} (strict_hex={settings.strict_hex})")

    report = run_demo(settings)
    for result in report.results:
        print(format_result(result))

    return 0 if report.all_match else 1


if __name__ == "__main__":
    sys.exit(main())
