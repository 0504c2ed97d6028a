"""Sample IM871A messages captured from a Kamstrup meter.

Each capture has the A5 start byte and the FCS removed. The documented FCS
is given as transmitted, low byte first.
"""

from typing import NamedTuple


class Sample(NamedTuple):
    name: str
    frame: str
    fcs_wire: str

    @property
    def expected(self) -> int:
        """Documented FCS as an integer."""
        return int.from_bytes(bytes.fromhex(self.fcs_wire), "little")


SAMPLES = (
    Sample("sample-0", "820327442d2c5768663230028d20cb103407201d82040f26a7e808ff3449f9e9d2e4b28bd7e7c6f1c6df", "3885"),
    Sample("sample-1", "820327442d2c5768663230028d20cd12340720519df247ff65e751662a300bc4e5c67da86477f0182637", "c1ab"),
    Sample("sample-2", "820327442d2c5768663230028d206972dd032089aa2c0a75352edf4b64a7b908470ba6171c89e52aab8a", "b7ac"),
    Sample("sample-3", "820327442d2c5768663230028d2086f0dd0320368763cbae145d5f6c56d0afad5f369db1e22a7e6311df", "e2af"),
    Sample("sample-4", "820327442d2c5768663230028d2076b0dd0320c872a70560f4faef03685bcac1ac8fca34cb3ef0dbacf1", "229e"),
    Sample("sample-5", "820327442d2c5768663230028d2079b3dd032072e1bc19a9d337d17a731fcea7733abcaa002ca6e33478", "02f3"),
    Sample("sample-6", "820327442d2c5768663230028d207ed0dd032008a6f44c44320b0e636f694819e91b2a5f2fb1dc753191", "a0ee"),
    Sample("sample-7", "820327442d2c5768663230028d2083e1dd0320d4e65337143ba7621f5ebf580642d40fb7d66c45dd4e19", "b64f"),
    Sample(
        "long",
        "82032d442d2c5768663230028d207cc2dd0320f8325c5952304521c530f237b6ee19e4cd7d6778f660152192a4751a46",
        "f667",
    ),
)
