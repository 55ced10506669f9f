"""Shared fixtures for building PAMGuard AIS sentences and log files."""
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from ais_navlog.schema import FIELD_COUNT, FIELD_INDEX

HEADER = (
    "Id,UTC,UTCMilliseconds,PCLocalTime,PCTime,ChannelBitmap,SequenceBitmap,"
    "mmsiNumber,messageType,shipName,shipType,callSign,imoNumber,destination,"
    "navigationStatus,rateOfTurn,speedOverGround,latitude,longitude,"
    "courseOverGround,trueHeading,dataTerminalReady"
)

DEFAULT_FIELDS = {
    1: "1",
    2: "2018-04-16 10:00:00.000",
    3: "0",
    4: "2018-04-16 11:00:00.000",
    5: "2018-04-16 10:00:00.250",
    6: "1",
    7: "1",
    8: "235001234",
    9: "1",
    10: "SEA EXPLORER",
    11: "Tug",
    12: "MXYZ1",
    13: "9123456",
    14: "SOUTHAMPTON",
    15: "0",
    16: "0",
    17: "10.5",
    18: "50.75",
    19: "-1.25",
    20: "180.5",
    21: "179",
    22: "",
}


def build_sentence(positions: Optional[Dict[int, str]] = None, **named: str) -> str:
    """Build a well-formed sentence, overriding fields by position or by name."""
    fields = dict(DEFAULT_FIELDS)
    fields.update(positions or {})
    for name, value in named.items():
        fields[FIELD_INDEX[name]] = value
    return ",".join(fields[i] for i in range(1, FIELD_COUNT + 1))


@pytest.fixture
def sentence():
    """Factory for PAMGuard AIS sentences."""
    return build_sentence


@pytest.fixture
def write_log(tmp_path):
    """Factory writing a header and data lines to a log file under tmp_path."""
    def _write(name: str, lines: List[str], header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header] + list(lines)) + "\n", encoding="utf-8")
        return path

    return _write
