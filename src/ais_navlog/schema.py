"""Field layout of PAMGuard AIS sentences and the decoded output record.

All positional knowledge about the input format lives here. The tokenizer,
the composite-key builder and the decoder only refer to these names.
"""
from dataclasses import dataclass, fields
from typing import Dict, List, Optional

import polars as pl

FIELD_COUNT = 22

# 1-based positions of the fields used downstream
FIELD_INDEX: Dict[str, int] = {
    "utc_timestamp": 2,
    "pc_timestamp": 5,
    "mmsi": 8,
    "ship_name": 10,
    "ship_type": 11,
    "nav_status": 15,
    "sog": 17,
    "lat": 18,
    "lon": 19,
    "cog": 20,
    "heading": 21,
}

# Fields identifying one underlying sentence. The PC receipt time is left out:
# the same sentence can be logged with two different PC ticks.
DEDUP_KEY_FIELDS: List[str] = [
    "utc_timestamp",
    "mmsi",
    "ship_name",
    "ship_type",
    "nav_status",
    "sog",
    "lat",
    "lon",
    "cog",
    "heading",
]

OUTPUT_SCHEMA: Dict[str, pl.DataType] = {
    "pc_timestamp": pl.Float64,
    "utc_timestamp": pl.Float64,
    "lat": pl.Float64,
    "lon": pl.Float64,
    "mmsi": pl.UInt32,
    "ship_name": pl.Utf8,
    "ship_type": pl.Utf8,
    "nav_status": pl.UInt8,
    "sog": pl.Float32,
    "cog": pl.Float32,
    "heading": pl.Float32,
}

TIMESTAMP_COLUMNS = ["pc_timestamp", "utc_timestamp"]
TEXT_COLUMNS = ["ship_name", "ship_type"]


def raw_column(position: int) -> str:
    """Name of the raw text column holding the field at a 1-based position."""
    return f"f{position:02d}"


def raw_columns(field_count: int = FIELD_COUNT) -> List[str]:
    return [raw_column(i) for i in range(1, field_count + 1)]


def source_column(name: str) -> str:
    """Raw column a decoded field is read from."""
    return raw_column(FIELD_INDEX[name])


@dataclass(frozen=True)
class NavigationFix:
    """One decoded navigation observation.

    Timestamps are seconds since the configured epoch. Float fields hold NaN
    and integer fields hold None when the source text could not be decoded.
    """
    pc_timestamp: float
    utc_timestamp: float
    lat: float
    lon: float
    mmsi: Optional[int]
    ship_name: str
    ship_type: str
    nav_status: Optional[int]
    sog: float
    cog: float
    heading: float


def empty_fixes_frame() -> pl.DataFrame:
    """Typed, zero-row result frame."""
    return pl.DataFrame(schema=OUTPUT_SCHEMA)


def to_fixes(df: pl.DataFrame) -> List[NavigationFix]:
    """Convert a result frame to a list of immutable records, order preserved."""
    names = [f.name for f in fields(NavigationFix)]
    return [NavigationFix(**row) for row in df.select(names).iter_rows(named=True)]


def split_by_vessel(df: pl.DataFrame) -> Dict[int, pl.DataFrame]:
    """Split a result frame into one frame per vessel.

    Row order inside each frame is the order of ``df``, so a time-ordered
    input gives time-ordered tracks. Rows without an identifier are skipped.
    """
    df = df.filter(pl.col("mmsi").is_not_null())
    if df.is_empty():
        return {}

    groups = df.partition_by("mmsi", maintain_order=True, as_dict=True)
    return {key[0]: groups[key] for key in sorted(groups)}
