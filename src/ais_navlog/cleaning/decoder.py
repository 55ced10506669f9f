"""Decoding of raw text fields into typed navigation values.

Fields that cannot be decoded are replaced by a sentinel instead of failing
the row: NaN for float fields, null for integer fields. Text fields always
decode.
"""
import logging
from datetime import datetime
from typing import Dict

import polars as pl

from ..schema import OUTPUT_SCHEMA, TEXT_COLUMNS, TIMESTAMP_COLUMNS, empty_fixes_frame, source_column

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S%.f"
DEFAULT_EPOCH = "0001-01-01 00:00:00"
UNIX_EPOCH = datetime(1970, 1, 1)


def epoch_offset_seconds(epoch: str = DEFAULT_EPOCH) -> float:
    """Seconds between ``epoch`` and the Unix epoch."""
    return (UNIX_EPOCH - datetime.fromisoformat(epoch)).total_seconds()


def decode_timestamp(column: str, fmt: str, offset: float) -> pl.Expr:
    return (
        pl.col(column)
        .str.strip_chars()
        .str.strptime(pl.Datetime("us"), format=fmt, strict=False)
        .dt.epoch("us")
        .truediv(1_000_000)
        .add(offset)
        .fill_null(float("nan"))
    )


def decode_float(column: str, dtype: pl.DataType = pl.Float64) -> pl.Expr:
    return (
        pl.col(column)
        .str.strip_chars()
        .cast(pl.Float64, strict=False)
        .fill_null(float("nan"))
        .cast(dtype)
    )


def decode_unsigned(column: str, dtype: pl.DataType) -> pl.Expr:
    """Integer decode; non-numeric and out-of-range values become null."""
    return (
        pl.col(column)
        .str.strip_chars()
        .cast(pl.Float64, strict=False)
        .fill_nan(None)
        .round(0)
        .cast(dtype, strict=False)
    )


def decode_fields(
    df: pl.DataFrame,
    timestamp_format: str = TIMESTAMP_FORMAT,
    epoch: str = DEFAULT_EPOCH,
) -> pl.DataFrame:
    """Decode the used fields of each sentence.

    Args:
        df: Frame of raw text columns
        timestamp_format: polars strptime format of the timestamp fields
        epoch: Reference instant of the decoded timestamps (ISO format)

    Returns:
        Frame with one column per NavigationFix field, row order preserved
    """
    if df.is_empty():
        return empty_fixes_frame()

    offset = epoch_offset_seconds(epoch)
    expressions = []
    for name, dtype in OUTPUT_SCHEMA.items():
        column = source_column(name)
        if name in TIMESTAMP_COLUMNS:
            expr = decode_timestamp(column, timestamp_format, offset)
        elif name in TEXT_COLUMNS:
            expr = pl.col(column).str.strip_chars_end()
        elif dtype in (pl.UInt8, pl.UInt32):
            expr = decode_unsigned(column, dtype)
        else:
            expr = decode_float(column, dtype)
        expressions.append(expr.alias(name))

    decoded = df.select(expressions)
    logger.info(f"Decoded {decoded.height} sentences")
    return decoded


def sentinel_counts(df: pl.DataFrame) -> Dict[str, int]:
    """Count sentinel values per decoded column.

    Float columns count NaN, integer columns count null. Text columns are
    not reported since they cannot fail to decode.
    """
    counts = {}
    for name, dtype in OUTPUT_SCHEMA.items():
        if name not in df.columns or name in TEXT_COLUMNS:
            continue
        if dtype in (pl.UInt8, pl.UInt32):
            counts[name] = df[name].null_count()
        else:
            counts[name] = int(df[name].is_nan().sum())
    return counts
