"""Chronological ordering of records and removal of repeated UTC ticks."""
import logging

import polars as pl

logger = logging.getLogger(__name__)


def sort_by_utc(df: pl.DataFrame) -> pl.DataFrame:
    """Stable sort by UTC timestamp.

    Records with equal timestamps keep their relative order. NaN timestamps
    sort after all valid ones.
    """
    return df.sort("utc_timestamp", maintain_order=True)


def collapse_duplicate_ticks(df: pl.DataFrame) -> pl.DataFrame:
    """Keep the first record of each UTC timestamp.

    Expects a frame sorted by ``sort_by_utc``. NaN timestamps are never
    equal to each other, so those records are all kept.
    """
    if df.is_empty():
        return df

    collapsed = df.filter(
        pl.col("utc_timestamp").is_nan() | pl.col("utc_timestamp").is_first_distinct()
    )

    removed = df.height - collapsed.height
    if removed:
        logger.info(f"Removed {removed} records with a repeated UTC timestamp")
    return collapsed
