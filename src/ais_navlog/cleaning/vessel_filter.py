"""Selection of records by vessel identifier (MMSI)."""
import logging
from typing import Iterable, Optional

import polars as pl

logger = logging.getLogger(__name__)


def filter_vessels(df: pl.DataFrame, mmsi_list: Optional[Iterable[int]] = None) -> pl.DataFrame:
    """Keep only records of the selected vessels.

    An empty or missing ``mmsi_list`` selects every vessel observed in the
    data, including records whose identifier could not be decoded.

    Args:
        df: Decoded records with an ``mmsi`` column
        mmsi_list: Vessel identifiers to keep

    Returns:
        Filtered frame, order preserved
    """
    selected = sorted({int(m) for m in mmsi_list}) if mmsi_list is not None else []
    if not selected:
        return df

    filtered = df.filter(pl.col("mmsi").is_in(selected).fill_null(False))
    logger.info(f"Selected {filtered.height} of {df.height} records for {len(selected)} vessels")
    return filtered
