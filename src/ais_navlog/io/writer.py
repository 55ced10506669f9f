"""Writing navigation fixes to Parquet or CSV."""
import logging
from pathlib import Path
from typing import Union

import polars as pl
import pyarrow.parquet as pq

logger = logging.getLogger(__name__)


def write_fixes(
    df: pl.DataFrame,
    path: Union[str, Path],
    format: str = "parquet",
    compression: str = "zstd",
    compression_level: int = 3,
    row_group_size: int = 100_000,
) -> Path:
    """Write navigation fixes to a local file.

    Args:
        df: Navigation fixes
        path: Output file path
        format: "parquet" or "csv"
        compression: Parquet compression algorithm
        compression_level: Parquet compression level
        row_group_size: Number of rows per Parquet row group

    Returns:
        Path of the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if format == "parquet":
        pq.write_table(
            df.to_arrow(),
            path,
            compression=compression,
            compression_level=compression_level,
            row_group_size=row_group_size,
        )
    elif format == "csv":
        df.write_csv(path)
    else:
        raise ValueError(f"Unsupported output format: {format}")

    file_size_mb = path.stat().st_size / (1024 * 1024)
    logger.info(f"Wrote {df.height} rows ({file_size_mb:.1f} MB) to {path}")
    return path


def generate_vessel_catalog(df: pl.DataFrame) -> pl.DataFrame:
    """Summarize navigation fixes per vessel.

    Args:
        df: Navigation fixes sorted by UTC timestamp

    Returns:
        Catalog with one row per MMSI, sorted by MMSI
    """
    if "mmsi" not in df.columns or "utc_timestamp" not in df.columns:
        logger.error("DataFrame must have mmsi and utc_timestamp columns")
        return pl.DataFrame()

    valid_tick = pl.col("utc_timestamp").filter(pl.col("utc_timestamp").is_not_nan())

    catalog = (
        df.filter(pl.col("mmsi").is_not_null())
        .group_by("mmsi", maintain_order=True)
        .agg([
            pl.col("ship_name").first().alias("ship_name"),
            pl.col("ship_type").first().alias("ship_type"),
            pl.len().alias("num_fixes"),
            valid_tick.min().alias("start_tick"),
            valid_tick.max().alias("end_tick"),
        ])
        .with_columns([
            ((pl.col("end_tick") - pl.col("start_tick")) / 3600).alias("duration_hours")
        ])
        .sort("mmsi")
    )

    return catalog
