"""Removal of sentences repeated under different PC receipt times."""
import logging
from typing import List, Optional

import polars as pl

from ..schema import DEDUP_KEY_FIELDS, source_column

logger = logging.getLogger(__name__)


def dedup_key_columns(key_fields: Optional[List[str]] = None) -> List[str]:
    """Raw columns forming the composite identity key."""
    return [source_column(name) for name in (key_fields or DEDUP_KEY_FIELDS)]


def remove_duplicate_sentences(
    df: pl.DataFrame,
    key_fields: Optional[List[str]] = None,
) -> pl.DataFrame:
    """Keep the first sentence of each composite identity key.

    Key fields are compared with trailing whitespace removed, matching a
    comparison of space-padded fixed-width text.

    Args:
        df: Frame of raw text columns from the tokenizer
        key_fields: Decoded field names forming the key (default DEDUP_KEY_FIELDS)

    Returns:
        Frame with duplicates removed, first-occurrence order preserved
    """
    if df.is_empty():
        return df

    key_columns = dedup_key_columns(key_fields)
    temp_columns = [f"_key_{col}" for col in key_columns]

    df = df.with_columns([
        pl.col(col).str.strip_chars_end().alias(temp)
        for col, temp in zip(key_columns, temp_columns)
    ])
    deduped = df.unique(subset=temp_columns, keep="first", maintain_order=True).drop(temp_columns)

    removed = df.height - deduped.height
    if removed:
        logger.info(f"Removed {removed} duplicate sentences")
    return deduped
