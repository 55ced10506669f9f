"""Splitting of repaired sentences into positional text fields."""
import logging
from typing import Iterable, List, Tuple

import polars as pl

from ..exceptions import DataQualityFault
from ..schema import FIELD_COUNT, raw_columns

logger = logging.getLogger(__name__)


def tokenize_line(line: str, field_count: int = FIELD_COUNT, delimiter: str = ",") -> List[str]:
    """Split one sentence into exactly ``field_count`` fields.

    A trailing empty field is kept, so ``"a,b,"`` gives three fields.

    Raises:
        DataQualityFault: If the sentence does not have ``field_count`` fields
    """
    fields = line.split(delimiter)
    if len(fields) != field_count:
        raise DataQualityFault(
            f"Expected {field_count} fields, found {len(fields)}", line=line
        )
    return fields


def tokenize_lines(
    lines: Iterable[str],
    field_count: int = FIELD_COUNT,
    delimiter: str = ",",
) -> Tuple[pl.DataFrame, int]:
    """Tokenize sentences into a frame of raw text columns.

    Sentences with the wrong field count are dropped.

    Args:
        lines: Repaired data lines
        field_count: Number of fields per sentence
        delimiter: Field delimiter

    Returns:
        Tuple of (frame with columns f01..fNN in input order, rows dropped)
    """
    rows = []
    dropped = 0
    for line in lines:
        try:
            rows.append(tokenize_line(line, field_count, delimiter))
        except DataQualityFault as e:
            dropped += 1
            logger.debug(f"Dropping malformed sentence ({e}): {e.line!r}")

    if dropped:
        logger.info(f"Dropped {dropped} sentences with a wrong field count")

    schema = {name: pl.Utf8 for name in raw_columns(field_count)}
    if not rows:
        return pl.DataFrame(schema=schema), dropped
    return pl.DataFrame(rows, schema=schema, orient="row"), dropped
