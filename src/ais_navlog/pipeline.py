"""AIS navigation log reading pipeline.

Turns one or more PAMGuard AIS exports into a clean, time-ordered set of
navigation fixes:
1. Line aggregation (header removal, exact duplicate lines)
2. Line repair (spurious delimiters in free-text fields)
3. Tokenization
4. Sentence deduplication on the composite identity key
5. Field decoding
6. Vessel filtering
7. Chronological sorting
8. Repeated UTC timestamp removal

Every stage consumes the full output of the previous one.
"""
import logging
import time
from typing import Any, Dict, Iterable, Optional, Sequence

import polars as pl

from .config import PipelineConfig
from .io.reader import LogFormat, PathLike, aggregate_lines, normalize_paths, validate_paths
from .schema import empty_fixes_frame
from .cleaning.repair import default_rules, repair_lines
from .cleaning.tokenizer import tokenize_lines
from .cleaning.dedup import remove_duplicate_sentences
from .cleaning.decoder import decode_fields, sentinel_counts
from .cleaning.vessel_filter import filter_vessels
from .cleaning.ordering import sort_by_utc, collapse_duplicate_ticks

logger = logging.getLogger(__name__)


class NavLogPipeline:
    """Reads AIS navigation logs into a table of navigation fixes."""

    def __init__(self, config: Optional[PipelineConfig] = None):
        """Initialize pipeline with configuration.

        Args:
            config: Pipeline configuration (defaults if omitted)
        """
        self.config = config or PipelineConfig()
        self.stats: Dict[str, Any] = {}

    def reset_stats(self):
        self.stats = {
            "files_read": 0,
            "lines_read": 0,
            "duplicate_lines_removed": 0,
            "lines_repaired": 0,
            "malformed_rows_dropped": 0,
            "duplicate_sentences_removed": 0,
            "records_decoded": 0,
            "sentinel_counts": {},
            "records_filtered_out": 0,
            "duplicate_ticks_removed": 0,
            "records_output": 0,
            "unique_mmsis": 0,
            "elapsed_seconds": 0.0,
        }

    def run(
        self,
        paths: Sequence[PathLike],
        mmsi_list: Optional[Iterable[int]] = None,
    ) -> pl.DataFrame:
        """Read navigation fixes from AIS log files.

        Args:
            paths: AIS log file path(s), all of the same format
            mmsi_list: Vessel identifiers to keep; empty or None keeps all

        Returns:
            DataFrame of navigation fixes, sorted by UTC timestamp with one
            record per timestamp

        Raises:
            FormatError: If the paths fail validation
            OSError: If a file cannot be read
        """
        start_time = time.time()
        self.reset_stats()

        paths = normalize_paths(paths)
        log_format = validate_paths(paths)

        if log_format is LogFormat.SEICHE:
            logger.warning("SeicheSSV (.aistext) format is not yet supported, returning no data")
            return empty_fixes_frame()

        result = self.process_pamguard(paths, mmsi_list)

        self.stats["elapsed_seconds"] = time.time() - start_time
        logger.info(
            f"Read {self.stats['records_output']} navigation fixes from "
            f"{self.stats['files_read']} files in {self.stats['elapsed_seconds']:.1f} seconds"
        )
        return result

    def process_pamguard(
        self,
        paths: Sequence[PathLike],
        mmsi_list: Optional[Iterable[int]] = None,
    ) -> pl.DataFrame:
        """Run the cleaning stages over validated PAMGuard CSV exports."""
        reader = self.config.reader

        # Step 1: Line aggregation
        lines, lines_read = aggregate_lines(
            paths,
            encoding=reader.encoding,
            show_progress=self.config.processing.show_progress,
        )
        self.stats["files_read"] = len(paths)
        self.stats["lines_read"] = lines_read
        self.stats["duplicate_lines_removed"] = lines_read - len(lines)

        # Step 2: Line repair
        if self.config.repair.enabled:
            rules = default_rules(self.config.repair.spurious_delimiter_ordinal)
            lines, self.stats["lines_repaired"] = repair_lines(
                lines, rules, reader.field_count, reader.delimiter
            )

        # Step 3: Tokenization
        rows, self.stats["malformed_rows_dropped"] = tokenize_lines(
            lines, reader.field_count, reader.delimiter
        )
        del lines

        # Step 4: Sentence deduplication
        unique_rows = remove_duplicate_sentences(rows)
        self.stats["duplicate_sentences_removed"] = rows.height - unique_rows.height
        del rows

        # Step 5: Field decoding
        df = decode_fields(unique_rows, reader.timestamp_format, reader.epoch)
        self.stats["records_decoded"] = df.height
        self.stats["sentinel_counts"] = sentinel_counts(df)

        # Step 6: Vessel filtering
        filtered = filter_vessels(df, mmsi_list)
        self.stats["records_filtered_out"] = df.height - filtered.height

        # Steps 7-8: Sort by UTC time and drop repeated ticks
        result = collapse_duplicate_ticks(sort_by_utc(filtered))
        self.stats["duplicate_ticks_removed"] = filtered.height - result.height

        self.stats["records_output"] = result.height
        self.stats["unique_mmsis"] = result["mmsi"].drop_nulls().n_unique()

        return result


def read_ais(
    paths: Sequence[PathLike],
    mmsi_list: Optional[Iterable[int]] = None,
    config: Optional[PipelineConfig] = None,
) -> pl.DataFrame:
    """Read navigation fixes from one or more AIS log files.

    Args:
        paths: AIS log file path(s), all of the same format
        mmsi_list: Vessel identifiers to keep; empty or None keeps all
        config: Pipeline configuration (defaults if omitted)

    Returns:
        DataFrame of navigation fixes sorted by UTC timestamp
    """
    return NavLogPipeline(config).run(paths, mmsi_list)
