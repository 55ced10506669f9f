"""Cleaning stages for AIS navigation sentences."""
from .repair import ReplaceNthDelimiter, default_rules, repair_lines
from .tokenizer import tokenize_line, tokenize_lines
from .dedup import remove_duplicate_sentences
from .decoder import decode_fields, sentinel_counts
from .vessel_filter import filter_vessels
from .ordering import sort_by_utc, collapse_duplicate_ticks

__all__ = [
    "ReplaceNthDelimiter",
    "default_rules",
    "repair_lines",
    "tokenize_line",
    "tokenize_lines",
    "remove_duplicate_sentences",
    "decode_fields",
    "sentinel_counts",
    "filter_vessels",
    "sort_by_utc",
    "collapse_duplicate_ticks",
]
