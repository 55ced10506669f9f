"""Repair of single-point formatting faults before tokenization.

A PAMGuard export does not quote free-text fields, so a comma typed into one
of them adds a field to the sentence. Each RepairRule handles one anomaly
signature, identified by how many delimiters a line has beyond the expected
``field_count - 1``. Lines whose overshoot has no rule pass through
unchanged and are rejected later by the tokenizer.

Known limitation: the built-in rule is positional. It assumes a line holds at
most one spurious delimiter and that it is always the same delimiter
occurrence.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplaceNthDelimiter:
    """Replace one delimiter occurrence with a space.

    Attributes:
        overshoot: Number of surplus delimiters this rule handles
        ordinal: 1-based ordinal of the delimiter occurrence to replace
        replacement: Text put in place of the delimiter
    """
    overshoot: int = 1
    ordinal: int = 14
    replacement: str = " "

    def apply(self, line: str, delimiter: str = ",") -> str:
        position = -1
        for _ in range(self.ordinal):
            position = line.find(delimiter, position + 1)
            if position < 0:
                return line
        return line[:position] + self.replacement + line[position + len(delimiter):]


def default_rules(ordinal: int = 14) -> List[ReplaceNthDelimiter]:
    """Rules applied to PAMGuard AIS exports."""
    return [ReplaceNthDelimiter(overshoot=1, ordinal=ordinal)]


def repair_lines(
    lines: Iterable[str],
    rules: Iterable[ReplaceNthDelimiter],
    field_count: int = 22,
    delimiter: str = ",",
) -> Tuple[List[str], int]:
    """Apply the rule matching each line's delimiter overshoot.

    Args:
        lines: Aggregated data lines
        rules: Repair rules; at most one per overshoot value
        field_count: Number of fields in a well-formed line
        delimiter: Field delimiter

    Returns:
        Tuple of (lines in input order, number of lines changed by a rule)
    """
    by_overshoot: Dict[int, ReplaceNthDelimiter] = {rule.overshoot: rule for rule in rules}
    expected = field_count - 1

    repaired = []
    n_repaired = 0
    for line in lines:
        rule = by_overshoot.get(line.count(delimiter) - expected)
        if rule is not None:
            fixed = rule.apply(line, delimiter)
            if fixed != line:
                n_repaired += 1
            line = fixed
        repaired.append(line)

    if n_repaired:
        logger.info(f"Repaired {n_repaired} lines with spurious delimiters")
    return repaired, n_repaired
