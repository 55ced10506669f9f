"""Path validation and line aggregation for AIS navigation logs."""
import logging
from enum import Enum
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from tqdm import tqdm

from ..exceptions import FormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LogFormat(str, Enum):
    """Supported AIS log formats, keyed by file extension."""
    PAMGUARD = ".csv"
    SEICHE = ".aistext"


SUPPORTED_EXTENSIONS = {fmt.value: fmt for fmt in LogFormat}


def normalize_paths(paths: Union[PathLike, Sequence[PathLike]]) -> List[Path]:
    """Accept a single path or a sequence of paths."""
    if isinstance(paths, (str, Path)):
        return [Path(paths)]
    return [Path(p) for p in paths]


def validate_paths(paths: Sequence[PathLike]) -> LogFormat:
    """Check that all paths exist and share one supported format.

    Args:
        paths: Paths of the AIS log files

    Returns:
        The common LogFormat of the files

    Raises:
        FormatError: If no path is given, a file is missing, an extension is
            not supported, or the files mix formats
    """
    paths = normalize_paths(paths)
    if not paths:
        raise FormatError("No AIS files selected")

    missing = [str(p) for p in paths if not p.is_file()]
    if missing:
        raise FormatError(f"One or more of the selected AIS files do not exist: {', '.join(missing)}")

    extensions = {p.suffix for p in paths}
    unsupported = sorted(ext for ext in extensions if ext not in SUPPORTED_EXTENSIONS)
    if unsupported:
        raise FormatError(
            f"One or more selected files have an unrecognised or unsupported format: {', '.join(unsupported)}"
        )

    if len(extensions) > 1:
        raise FormatError("All selected files must have the same format")

    return SUPPORTED_EXTENSIONS[extensions.pop()]


def read_data_lines(path: PathLike, encoding: str = "utf-8") -> List[str]:
    """Read the data lines of one file, without its header line.

    Blank lines are skipped, so the header is the first non-blank line.

    Raises:
        OSError: If the file cannot be opened or read
    """
    lines = []
    try:
        with open(path, "r", encoding=encoding, errors="replace") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if line:
                    lines.append(line)
    except OSError as e:
        logger.error(f"Error reading {path}: {e}")
        raise

    return lines[1:]


def aggregate_lines(
    paths: Sequence[PathLike],
    encoding: str = "utf-8",
    show_progress: bool = False,
) -> Tuple[List[str], int]:
    """Concatenate the data lines of several files, dropping exact repeats.

    Files are concatenated in the given order and only the first occurrence
    of each line is kept. This only catches sentences logged twice verbatim;
    semantic duplicates are handled after tokenization.

    Args:
        paths: Paths of the AIS log files, in reading order
        encoding: Text encoding of the files
        show_progress: Show a progress bar over files

    Returns:
        Tuple of (unique data lines in first-occurrence order, number of
        data lines read)
    """
    seen = set()
    unique_lines = []
    total = 0

    for path in tqdm(normalize_paths(paths), desc="Reading files", disable=not show_progress):
        data_lines = read_data_lines(path, encoding)
        total += len(data_lines)
        for line in data_lines:
            if line not in seen:
                seen.add(line)
                unique_lines.append(line)

    logger.info(f"Read {total} data lines, {len(unique_lines)} unique")
    return unique_lines, total
