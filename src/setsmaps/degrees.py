"""Summarize a categorical column of a header-less delimited file."""

from __future__ import annotations

import csv
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from setsmaps.constants import DEFAULT_DEGREE_COLUMN, DEFAULT_DELIMITER

logger = logging.getLogger(__name__)


@dataclass
class DegreeSummaryConfig:
    """Configuration for :func:`summarize_degrees`."""

    column: int = DEFAULT_DEGREE_COLUMN  # zero-based
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if self.column < 0:
            raise ValueError("column must be >= 0")
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")


def summarize_degrees(
    path: str | Path, config: DegreeSummaryConfig | None = None
) -> dict[str, int]:
    """Count how often each value appears in one column of a census file.

    The file has no header row. Rows that are too short to hold the column,
    or whose value is blank after stripping, are skipped.

    :param path: File to read.
    :param config: Column and delimiter settings.
    :return: Mapping of value to number of rows carrying it.
    :raises FileNotFoundError: If ``path`` does not exist.
    """
    config = config or DegreeSummaryConfig()
    path = Path(path)
    counts: Counter[str] = Counter()
    skipped = 0

    with path.open(newline="", encoding="utf-8", errors="replace") as handle:
        for row in csv.reader(handle, delimiter=config.delimiter):
            if len(row) <= config.column:
                skipped += 1
                continue
            degree = row[config.column].strip()
            if not degree:
                skipped += 1
                continue
            counts[degree] += 1

    if skipped:
        logger.debug("Skipped %d malformed or empty rows in %s", skipped, path)
    logger.debug("Summarized %d distinct values from %s", len(counts), path)
    return dict(counts)
