"""Option dataset I/O.

The dataset is a headerless comma-separated file, one option per row, with
columns ``S, K, T, r, sigma``.  Loading is fail-fast: the first unreadable
source or malformed row raises, and nothing is priced.
"""

from __future__ import annotations

import csv
import re
from os import PathLike
from typing import TYPE_CHECKING, Union

import numpy as np

from .config import COLUMNS, GENERATOR_RANGES, N_COLUMNS, PRICE_COLUMNS
from .core import OptionBatch
from .exceptions import MalformedRecordError, SourceUnavailableError

if TYPE_CHECKING:
    from .batch import BatchResult

__all__ = ["load_options", "generate_dataset", "write_prices"]

PathType = Union[str, PathLike]

# Decimal numerals and nan/inf; no digit-group underscores.
_NUMERAL = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)\Z",
    re.IGNORECASE | re.ASCII,
)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _parse_row(row: list[str], line: int) -> list[float]:
    if len(row) != N_COLUMNS:
        raise MalformedRecordError(
            line, f"expected {N_COLUMNS} columns, got {len(row)}: {','.join(row)!r}"
        )
    values = []
    for name, field in zip(COLUMNS, row):
        text = field.strip()
        if not _NUMERAL.match(text):
            raise MalformedRecordError(
                line, f"cannot parse {name}={field!r} as a float"
            )
        values.append(float(text))
    return values


def load_options(path: PathType) -> OptionBatch:
    """Read an option dataset into an :class:`OptionBatch`.

    Parameters
    ----------
    path : str or path-like
        CSV file with columns ``S, K, T, r, sigma`` and no header.
        Empty lines are skipped.

    Returns
    -------
    OptionBatch
        Rows in file order.

    Raises
    ------
    SourceUnavailableError
        The file cannot be opened or decoded.
    MalformedRecordError
        A row has the wrong column count or a non-numeric field.
    """
    rows: list[list[float]] = []
    try:
        with open(path, newline="") as f:
            reader = csv.reader(f)
            try:
                for row in reader:
                    if not row:
                        continue
                    rows.append(_parse_row(row, reader.line_num))
            except csv.Error as e:
                raise MalformedRecordError(reader.line_num, str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"cannot read {str(path)!r}: {e}") from e

    if not rows:
        return OptionBatch([], [], [], [], [])
    S, K, T, r, sigma = np.array(rows, dtype=float).T
    return OptionBatch(S, K, T, r, sigma)


# ---------------------------------------------------------------------------
# Synthetic data
# ---------------------------------------------------------------------------

def generate_dataset(path: PathType, n: int, *, seed: int | None = None) -> int:
    """Write ``n`` random, in-domain option rows to ``path``.

    Each column is drawn uniformly from ``[low, low + width)`` as given by
    ``config.GENERATOR_RANGES``.  Returns the number of rows written.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    rng = np.random.default_rng(seed)
    lows = np.array([GENERATOR_RANGES[c][0] for c in COLUMNS])
    widths = np.array([GENERATOR_RANGES[c][1] for c in COLUMNS])
    data = lows + widths * rng.random((n, N_COLUMNS))

    with open(path, "w", newline="") as f:
        writer = csv.writer(f, delimiter=",")
        writer.writerows(data.tolist())
    return n


# ---------------------------------------------------------------------------
# Result export
# ---------------------------------------------------------------------------

def write_prices(path: PathType, batch: OptionBatch, result: BatchResult) -> None:
    """Write inputs and recorded prices as CSV with a header row."""
    if result.call is None or result.put is None:
        raise ValueError("result has no recorded prices; run with record=True")
    if len(result.call) != len(batch):
        raise ValueError("result does not belong to this batch")

    table = np.column_stack(batch.columns() + (result.call, result.put))
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(PRICE_COLUMNS)
        writer.writerows(table.tolist())
