"""Medal table normalizer.

Turns raw table rows into MedalRecords. Rows are positional:

    0: rank, 1: country, 2: gold, 3: silver, 4: bronze, 5: total

Source tables merge tied countries into one rank cell (rowspan), so the
rows after the first one in a tie group arrive with a blank rank. Those
continuation rows take the medal counts of the last row that had a rank,
whatever their own count cells say.
"""

import re
from collections.abc import Iterable, Sequence
from functools import reduce
from typing import NamedTuple

from .models import MedalRecord


RANK_COL = 0
COUNTRY_COL = 1
COUNT_COLS = (2, 3, 4, 5)   # gold, silver, bronze, total

ZERO_COUNTS = (0, 0, 0, 0)


class _TableState(NamedTuple):
    carry: tuple            # (gold, silver, bronze, total) of the last ranked row
    records: tuple          # MedalRecords produced so far


def _parse_count(val) -> int:
    """Parse a medal count cell. Returns 0 for empty, invalid or negative values."""
    if val is None or isinstance(val, bool):
        return 0
    if isinstance(val, int):
        return val if val > 0 else 0
    m = re.match(r'\d+', str(val).strip())
    return int(m.group(0)) if m else 0


def _row_counts(row: Sequence) -> tuple:
    return tuple(_parse_count(row[i]) if i < len(row) else 0 for i in COUNT_COLS)


def _cell(row: Sequence, idx: int) -> str:
    if idx >= len(row) or row[idx] is None:
        return ''
    return str(row[idx]).strip()


def parse_row(row: Sequence, carry: tuple = ZERO_COUNTS) -> tuple:
    """Parse one raw row.

    Args:
        row: Sequence of cell values (rank, country, gold, silver, bronze, total).
            Missing trailing cells count as empty.
        carry: (gold, silver, bronze, total) of the last row with a rank.

    Returns:
        (record, rank_present). record is None when the country cell is blank.
    """
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise TypeError(f"Expected a sequence of cells, got {type(row).__name__}")

    rank = _cell(row, RANK_COL)
    country = _cell(row, COUNTRY_COL)
    rank_present = bool(rank)

    if rank_present:
        counts = _row_counts(row)
    else:
        counts = tuple(carry)

    if not country:
        return None, rank_present

    gold, silver, bronze, total = counts
    record = MedalRecord(rank=rank, country=country,
                         gold=gold, silver=silver, bronze=bronze, total=total)
    return record, rank_present


def _fold_row(state: _TableState, row: Sequence) -> _TableState:
    record, rank_present = parse_row(row, state.carry)
    records = state.records + (record,) if record is not None else state.records
    if not rank_present:
        return _TableState(state.carry, records)

    # Header rows with a rank but no country still reset the carry
    return _TableState(_row_counts(row), records)


def normalize_table(rows: Iterable) -> list[MedalRecord]:
    """Normalize an ordered sequence of raw rows into MedalRecords.

    Order is preserved and nothing is merged or deduplicated; rows with a
    blank country are dropped.
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Iterable):
        raise TypeError(f"Expected an iterable of rows, got {type(rows).__name__}")

    state = reduce(_fold_row, rows, _TableState(ZERO_COUNTS, ()))
    return list(state.records)
