import csv
import io

from roster_jump.config import FALLBACK_LABELS

DEMO_ROSTER = (
    ("John", "7-15", "7-15", "OFF", "RN-Night", "RN-Night"),
    ("Sarah", "OFF", "7-15", "7-15", "7-15", "OFF"),
    ("Mike", "RN-Day", "RN-Day", "7-15", "OFF", "OFF"),
)


def coerce_roster(rows):
    """Normalise any table-like input into a tuple of string rows."""
    if not rows:
        return ()
    if isinstance(rows, str):
        rows = [rows]
    return tuple(_coerce_row(row) for row in rows)


def _coerce_row(row):
    # A bare string is one label, not a row of characters
    if isinstance(row, str):
        return (row,)
    return tuple("" if cell is None else str(cell) for cell in (row or ()))


def parse_roster(text):
    """CSV text to a roster table, one row per non-blank line."""
    if not text or not text.strip():
        return ()
    reader = csv.reader(io.StringIO(text.strip()))
    return tuple(tuple(cell.strip() for cell in row) for row in reader)


def pick_label(roster, rng):
    if not roster:
        return FALLBACK_LABELS[rng.integers(0, len(FALLBACK_LABELS))]

    row = roster[rng.integers(0, len(roster))]
    if not row:
        return ""
    return row[rng.integers(0, len(row))] or ""
