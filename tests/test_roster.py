import numpy as np

from roster_jump.config import FALLBACK_LABELS
from roster_jump.roster import DEMO_ROSTER, coerce_roster, parse_roster, pick_label


def test_empty_roster_uses_fallback_labels(rng):
    labels = {pick_label((), rng) for _ in range(500)}
    assert labels <= set(FALLBACK_LABELS)
    assert len(labels) == len(set(FALLBACK_LABELS))


def test_labels_come_from_roster(rng):
    cells = {cell for row in DEMO_ROSTER for cell in row}
    for _ in range(300):
        assert pick_label(DEMO_ROSTER, rng) in cells


def test_ragged_and_empty_rows_stay_in_bounds():
    roster = coerce_roster([["a"], [], ["b", None, "c"]])
    assert roster == (("a",), (), ("b", "", "c"))
    rng = np.random.default_rng(7)
    for _ in range(300):
        assert pick_label(roster, rng) in {"a", "b", "c", ""}


def test_coerce_handles_none_and_numbers():
    assert coerce_roster(None) == ()
    assert coerce_roster([[1, None]]) == (("1", ""),)


def test_coerce_keeps_string_rows_whole():
    roster = coerce_roster(["7-15", "OFF", ["RN-Day", "Break"]])
    assert roster == (("7-15",), ("OFF",), ("RN-Day", "Break"))
    assert coerce_roster("RN-Night") == (("RN-Night",),)
    rng = np.random.default_rng(3)
    for _ in range(100):
        assert pick_label(roster, rng) in {"7-15", "OFF", "RN-Day", "Break"}


def test_parse_roster_csv():
    text = "\n John, 7-15 ,OFF\nSarah,RN-Night\n"
    assert parse_roster(text) == (("John", "7-15", "OFF"), ("Sarah", "RN-Night"))
    assert parse_roster("   ") == ()
