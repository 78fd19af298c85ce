# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from alignedit.alignment import Sequence, find_gap, shift_symbols

GAPS = ".-"


def test_copy():
    seq = Sequence("seq1", "AC.GU")
    clone = seq.copy()
    assert clone == seq
    clone.data = "ACGU"
    assert seq.data == "AC.GU"


@pytest.mark.parametrize(
    "data, col, step, expected",
    [
        ("A.CGU", 2, -1, 1),
        ("A.CGU", 2, 1, None),
        ("..CGU", 4, -1, 1),
        ("ACG-U", 0, 1, 3),
        # The column itself is not considered
        ("AC.GU", 2, 1, None),
        ("AC.GU", 2, -1, None),
        # Positions outside the row
        ("A.CGU", 5, -1, None),
        ("A.CGU", -1, 1, None),
    ],
)
def test_find_gap(data, col, step, expected):
    assert find_gap(data, col, GAPS, step) == expected


def test_find_gap_invalid_step():
    with pytest.raises(ValueError):
        find_gap("A.CGU", 2, GAPS, 2)


@pytest.mark.parametrize(
    "data, col, step, expected",
    [
        ("A.CGU", 2, -1, "AC.GU"),
        ("ACG.U", 2, 1, "AC.GU"),
        ("A..CGU", 3, -1, "A.C.GU"),
        # The consumed gap symbol is inserted again
        ("A-CGU", 4, -1, "ACGU-"),
        ("ACGU.", 0, 1, ".ACGU"),
        ("ACGU", 2, -1, None),
        ("ACGU", 2, 1, None),
    ],
)
def test_shift_symbols(data, col, step, expected):
    assert shift_symbols(data, col, GAPS, step) == expected


def test_insert_gap():
    seq = Sequence("seq1", "ACGU")
    assert seq.insert_gap(2, ".")
    assert seq.data == "AC.GU"
    # Appending is allowed
    assert seq.insert_gap(5, "-")
    assert seq.data == "AC.GU-"
    assert not seq.insert_gap(7, ".")
    assert not seq.insert_gap(-1, ".")
    assert not seq.insert_gap(2, "..")
    assert not seq.insert_gap(2, "")
    assert seq.data == "AC.GU-"


def test_delete_gap():
    seq = Sequence("seq1", "AC.GU")
    assert not seq.delete_gap(1, GAPS)
    assert not seq.delete_gap(5, GAPS)
    assert seq.data == "AC.GU"
    assert seq.delete_gap(2, GAPS)
    assert seq.data == "ACGU"


def test_shift_round_trip():
    """
    A shift to the left is reverted by a shift to the right at the
    column, the shifted symbol has moved to.
    """
    seq = Sequence("seq1", "A.CGU")
    assert seq.shift_left(2, GAPS)
    assert seq.data == "AC.GU"
    # No gap lies right of column 2 anymore
    assert not seq.shift_right(2, GAPS)
    assert seq.shift_right(1, GAPS)
    assert seq.data == "A.CGU"


def test_shift_without_gap():
    seq = Sequence("seq1", "ACGU")
    assert not seq.shift_left(3, GAPS)
    assert not seq.shift_right(0, GAPS)
    assert seq.data == "ACGU"
