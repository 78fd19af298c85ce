# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import warnings
import pytest
from alignedit.alignment import (
    Alignment,
    ColumnAnnotation,
    RaggedAlignmentWarning,
    ResidueAnnotation,
    Sequence,
)
from alignedit.editor import DEFAULT_GAP_SYMBOL, EditSession
from alignedit.structure import MalformedStructureWarning


@pytest.fixture
def session():
    alignment = Alignment(
        sequences=[
            Sequence("seq1", "AC..GU"),
            Sequence("seq2", "A-CTGU"),
        ],
        column_annotations=[ColumnAnnotation("SS_cons", "(....)")],
        residue_annotations={"seq1": [ResidueAnnotation("SS", "<...>.")]},
    )
    return EditSession(alignment)


def test_initial_state(session):
    assert (session.cursor_row, session.cursor_col) == (0, 0)
    assert not session.modified
    assert session.status_message is None
    assert session.gap_symbol == DEFAULT_GAP_SYMBOL
    assert session.structure_cache.get_pair(0) == 5
    assert not session.history.can_undo()


def test_empty_session():
    session = EditSession()
    assert session.alignment.num_sequences() == 0
    assert session.current_symbol() is None
    assert not session.insert_gap()
    assert session.status_message == "No sequence at cursor"
    assert not session.delete_sequence()
    assert not session.uppercase()
    assert not session.undo()
    assert session.status_message == "Nothing to undo"


def test_load_ragged():
    alignment = Alignment([Sequence("seq1", "ACGU"), Sequence("seq2", "AC")])
    with pytest.warns(RaggedAlignmentWarning):
        session = EditSession(alignment)
    assert session.alignment is alignment


def test_load_malformed():
    """
    A consensus structure with unmatched brackets is loaded
    nevertheless, the matched brackets are still paired.
    """
    alignment = Alignment(
        [Sequence("seq1", "ACGUA")], [ColumnAnnotation("SS_cons", "(.)).")]
    )
    with pytest.warns(MalformedStructureWarning):
        session = EditSession(alignment)
    assert session.status_message == "Unmatched brackets in SS_cons at column(s) 4"
    assert session.structure_cache.get_pair(2) == 0
    assert session.structure_cache.get_pair(3) is None


def test_load_resets(session):
    session.cursor_col = 3
    session.insert_gap()
    assert session.modified
    session.load(Alignment([Sequence("other", "ACGU")]))
    assert (session.cursor_row, session.cursor_col) == (0, 0)
    assert not session.modified
    assert not session.history.can_undo()
    assert session.structure_cache.source is None


def test_insert_gap(session):
    session.cursor_col = 1
    assert session.insert_gap()
    assert session.alignment.sequences[0].data == "A.C..GU"
    assert session.alignment.residue_annotations["seq1"][0].data == "<....>."
    assert session.cursor_col == 2
    assert session.modified
    assert session.history.can_undo()


def test_delete_gap(session):
    session.cursor_col = 2
    assert session.delete_gap()
    assert session.alignment.sequences[0].data == "AC.GU"
    session.cursor_col = 0
    assert not session.delete_gap()
    assert session.status_message == "Not a gap character"


def test_gap_columns(session):
    session.cursor_col = 2
    assert not session.delete_gap_column()
    assert session.status_message == "Column contains non-gap characters"
    # The failed operation does not create an undo state
    assert not session.history.can_undo()

    assert session.insert_gap_column()
    assert session.alignment.sequences[1].data == "A-.CTGU"
    assert session.alignment.ss_cons() == "(.....)"
    assert session.structure_cache.get_pair(0) == 6

    assert session.delete_gap_column()
    assert session.alignment.ss_cons() == "(....)"
    assert session.structure_cache.get_pair(0) == 5
    assert session.alignment.is_rectangular()


def test_delete_last_gap_column():
    session = EditSession(Alignment([Sequence("seq1", "AC.")]))
    session.cursor_col = 2
    assert session.delete_gap_column()
    # The cursor stays inside the alignment
    assert session.cursor_col == 1


def test_shift(session):
    session.cursor_col = 4
    assert session.shift_left()
    assert session.alignment.sequences[0].data == "AC.G.U"
    assert session.alignment.residue_annotations["seq1"][0].data == "<..>.."
    # The second sequence has no gap right of the cursor
    session.cursor_row = 1
    assert not session.shift_right()
    assert session.status_message == "Cannot shift right (no gap found)"


def test_throw(session):
    session.cursor_col = 4
    assert session.throw_left()
    assert session.alignment.sequences[0].data == "ACG..U"
    # The residues are already packed
    assert not session.throw_left()
    assert session.status_message == "Cannot throw left (no gaps found)"
    assert session.undo()
    assert session.alignment.sequences[0].data == "AC..GU"


def test_delete_sequence(session):
    session.cursor_row = 1
    assert session.delete_sequence()
    assert session.status_message == "Deleted sequence 'seq2'"
    assert session.alignment.sequence_ids() == ["seq1"]
    assert session.cursor_row == 0
    assert session.undo()
    assert session.alignment.sequence_ids() == ["seq1", "seq2"]
    assert session.cursor_row == 1


def test_replace_symbol(session):
    session.cursor_col = 2
    assert session.replace_symbol("G")
    assert session.alignment.sequences[0].data == "ACG.GU"
    assert not session.replace_symbol("GG")


@pytest.mark.parametrize(
    "operation, ref_data",
    [
        ("lowercase", ["ac..gu", "a-ctgu"]),
        ("uppercase", ["AC..GU", "A-CTGU"]),
        ("convert_t_to_u", ["AC..GU", "A-CUGU"]),
        ("convert_u_to_t", ["AC..GT", "A-CTGT"]),
    ],
)
def test_transform(session, operation, ref_data):
    assert getattr(session, operation)()
    assert [seq.data for seq in session.alignment.sequences] == ref_data
    # Annotations are not converted
    assert session.alignment.residue_annotations["seq1"][0].data == "<...>."


def test_undo_redo(session):
    """
    Check that undo and redo restore the alignment and the cursor
    position, also over multiple operations.
    """
    original = session.alignment.copy()
    session.cursor_col = 1
    session.insert_gap()
    after_first = session.alignment.copy()
    session.move_cursor(rows=1)
    session.insert_gap_column()
    after_second = session.alignment.copy()
    cursor_after_second = (session.cursor_row, session.cursor_col)

    assert session.undo()
    assert session.status_message == "Undo"
    assert session.alignment == after_first
    assert (session.cursor_row, session.cursor_col) == (1, 2)
    assert session.undo()
    assert session.alignment == original
    assert (session.cursor_row, session.cursor_col) == (0, 1)
    assert not session.undo()

    assert session.redo()
    assert session.alignment == after_first
    assert session.redo()
    assert session.alignment == after_second
    assert (session.cursor_row, session.cursor_col) == cursor_after_second
    assert session.structure_cache.get_pair(0) == 6
    assert not session.redo()
    assert session.status_message == "Nothing to redo"
    assert session.modified


def test_undo_refreshes_structure(session):
    session.cursor_col = 1
    session.insert_gap_column()
    assert session.structure_cache.get_pair(0) == 6
    session.undo()
    assert session.structure_cache.get_pair(0) == 5


def test_cursor_movement(session):
    session.move_cursor(rows=5, cols=10)
    assert (session.cursor_row, session.cursor_col) == (1, 5)
    session.move_cursor(rows=-5, cols=-10)
    assert (session.cursor_row, session.cursor_col) == (0, 0)
    session.cursor_line_end()
    assert session.cursor_col == 5
    session.cursor_line_start()
    assert session.cursor_col == 0
    session.cursor_last_sequence()
    assert session.cursor_row == 1
    session.cursor_first_sequence()
    assert session.cursor_row == 0
    session.page_down(10)
    assert session.cursor_row == 1
    session.page_up(10)
    assert session.cursor_row == 0


def test_goto_pair(session):
    assert session.pair_info() == "pair:6"
    assert session.goto_pair()
    assert session.cursor_col == 5
    assert session.goto_pair()
    assert session.cursor_col == 0
    session.cursor_col = 2
    assert session.pair_info() is None
    assert not session.goto_pair()
    assert session.status_message == "Column is not paired"
    assert session.cursor_col == 2


def test_set_gap_symbol(session):
    assert session.set_gap_symbol("-")
    assert session.gap_symbol == "-"
    assert "-" in session.gap_symbols
    session.cursor_col = 1
    session.insert_gap()
    assert session.alignment.sequences[0].data == "A-C..GU"
    assert not session.set_gap_symbol("--")
    assert session.gap_symbol == "-"


def test_status(session):
    session.set_status("Saved")
    assert session.status_message == "Saved"
    session.clear_status()
    assert session.status_message is None


def test_no_warning_for_valid_structure(session):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        session.cursor_col = 3
        session.insert_gap_column()


@pytest.mark.parametrize("row", [-1, 2, 5])
def test_delete_sequence_outside(session, row):
    session.cursor_row = row
    original = session.alignment.copy()
    assert not session.delete_sequence()
    assert session.status_message == "No sequence at cursor"
    assert session.alignment == original
    assert not session.modified
    assert not session.history.can_undo()


def test_invalid_gap_symbol():
    session = EditSession(Alignment([Sequence("seq1", "ACGU")]), gap_symbol="..")
    assert not session.insert_gap_column()
    assert not session.insert_gap()
    assert session.alignment.sequences[0].data == "ACGU"
    assert not session.history.can_undo()
