import pytest
from alignedit.alignment import Alignment, ColumnAnnotation, Sequence
from alignedit.editor import EditSession


@pytest.fixture
def session():
    width = 10000
    sequences = [
        Sequence(f"seq{i}", ("ACGU" + "." * 4) * (width // 8)) for i in range(50)
    ]
    ss_cons = ("((" + "." * 4 + "))") * (width // 8)
    return EditSession(
        Alignment(sequences, [ColumnAnnotation("SS_cons", ss_cons)])
    )


@pytest.mark.benchmark
def benchmark_insert_gap_column(session):
    session.cursor_col = 5000
    session.insert_gap_column()


@pytest.mark.benchmark
def benchmark_throw_left(session):
    session.cursor_col = 9996
    session.throw_left()


@pytest.mark.benchmark
def benchmark_undo(session):
    session.insert_gap_column()
    session.undo()
