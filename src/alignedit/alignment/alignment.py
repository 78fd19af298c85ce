# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "alignedit.alignment"
__author__ = "The alignedit contributors"
__all__ = ["Alignment", "SS_CONS_TAG", "RF_TAG"]

from alignedit.alignment.error import (
    AnnotationReferenceError,
    DuplicateSequenceIdError,
)
from alignedit.alignment.annotation import ColumnAnnotation
from alignedit.alignment.sequence import is_packed, shift_symbols
from alignedit.copyable import Copyable

SS_CONS_TAG = "SS_cons"
RF_TAG = "RF"


class Alignment(Copyable):
    """
    A multiple sequence alignment together with its annotations.

    The alignment is a grid of symbols:
    Each :class:`Sequence` is a row and all rows share the same columns.
    Besides the sequences, there are several parallel data series,
    that are aligned to the same columns:

        - *column annotations* (``#=GC``) have one symbol per column,
          the most prominent one is the consensus secondary structure
          (``SS_cons``)
        - *residue annotations* (``#=GR``) have one symbol per column
          and belong to a single sequence

    Furthermore, there are *sequence annotations* (``#=GS``), that
    describe a whole sequence, and *file annotations* (``#=GF``), that
    describe the whole alignment.

    Outside of the row-local operations, all sequences, column
    annotations and residue annotations have the same length, the
    alignment :func:`width()`.
    The global column operations maintain this property.
    The row-local operations (:func:`insert_gap()`,
    :func:`delete_gap()`, :func:`shift_left()`, etc.) deliberately
    change only a single row and its residue annotations.

    Sequence and residue annotations are keyed by the sequence
    identifier.
    Therefore the identifiers must be unique and each annotation key
    must refer to a sequence in the alignment.

    All attributes of this class are publicly accessible.

    Parameters
    ----------
    sequences : iterable of Sequence, optional
        The rows of the alignment.
    column_annotations : iterable of ColumnAnnotation, optional
        Annotations with one symbol per column.
    sequence_annotations : dict (str -> list of SequenceAnnotation), optional
        Annotations of whole sequences, keyed by sequence identifier.
    residue_annotations : dict (str -> list of ResidueAnnotation), optional
        Annotations with one symbol per column, keyed by sequence
        identifier.
    file_annotations : iterable of FileAnnotation, optional
        Annotations of the entire alignment.

    Attributes
    ----------
    sequences, column_annotations, sequence_annotations, residue_annotations, file_annotations
        Same as the parameters.

    Raises
    ------
    DuplicateSequenceIdError
        If two sequences have the same identifier.
    AnnotationReferenceError
        If a sequence or residue annotation refers to an identifier,
        that is not present in the sequences.

    Examples
    --------

    >>> alignment = Alignment(
    ...     [Sequence("seq1", "ACGU"), Sequence("seq2", "AC-U")],
    ...     [ColumnAnnotation("SS_cons", "(..)")],
    ... )
    >>> alignment.insert_gap_column(2, ".")
    True
    >>> print(alignment.sequences[0])
    AC.GU
    >>> print(alignment.ss_cons())
    (...)
    """

    def __init__(
        self,
        sequences=None,
        column_annotations=None,
        sequence_annotations=None,
        residue_annotations=None,
        file_annotations=None,
    ):
        self.sequences = list(sequences) if sequences is not None else []
        self.column_annotations = (
            list(column_annotations) if column_annotations is not None else []
        )
        self.sequence_annotations = (
            dict(sequence_annotations) if sequence_annotations is not None else {}
        )
        self.residue_annotations = (
            dict(residue_annotations) if residue_annotations is not None else {}
        )
        self.file_annotations = (
            list(file_annotations) if file_annotations is not None else []
        )
        self._check_references()

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone.sequences = [seq.copy() for seq in self.sequences]
        clone.column_annotations = [ann.copy() for ann in self.column_annotations]
        clone.sequence_annotations = {
            seq_id: [ann.copy() for ann in annotations]
            for seq_id, annotations in self.sequence_annotations.items()
        }
        clone.residue_annotations = {
            seq_id: [ann.copy() for ann in annotations]
            for seq_id, annotations in self.residue_annotations.items()
        }
        clone.file_annotations = [ann.copy() for ann in self.file_annotations]

    def __repr__(self):
        return (
            f"Alignment({self.sequences!r}, {self.column_annotations!r}, "
            f"{self.sequence_annotations!r}, {self.residue_annotations!r}, "
            f"{self.file_annotations!r})"
        )

    def __str__(self):
        rows = [(seq.id, seq.data) for seq in self.sequences] + [
            ("#=GC " + ann.tag, ann.data) for ann in self.column_annotations
        ]
        label_length = max((len(label) for label, _ in rows), default=0)
        return "\n".join(f"{label:<{label_length}}  {data}" for label, data in rows)

    def __eq__(self, item):
        if not isinstance(item, Alignment):
            return False
        return (
            self.sequences == item.sequences
            and self.column_annotations == item.column_annotations
            and self.sequence_annotations == item.sequence_annotations
            and self.residue_annotations == item.residue_annotations
            and self.file_annotations == item.file_annotations
        )

    def _check_references(self):
        seq_ids = set()
        for seq in self.sequences:
            if seq.id in seq_ids:
                raise DuplicateSequenceIdError(
                    f"The sequence identifier '{seq.id}' occurs multiple times"
                )
            seq_ids.add(seq.id)
        for level, annotations in [
            ("Sequence", self.sequence_annotations),
            ("Residue", self.residue_annotations),
        ]:
            for seq_id in annotations:
                if seq_id not in seq_ids:
                    raise AnnotationReferenceError(
                        f"{level} annotation refers to unknown sequence '{seq_id}'"
                    )

    ## Accessors

    def width(self):
        """
        Get the number of columns.

        Returns
        -------
        width : int
            The length of the first sequence, 0 if the alignment has no
            sequences.
        """
        if len(self.sequences) == 0:
            return 0
        return len(self.sequences[0].data)

    def num_sequences(self):
        return len(self.sequences)

    def sequence_ids(self):
        return [seq.id for seq in self.sequences]

    def row_of(self, seq_id):
        """
        Get the row index of the sequence with the given identifier.

        Returns
        -------
        row : int or None
            The row index, ``None`` if there is no such sequence.
        """
        for row, seq in enumerate(self.sequences):
            if seq.id == seq_id:
                return row
        return None

    def max_id_length(self):
        return max((len(seq.id) for seq in self.sequences), default=0)

    def get_column_annotation(self, tag):
        """
        Get the column annotation with the given tag.

        Returns
        -------
        annotation : ColumnAnnotation or None
            The first annotation with a matching tag, ``None`` if no
            such annotation exists.
        """
        for annotation in self.column_annotations:
            if annotation.tag == tag:
                return annotation
        return None

    def set_column_annotation(self, tag, data):
        """
        Replace the data of the column annotation with the given tag or
        add a new column annotation.
        """
        annotation = self.get_column_annotation(tag)
        if annotation is None:
            self.column_annotations.append(ColumnAnnotation(tag, data))
        else:
            annotation.data = data

    def ss_cons(self):
        """
        Get the consensus secondary structure in bracket notation.

        Returns
        -------
        ss_cons : str or None
            The data of the ``SS_cons`` column annotation.
        """
        annotation = self.get_column_annotation(SS_CONS_TAG)
        return None if annotation is None else annotation.data

    def rf(self):
        """
        Get the reference annotation.

        Returns
        -------
        rf : str or None
            The data of the ``RF`` column annotation.
        """
        annotation = self.get_column_annotation(RF_TAG)
        return None if annotation is None else annotation.data

    def get_char(self, row, col):
        """
        Get the symbol in a cell.

        Returns
        -------
        symbol : str or None
            The symbol, ``None`` if the cell does not exist.
        """
        seq = self._sequence_at(row)
        if seq is None or col < 0 or col >= len(seq.data):
            return None
        return seq.data[col]

    def set_char(self, row, col, symbol):
        """
        Replace the symbol in a cell.

        Returns
        -------
        success : bool
            False, if the cell does not exist or `symbol` is not a
            single character.
        """
        seq = self._sequence_at(row)
        if seq is None or col < 0 or col >= len(seq.data):
            return False
        if len(symbol) != 1:
            return False
        seq.data = seq.data[:col] + symbol + seq.data[col + 1 :]
        return True

    def is_rectangular(self):
        """
        Check whether all sequences, column annotations and residue
        annotations have the same length.
        """
        lengths = set(len(row.data) for row in self._rows())
        return len(lengths) <= 1

    def _sequence_at(self, row):
        if row < 0 or row >= len(self.sequences):
            return None
        return self.sequences[row]

    def _residue_rows(self, seq_id):
        return self.residue_annotations.get(seq_id, [])

    def _rows(self):
        """
        Iterate over all column-aligned data series.
        """
        yield from self.sequences
        yield from self.column_annotations
        for annotations in self.residue_annotations.values():
            yield from annotations

    ## Whole-sequence operations

    def add_sequence(self, sequence):
        """
        Append a sequence as new row.

        Raises
        ------
        DuplicateSequenceIdError
            If a sequence with the same identifier is already present.
        """
        if self.row_of(sequence.id) is not None:
            raise DuplicateSequenceIdError(
                f"The sequence identifier '{sequence.id}' occurs multiple times"
            )
        self.sequences.append(sequence)

    def delete_sequence(self, row):
        """
        Remove a sequence together with all of its sequence and residue
        annotations.

        Returns
        -------
        sequence : Sequence or None
            The removed sequence, ``None`` if `row` does not exist.
        """
        if self._sequence_at(row) is None:
            return None
        sequence = self.sequences.pop(row)
        self.sequence_annotations.pop(sequence.id, None)
        self.residue_annotations.pop(sequence.id, None)
        return sequence

    def transform_sequences(self, function):
        """
        Replace the data of each sequence with ``function(data)``.

        Annotations are not affected.
        """
        for seq in self.sequences:
            seq.data = function(seq.data)

    ## Global column operations

    def insert_gap_column(self, col, gap_symbol):
        """
        Insert a gap column in front of the given column.

        The gap symbol is inserted into every sequence, column
        annotation and residue annotation.
        A column beyond the alignment width appends the gap column.

        Returns
        -------
        success : bool
            False, if `gap_symbol` is not a single character.
            In this case the alignment is not modified.
        """
        if len(gap_symbol) != 1:
            return False
        col = max(col, 0)
        for row in self._rows():
            pos = min(col, len(row.data))
            row.data = row.data[:pos] + gap_symbol + row.data[pos:]
        return True

    def is_gap_column(self, col, gap_symbols):
        """
        Check whether every sequence has a gap at the given column.

        Returns
        -------
        is_gap_column : bool
            False also if `col` is not a column of the alignment.
        """
        if col < 0 or col >= self.width():
            return False
        return all(
            col < len(seq.data) and seq.data[col] in gap_symbols
            for seq in self.sequences
        )

    def delete_gap_column(self, col, gap_symbols):
        """
        Remove a column, that contains only gaps.

        The column is removed from every sequence, column annotation
        and residue annotation.
        The symbols of the annotations in this column are not checked.

        Returns
        -------
        success : bool
            False, if the column contains non-gap symbols.
            In this case the alignment is not modified.
        """
        if not self.is_gap_column(col, gap_symbols):
            return False
        for row in self._rows():
            if col < len(row.data):
                row.data = row.data[:col] + row.data[col + 1 :]
        return True

    ## Row-local operations

    def insert_gap(self, row, col, gap_symbol):
        """
        Insert a gap into a single sequence and its residue
        annotations.

        Returns
        -------
        success : bool
            False, if the position does not exist or `gap_symbol` is
            not a single character.
        """
        seq = self._sequence_at(row)
        if seq is None or not seq.insert_gap(col, gap_symbol):
            return False
        for annotation in self._residue_rows(seq.id):
            if col <= len(annotation.data):
                annotation.data = (
                    annotation.data[:col] + gap_symbol + annotation.data[col:]
                )
        return True

    def delete_gap(self, row, col, gap_symbols):
        """
        Remove a gap from a single sequence and its residue
        annotations.

        Returns
        -------
        success : bool
            False, if the symbol at the position is not a gap.
        """
        seq = self._sequence_at(row)
        if seq is None or not seq.delete_gap(col, gap_symbols):
            return False
        for annotation in self._residue_rows(seq.id):
            if col < len(annotation.data):
                annotation.data = annotation.data[:col] + annotation.data[col + 1 :]
        return True

    def find_gap(self, row, col, gap_symbols, step):
        """
        Find the gap nearest to a cell in the given direction.

        Returns
        -------
        col : int or None
            The column of the nearest gap in the row, ``None`` if there
            is none.
        """
        seq = self._sequence_at(row)
        if seq is None:
            return None
        return seq.find_gap(col, gap_symbols, step)

    def is_packed(self, row, col, gap_symbols, step):
        """
        Check whether a shift in the given direction would leave all
        residues of a sequence in place.

        Returns
        -------
        packed : bool
            True also, if `row` does not exist.
        """
        seq = self._sequence_at(row)
        if seq is None:
            return True
        return is_packed(seq.data, col, gap_symbols, step)

    def shift_left(self, row, col, gap_symbols):
        """
        Move the symbols between the nearest gap on the left and `col`
        one position to the left.

        The same is done independently for each residue annotation of
        the sequence.

        Returns
        -------
        success : bool
            False, if there is no gap left of `col`.
        """
        return self._shift(row, col, gap_symbols, -1)

    def shift_right(self, row, col, gap_symbols):
        """
        Move the symbols between `col` and the nearest gap on the right
        one position to the right.

        The same is done independently for each residue annotation of
        the sequence.

        Returns
        -------
        success : bool
            False, if there is no gap right of `col`.
        """
        return self._shift(row, col, gap_symbols, 1)

    def throw_left(self, row, col, gap_symbols):
        """
        Repeat :func:`shift_left()` until a further shift would not move
        any residue, i.e. the symbols up to `col` are packed against the
        next residue or the start of the sequence.

        Returns
        -------
        success : bool
            True, if at least one shift was performed.
        """
        return self._throw(row, col, gap_symbols, -1) > 0

    def throw_right(self, row, col, gap_symbols):
        """
        Repeat :func:`shift_right()` until a further shift would not move
        any residue, i.e. the symbols from `col` on are packed against the
        next residue or the end of the sequence.

        Returns
        -------
        success : bool
            True, if at least one shift was performed.
        """
        return self._throw(row, col, gap_symbols, 1) > 0

    def _shift(self, row, col, gap_symbols, step):
        seq = self._sequence_at(row)
        if seq is None or not seq._shift(col, gap_symbols, step):
            return False
        for annotation in self._residue_rows(seq.id):
            shifted = shift_symbols(annotation.data, col, gap_symbols, step)
            if shifted is not None:
                annotation.data = shifted
        return True

    def _throw(self, row, col, gap_symbols, step):
        # Each counted shift moves at least one residue towards the
        # consumed gap, hence the loop ends after a finite number of shifts
        count = 0
        while not self.is_packed(row, col, gap_symbols, step):
            self._shift(row, col, gap_symbols, step)
            count += 1
        return count
