# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the editing session, that applies cursor-relative
edit operations to an alignment.
"""

__name__ = "alignedit.editor"
__author__ = "The alignedit contributors"
__all__ = ["DEFAULT_GAP_SYMBOL", "DEFAULT_GAP_SYMBOLS", "EditSession"]

import warnings
from alignedit.alignment import Alignment, RaggedAlignmentWarning
from alignedit.editor.history import DEFAULT_HISTORY_DEPTH, History
from alignedit.structure import MalformedStructureWarning, StructureCache

DEFAULT_GAP_SYMBOL = "."
DEFAULT_GAP_SYMBOLS = ".-_~:"


class EditSession:
    """
    The state of an interactive editor for a single alignment.

    The session owns the alignment, the cursor, the undo/redo
    :class:`History` and the :class:`StructureCache` of the consensus
    structure.
    Each edit operation acts at the cursor position and follows the
    same protocol:

        1. The precondition is checked.
           If it is not met, a message is put into
           :attr:`status_message`, the operation returns false and
           nothing is changed.
        2. The current state is saved in the history.
        3. The alignment is modified.
        4. The structure cache is updated, if the consensus structure
           may have changed.
        5. The session is marked as modified and the operation returns
           true.

    Parameters
    ----------
    alignment : Alignment, optional
        The alignment to edit.
        By default an empty alignment is edited.
    gap_symbol : str, optional
        The symbol inserted by the gap insertion operations.
    gap_symbols : str or iterable of str, optional
        The symbols that are regarded as gaps.
        `gap_symbol` is always regarded as gap.
    history_depth : int or None, optional
        The maximum number of operations that can be undone.

    Attributes
    ----------
    alignment : Alignment
        The edited alignment.
    cursor_row, cursor_col : int
        The cursor position.
    gap_symbol : str
        The symbol inserted by the gap insertion operations.
    gap_symbols : set of str
        The symbols that are regarded as gaps.
    history : History
        The undo/redo history.
    structure_cache : StructureCache
        The pairs of the consensus structure.
    modified : bool
        Whether the alignment was changed since it was loaded.
    status_message : str or None
        A message for the user about the last operation.

    Examples
    --------

    >>> session = EditSession(Alignment(
    ...     [Sequence("seq1", "ACGU")], [ColumnAnnotation("SS_cons", "(..)")]
    ... ))
    >>> session.cursor_col = 2
    >>> session.insert_gap_column()
    True
    >>> print(session.alignment)
    seq1          AC.GU
    #=GC SS_cons  (...)
    >>> print(session.structure_cache.get_pair(4))
    0
    >>> session.undo()
    True
    >>> print(session.alignment.sequences[0])
    ACGU
    """

    def __init__(
        self,
        alignment=None,
        gap_symbol=DEFAULT_GAP_SYMBOL,
        gap_symbols=DEFAULT_GAP_SYMBOLS,
        history_depth=DEFAULT_HISTORY_DEPTH,
    ):
        self.gap_symbol = gap_symbol
        self.gap_symbols = set(gap_symbols) | {gap_symbol}
        self.history = History(history_depth)
        self.structure_cache = StructureCache()
        self.alignment = Alignment()
        self.cursor_row = 0
        self.cursor_col = 0
        self.modified = False
        self.status_message = None
        if alignment is not None:
            self.load(alignment)

    def load(self, alignment):
        """
        Start editing a new alignment.

        The cursor is reset, the history is cleared and the structure
        cache is rebuilt.

        Warns
        -----
        RaggedAlignmentWarning
            If the rows of the alignment differ in length.
        MalformedStructureWarning
            If the consensus structure contains unmatched brackets.
        """
        if not alignment.is_rectangular():
            warnings.warn(
                "The rows of the alignment have different lengths",
                RaggedAlignmentWarning,
                stacklevel=2,
            )
        self.alignment = alignment
        self.cursor_row = 0
        self.cursor_col = 0
        self.modified = False
        self.status_message = None
        self.history.clear()
        self.refresh_structure()

    def refresh_structure(self):
        """
        Update the structure cache, if the consensus structure differs
        from the cached one.

        Warns
        -----
        MalformedStructureWarning
            If the new consensus structure contains unmatched brackets.
        """
        source = self.alignment.ss_cons()
        if self.structure_cache.is_valid_for(source):
            return
        malformed = self.structure_cache.update(source)
        if len(malformed) > 0:
            message = "Unmatched brackets in SS_cons at column(s) " + ", ".join(
                str(col + 1) for col in malformed
            )
            warnings.warn(message, MalformedStructureWarning, stacklevel=2)
            self.status_message = message

    def set_status(self, message):
        self.status_message = message

    def clear_status(self):
        self.status_message = None

    def set_gap_symbol(self, symbol):
        """
        Change the symbol inserted by the gap insertion operations.

        The symbol is added to the gap symbols, if necessary.

        Returns
        -------
        success : bool
            False, if `symbol` is not a single character.
        """
        if len(symbol) != 1:
            self.status_message = f"Invalid gap character: '{symbol}'"
            return False
        self.gap_symbol = symbol
        self.gap_symbols.add(symbol)
        self.status_message = f"Gap character: '{symbol}'"
        return True

    ## Cursor

    def current_symbol(self):
        return self.alignment.get_char(self.cursor_row, self.cursor_col)

    def is_current_gap(self):
        symbol = self.current_symbol()
        return symbol is not None and symbol in self.gap_symbols

    def clamp_cursor(self):
        """
        Move the cursor into the bounds of the alignment.
        """
        max_row = max(self.alignment.num_sequences() - 1, 0)
        max_col = max(self.alignment.width() - 1, 0)
        self.cursor_row = min(max(self.cursor_row, 0), max_row)
        self.cursor_col = min(max(self.cursor_col, 0), max_col)

    def move_cursor(self, rows=0, cols=0):
        """
        Move the cursor by the given number of rows and columns.

        The cursor stops at the bounds of the alignment.
        """
        self.cursor_row += rows
        self.cursor_col += cols
        self.clamp_cursor()

    def cursor_line_start(self):
        self.cursor_col = 0

    def cursor_line_end(self):
        self.cursor_col = max(self.alignment.width() - 1, 0)

    def cursor_first_sequence(self):
        self.cursor_row = 0

    def cursor_last_sequence(self):
        self.cursor_row = max(self.alignment.num_sequences() - 1, 0)

    def page_down(self, page_size):
        self.move_cursor(rows=page_size)

    def page_up(self, page_size):
        self.move_cursor(rows=-page_size)

    def goto_pair(self):
        """
        Move the cursor to the partner column of the current column.

        Returns
        -------
        success : bool
            False, if the current column is unpaired.
        """
        partner = self.structure_cache.get_pair(self.cursor_col)
        if partner is None:
            self.status_message = "Column is not paired"
            return False
        self.cursor_col = partner
        return True

    def pair_info(self):
        """
        Describe the partner of the current column.

        Returns
        -------
        info : str or None
            ``pair:<column>`` with a 1-based column, ``None`` if the
            current column is unpaired.
        """
        partner = self.structure_cache.get_pair(self.cursor_col)
        if partner is None:
            return None
        return f"pair:{partner + 1}"

    ## Edit operations

    def _save_undo_state(self):
        self.history.save(self.alignment, self.cursor_row, self.cursor_col)

    def insert_gap(self):
        """
        Insert a gap at the cursor in the current sequence and move the
        cursor to the right.
        """
        if self.current_symbol() is None:
            self.status_message = "No sequence at cursor"
            return False
        if len(self.gap_symbol) != 1:
            self.status_message = f"Invalid gap character: '{self.gap_symbol}'"
            return False
        self._save_undo_state()
        self.alignment.insert_gap(self.cursor_row, self.cursor_col, self.gap_symbol)
        self.modified = True
        self.move_cursor(cols=1)
        return True

    def delete_gap(self):
        """
        Remove the gap at the cursor from the current sequence.
        """
        if not self.is_current_gap():
            self.status_message = "Not a gap character"
            return False
        self._save_undo_state()
        self.alignment.delete_gap(self.cursor_row, self.cursor_col, self.gap_symbols)
        self.modified = True
        return True

    def insert_gap_column(self):
        """
        Insert a gap column in front of the cursor column.
        """
        if len(self.gap_symbol) != 1:
            self.status_message = f"Invalid gap character: '{self.gap_symbol}'"
            return False
        self._save_undo_state()
        self.alignment.insert_gap_column(self.cursor_col, self.gap_symbol)
        self.modified = True
        self.refresh_structure()
        return True

    def delete_gap_column(self):
        """
        Remove the cursor column, if it contains only gaps.
        """
        if not self.alignment.is_gap_column(self.cursor_col, self.gap_symbols):
            self.status_message = "Column contains non-gap characters"
            return False
        self._save_undo_state()
        self.alignment.delete_gap_column(self.cursor_col, self.gap_symbols)
        self.modified = True
        self.clamp_cursor()
        self.refresh_structure()
        return True

    def shift_left(self):
        """
        Shift the symbols left of the cursor into the nearest gap on the
        left.
        """
        return self._shift(-1, throw=False)

    def shift_right(self):
        """
        Shift the symbols right of the cursor into the nearest gap on
        the right.
        """
        return self._shift(1, throw=False)

    def throw_left(self):
        """
        Shift to the left until a further shift would not move any
        residue.
        """
        return self._shift(-1, throw=True)

    def throw_right(self):
        """
        Shift to the right until a further shift would not move any
        residue.
        """
        return self._shift(1, throw=True)

    def _shift(self, step, throw):
        direction = "left" if step == -1 else "right"
        if throw:
            if self.alignment.is_packed(
                self.cursor_row, self.cursor_col, self.gap_symbols, step
            ):
                self.status_message = f"Cannot throw {direction} (no gaps found)"
                return False
        elif (
            self.alignment.find_gap(
                self.cursor_row, self.cursor_col, self.gap_symbols, step
            )
            is None
        ):
            self.status_message = f"Cannot shift {direction} (no gap found)"
            return False
        self._save_undo_state()
        if throw and step == -1:
            self.alignment.throw_left(
                self.cursor_row, self.cursor_col, self.gap_symbols
            )
        elif throw:
            self.alignment.throw_right(
                self.cursor_row, self.cursor_col, self.gap_symbols
            )
        elif step == -1:
            self.alignment.shift_left(
                self.cursor_row, self.cursor_col, self.gap_symbols
            )
        else:
            self.alignment.shift_right(
                self.cursor_row, self.cursor_col, self.gap_symbols
            )
        self.modified = True
        return True

    def delete_sequence(self):
        """
        Remove the current sequence with all of its annotations.
        """
        if self.alignment.num_sequences() == 0:
            self.status_message = "No sequence to delete"
            return False
        if not 0 <= self.cursor_row < self.alignment.num_sequences():
            self.status_message = "No sequence at cursor"
            return False
        self._save_undo_state()
        removed = self.alignment.delete_sequence(self.cursor_row)
        self.modified = True
        self.clamp_cursor()
        self.status_message = f"Deleted sequence '{removed.id}'"
        return True

    def replace_symbol(self, symbol):
        """
        Replace the symbol at the cursor.
        """
        if len(symbol) != 1:
            self.status_message = f"Invalid character: '{symbol}'"
            return False
        if self.current_symbol() is None:
            self.status_message = "No sequence at cursor"
            return False
        self._save_undo_state()
        self.alignment.set_char(self.cursor_row, self.cursor_col, symbol)
        self.modified = True
        return True

    def uppercase(self):
        """
        Convert all sequences to upper case.
        """
        return self._transform(str.upper, "Converted to uppercase")

    def lowercase(self):
        """
        Convert all sequences to lower case.
        """
        return self._transform(str.lower, "Converted to lowercase")

    def convert_t_to_u(self):
        """
        Convert all sequences from DNA to RNA.
        """
        return self._transform(
            lambda data: data.replace("T", "U").replace("t", "u"), "Converted T to U"
        )

    def convert_u_to_t(self):
        """
        Convert all sequences from RNA to DNA.
        """
        return self._transform(
            lambda data: data.replace("U", "T").replace("u", "t"), "Converted U to T"
        )

    def _transform(self, function, message):
        if self.alignment.num_sequences() == 0:
            self.status_message = "No sequences"
            return False
        self._save_undo_state()
        self.alignment.transform_sequences(function)
        self.modified = True
        self.status_message = message
        return True

    ## History

    def undo(self):
        """
        Restore the state before the last edit operation.
        """
        snapshot = self.history.undo(self.alignment, self.cursor_row, self.cursor_col)
        if snapshot is None:
            self.status_message = "Nothing to undo"
            return False
        self._restore(snapshot)
        self.status_message = "Undo"
        return True

    def redo(self):
        """
        Restore the state before the last undo.
        """
        snapshot = self.history.redo(self.alignment, self.cursor_row, self.cursor_col)
        if snapshot is None:
            self.status_message = "Nothing to redo"
            return False
        self._restore(snapshot)
        self.status_message = "Redo"
        return True

    def _restore(self, snapshot):
        self.alignment = snapshot.alignment
        self.cursor_row = snapshot.cursor_row
        self.cursor_col = snapshot.cursor_col
        # The restored state still differs from the loaded alignment
        self.modified = True
        self.refresh_structure()
