# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides the snapshot based undo/redo history and the
history of entered command lines.
"""

__name__ = "alignedit.editor"
__author__ = "The alignedit contributors"
__all__ = ["DEFAULT_HISTORY_DEPTH", "Snapshot", "History", "InputHistory"]

from collections import deque
from dataclasses import dataclass
from alignedit.alignment import Alignment

DEFAULT_HISTORY_DEPTH = 1000


@dataclass(frozen=True)
class Snapshot:
    """
    The state of an editing session at a point in time.

    Attributes
    ----------
    alignment : Alignment
        A value copy of the alignment.
    cursor_row, cursor_col : int
        The cursor position.
    """

    alignment: Alignment
    cursor_row: int
    cursor_col: int


class History:
    """
    A linear undo/redo history of :class:`Snapshot` objects.

    Before each modification, the editor saves the current state via
    :func:`save()`.
    :func:`undo()` returns the most recently saved state and remembers
    the state it replaces, so that :func:`redo()` can return to it.
    Saving a new state discards all states, that could be redone.

    All states are stored as copies, so later modifications of the
    alignment given to the history do not affect the stored states.

    Parameters
    ----------
    max_depth : int or None, optional
        The maximum number of states that can be undone.
        If the limit is exceeded, the oldest state is dropped.
        ``None`` means no limit.

    Examples
    --------

    >>> history = History()
    >>> alignment = Alignment([Sequence("seq1", "ACGU")])
    >>> history.save(alignment, 0, 2)
    >>> alignment.insert_gap_column(2, ".")
    True
    >>> snapshot = history.undo(alignment, 0, 2)
    >>> print(snapshot.alignment.sequences[0])
    ACGU
    >>> snapshot = history.redo(snapshot.alignment, 0, 2)
    >>> print(snapshot.alignment.sequences[0])
    AC.GU
    >>> print(history.redo(snapshot.alignment, 0, 2))
    None
    """

    def __init__(self, max_depth=DEFAULT_HISTORY_DEPTH):
        if max_depth is not None and max_depth < 1:
            raise ValueError("The history depth must be at least 1")
        self._max_depth = max_depth
        self._undo = deque(maxlen=max_depth)
        self._redo = deque(maxlen=max_depth)

    @property
    def max_depth(self):
        return self._max_depth

    def __len__(self):
        return len(self._undo)

    def can_undo(self):
        return len(self._undo) > 0

    def can_redo(self):
        return len(self._redo) > 0

    def save(self, alignment, cursor_row, cursor_col):
        """
        Store the state before a modification.

        This discards all states, that could have been redone.
        """
        self._undo.append(Snapshot(alignment.copy(), cursor_row, cursor_col))
        self._redo.clear()

    def undo(self, alignment, cursor_row, cursor_col):
        """
        Go back to the most recently saved state.

        Parameters
        ----------
        alignment : Alignment
            The current alignment, that is replaced by the returned
            state.
        cursor_row, cursor_col : int
            The current cursor position.

        Returns
        -------
        snapshot : Snapshot or None
            The state to restore, ``None`` if there is nothing to undo.
            In this case the history is unchanged.
        """
        if len(self._undo) == 0:
            return None
        self._redo.append(Snapshot(alignment.copy(), cursor_row, cursor_col))
        return self._undo.pop()

    def redo(self, alignment, cursor_row, cursor_col):
        """
        Go forward to the most recently undone state.

        The parameters are the same as for :func:`undo()`.

        Returns
        -------
        snapshot : Snapshot or None
            The state to restore, ``None`` if there is nothing to redo.
            In this case the history is unchanged.
        """
        if len(self._redo) == 0:
            return None
        self._undo.append(Snapshot(alignment.copy(), cursor_row, cursor_col))
        return self._redo.pop()

    def clear(self):
        self._undo.clear()
        self._redo.clear()


class InputHistory:
    """
    The history of lines entered in a command or search prompt.

    The history can be browsed from the newest to the oldest entry
    and back.
    The line, that was being typed when browsing started, is returned
    when browsing past the newest entry.

    Examples
    --------

    >>> history = InputHistory()
    >>> history.push("w")
    >>> history.push("set gap=-")
    >>> history.previous("q")
    'set gap=-'
    >>> history.previous("q")
    'w'
    >>> history.next()
    'set gap=-'
    >>> history.next()
    'q'
    """

    def __init__(self):
        self._entries = []
        # None, while the history is not browsed
        self._index = None
        self._saved = ""

    def __len__(self):
        return len(self._entries)

    @property
    def is_browsing(self):
        return self._index is not None

    def push(self, entry):
        """
        Add an entry, unless it equals the newest entry.
        """
        if len(self._entries) == 0 or self._entries[-1] != entry:
            self._entries.append(entry)
        self._index = None

    def previous(self, current_input):
        """
        Go to the next older entry.

        Parameters
        ----------
        current_input : str
            The line typed so far.
            It is remembered, when browsing starts.

        Returns
        -------
        entry : str or None
            The entry to display, ``None`` if the history is empty.
            At the oldest entry, the oldest entry is returned again.
        """
        if len(self._entries) == 0:
            return None
        if self._index is None:
            self._saved = current_input
            self._index = len(self._entries) - 1
        elif self._index > 0:
            self._index -= 1
        return self._entries[self._index]

    def next(self):
        """
        Go to the next newer entry.

        Returns
        -------
        entry : str or None
            The entry to display.
            Beyond the newest entry the line typed before browsing is
            returned and browsing ends.
            ``None`` if the history is not browsed.
        """
        if self._index is None:
            return None
        if self._index >= len(self._entries) - 1:
            self._index = None
            return self._saved
        self._index += 1
        return self._entries[self._index]

    def reset_navigation(self):
        self._index = None
        self._saved = ""
