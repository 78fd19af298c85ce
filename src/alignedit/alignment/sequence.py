# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The aligned sequence type and the row-local gap primitives, that
operate on a single row of symbols.
"""

__name__ = "alignedit.alignment"
__author__ = "The alignedit contributors"
__all__ = ["Sequence", "find_gap", "shift_symbols", "is_packed"]

from alignedit.copyable import Copyable


def find_gap(data, col, gap_symbols, step):
    """
    Find the gap nearest to a column in the given direction.

    The column itself is not considered.

    Parameters
    ----------
    data : str
        A row of aligned symbols.
    col : int
        The column to start the search from.
    gap_symbols : str or set of str
        The symbols that are regarded as gaps.
    step : {-1, 1}
        Search to the left (``-1``) or to the right (``1``).

    Returns
    -------
    index : int or None
        The position of the nearest gap.
        ``None`` if `col` is not a position in `data` or no gap exists
        in the search direction.

    Examples
    --------

    >>> find_gap("A.CGU", 2, ".-", -1)
    1
    >>> print(find_gap("A.CGU", 2, ".-", 1))
    None
    """
    if step not in (-1, 1):
        raise ValueError(f"Step must be -1 or 1, not {step}")
    if col < 0 or col >= len(data):
        return None
    i = col + step
    while 0 <= i < len(data):
        if data[i] in gap_symbols:
            return i
        i += step
    return None


def shift_symbols(data, col, gap_symbols, step):
    """
    Move the run of symbols between `col` and the nearest gap in the
    direction of `step` by one position towards that gap.

    The nearest gap is removed and the same gap symbol is inserted at
    `col` instead, hence the length of the row is unchanged.

    Parameters
    ----------
    data : str
        A row of aligned symbols.
    col : int
        The column, at which the gap is inserted.
    gap_symbols : str or set of str
        The symbols that are regarded as gaps.
    step : {-1, 1}
        Consume a gap on the left (``-1``) or on the right (``1``) of
        `col`.

    Returns
    -------
    shifted : str or None
        The shifted row, or ``None`` if there is no gap to consume.

    Examples
    --------

    >>> shift_symbols("A.CGU", 2, ".", -1)
    'AC.GU'
    >>> shift_symbols("ACG.U", 2, ".", 1)
    'AC.GU'
    """
    gap_pos = find_gap(data, col, gap_symbols, step)
    if gap_pos is None:
        return None
    gap = data[gap_pos]
    # Removing a gap left of 'col' moves 'col' one position to the left,
    # so the gap is inserted right behind the symbol, that was at 'col'
    data = data[:gap_pos] + data[gap_pos + 1 :]
    return data[:col] + gap + data[col:]


def is_packed(data, col, gap_symbols, step):
    """
    Check whether a shift at `col` in the direction of `step` would
    leave all non-gap symbols in place.

    This is the case, if there is no gap in this direction or only gaps
    lie between `col` and the nearest gap.
    Repeated shifting stops at this point.

    Parameters
    ----------
    data : str
        A row of aligned symbols.
    col : int
        The column, at which a gap would be inserted.
    gap_symbols : str or set of str
        The symbols that are regarded as gaps.
    step : {-1, 1}
        Shift to the left (``-1``) or to the right (``1``).

    Returns
    -------
    packed : bool
        True, if a shift would not move any non-gap symbol.

    Examples
    --------

    >>> is_packed("A..CGU", 3, ".", -1)
    False
    >>> is_packed("AC..GU", 3, ".", -1)
    True
    """
    gap_pos = find_gap(data, col, gap_symbols, step)
    if gap_pos is None:
        return True
    if step == -1:
        moved = data[gap_pos + 1 : col + 1]
    else:
        moved = data[col:gap_pos]
    return all(symbol in gap_symbols for symbol in moved)


class Sequence(Copyable):
    """
    A single row of an alignment.

    Parameters
    ----------
    seq_id : str
        The identifier of the sequence, usually ``name/start-end``.
        It is the key of the sequence's annotations in the
        :class:`Alignment`.
    data : str, optional
        The aligned symbols, including gaps.

    Attributes
    ----------
    id : str
        The identifier of the sequence.
    data : str
        The aligned symbols, including gaps.
    """

    def __init__(self, seq_id, data=""):
        self.id = seq_id
        self.data = data

    def __copy_create__(self):
        return Sequence(self.id, self.data)

    def __repr__(self):
        return f"Sequence({self.id!r}, {self.data!r})"

    def __str__(self):
        return self.data

    def __len__(self):
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __eq__(self, item):
        if not isinstance(item, Sequence):
            return False
        return self.id == item.id and self.data == item.data

    def insert_gap(self, pos, gap_symbol):
        """
        Insert a gap symbol in front of the given position.

        Parameters
        ----------
        pos : int
            The insertion position.
            It may be equal to the sequence length to append the gap.
        gap_symbol : str
            The symbol to insert.

        Returns
        -------
        success : bool
            False, if `pos` is outside the sequence or `gap_symbol` is
            not a single character.
        """
        if pos < 0 or pos > len(self.data) or len(gap_symbol) != 1:
            return False
        self.data = self.data[:pos] + gap_symbol + self.data[pos:]
        return True

    def delete_gap(self, pos, gap_symbols):
        """
        Remove the symbol at the given position, if it is a gap.

        Parameters
        ----------
        pos : int
            The position of the symbol to remove.
        gap_symbols : str or set of str
            The symbols that are regarded as gaps.

        Returns
        -------
        success : bool
            False, if there is no gap at `pos`.
        """
        if pos < 0 or pos >= len(self.data):
            return False
        if self.data[pos] not in gap_symbols:
            return False
        self.data = self.data[:pos] + self.data[pos + 1 :]
        return True

    def find_gap(self, col, gap_symbols, step):
        """
        Same as :func:`find_gap()` applied to this sequence.
        """
        return find_gap(self.data, col, gap_symbols, step)

    def shift_left(self, col, gap_symbols):
        """
        Consume the nearest gap left of `col` and insert it at `col`.

        Returns
        -------
        success : bool
            False, if there is no gap left of `col`.
        """
        return self._shift(col, gap_symbols, -1)

    def shift_right(self, col, gap_symbols):
        """
        Consume the nearest gap right of `col` and insert it at `col`.

        Returns
        -------
        success : bool
            False, if there is no gap right of `col`.
        """
        return self._shift(col, gap_symbols, 1)

    def _shift(self, col, gap_symbols, step):
        shifted = shift_symbols(self.data, col, gap_symbols, step)
        if shifted is None:
            return False
        self.data = shifted
        return True
