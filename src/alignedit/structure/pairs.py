# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module handles the conversion between secondary structures in
bracket notation and base pair tables.
"""

__name__ = "alignedit.structure"
__author__ = "The alignedit contributors"
__all__ = ["PairTable", "resolve", "dot_bracket"]

import numpy as np
from alignedit.copyable import Copyable
from alignedit.structure.error import MalformedStructureError

# The i-th opening and i-th closing symbol form a pairing channel
_OPENING_BRACKETS = "([{<ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_CLOSING_BRACKETS = ")]}>abcdefghijklmnopqrstuvwxyz"
_OPENING_CHANNELS = {symbol: i for i, symbol in enumerate(_OPENING_BRACKETS)}
_CLOSING_CHANNELS = {symbol: i for i, symbol in enumerate(_CLOSING_BRACKETS)}


class PairTable(Copyable):
    """
    A symmetric table of base pairs between the columns of an
    alignment.

    Parameters
    ----------
    length : int, optional
        The number of columns.
        Initially all columns are unpaired.

    Attributes
    ----------
    partners : ndarray, dtype=int, shape=(n,)
        The partner column of each column, -1 for unpaired columns.
        If ``partners[i] == j``, then ``partners[j] == i``.
        PROTECTED: Do not modify from outside, use :func:`add_pair()`.
    channels : ndarray, dtype=int, shape=(n,)
        The index of the pairing channel (bracket type) of each paired
        column, -1 for unpaired columns.
        Channel 0 are round brackets, 1 square brackets, 2 curly
        brackets, 3 angle brackets and 4 onwards the letters ``Aa``
        to ``Zz``.

    Examples
    --------

    >>> table = PairTable(5)
    >>> table.add_pair(0, 3)
    >>> print(table.get_pair(3))
    0
    >>> print(table.get_pair(4))
    None
    """

    def __init__(self, length=0):
        self.partners = np.full(length, -1, dtype=int)
        self.channels = np.full(length, -1, dtype=int)

    def __copy_create__(self):
        return PairTable(len(self))

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone.partners = self.partners.copy()
        clone.channels = self.channels.copy()

    def __repr__(self):
        return f"PairTable({len(self)}) with pairs {self.base_pairs().tolist()}"

    def __len__(self):
        return len(self.partners)

    def __eq__(self, item):
        if not isinstance(item, PairTable):
            return False
        return np.array_equal(self.partners, item.partners) and np.array_equal(
            self.channels, item.channels
        )

    def add_pair(self, first, second, channel=0):
        """
        Pair two columns.

        Parameters
        ----------
        first, second : int
            The columns to be paired.
        channel : int, optional
            The pairing channel of the pair.

        Raises
        ------
        IndexError
            If a column is outside the table.
        ValueError
            If a column is paired with itself or already has a partner.
        """
        for col in (first, second):
            if col < 0 or col >= len(self):
                raise IndexError(
                    f"Column {col} is out of range for a table of length {len(self)}"
                )
            if self.partners[col] != -1:
                raise ValueError(
                    f"Column {col} is already paired with {self.partners[col]}"
                )
        if first == second:
            raise ValueError(f"Column {first} cannot be paired with itself")
        self.partners[first] = second
        self.partners[second] = first
        self.channels[first] = channel
        self.channels[second] = channel

    def get_pair(self, col):
        """
        Get the partner of a column.

        Returns
        -------
        partner : int or None
            The partner column, ``None`` if the column is unpaired or
            outside the table.
        """
        if col < 0 or col >= len(self):
            return None
        partner = self.partners[col]
        if partner == -1:
            return None
        return int(partner)

    def is_paired(self, col):
        return self.get_pair(col) is not None

    def base_pairs(self):
        """
        Get all pairs of the table.

        Returns
        -------
        base_pairs : ndarray, dtype=int, shape=(n,2)
            Each row contains the two columns of a pair, the lower
            column first.
            The rows are sorted by the first column.
        """
        first = np.nonzero(self.partners > np.arange(len(self)))[0]
        return np.stack([first, self.partners[first]], axis=-1)


def resolve(structure, strict=False):
    """
    Extract the base pairs from a secondary structure in bracket
    notation.

    Each bracket type is an independent pairing channel:
    The round, square, curly and angle brackets as well as the letter
    pairs ``A``/``a`` to ``Z``/``z``.
    Within a channel, a closing symbol pairs with the most recent
    unmatched opening symbol of the same channel.
    Channels never interact, so pairs from different channels may
    cross each other, as it is the case for pseudoknots.
    All other symbols denote unpaired columns.

    Unmatched brackets do not prevent the remaining brackets from
    being paired.
    Instead, the unmatched columns are reported in addition to the
    pairs.

    Parameters
    ----------
    structure : str or iterable of str
        The secondary structure, one symbol per column.
    strict : bool, optional
        If true, unmatched brackets raise an exception.

    Returns
    -------
    table : PairTable
        The pairs of all matched brackets.
    malformed : ndarray, dtype=int
        The sorted columns of all unmatched brackets.

    Raises
    ------
    MalformedStructureError
        If `strict` is true and there are unmatched brackets.

    See Also
    --------
    dot_bracket : The reverse operation.

    Examples
    --------

    >>> table, malformed = resolve("((.[[.))]]")
    >>> print(table.base_pairs())
    [[0 7]
     [1 6]
     [3 9]
     [4 8]]
    >>> print(malformed)
    []
    >>> table, malformed = resolve("(.))")
    >>> print(table.base_pairs())
    [[0 2]]
    >>> print(malformed)
    [3]
    """
    symbols = list(structure)
    table = PairTable(len(symbols))
    opened = [[] for _ in range(len(_OPENING_BRACKETS))]
    malformed = []

    for pos, symbol in enumerate(symbols):
        if symbol in _OPENING_CHANNELS:
            opened[_OPENING_CHANNELS[symbol]].append(pos)
        elif symbol in _CLOSING_CHANNELS:
            channel = _CLOSING_CHANNELS[symbol]
            if len(opened[channel]) > 0:
                table.add_pair(opened[channel].pop(), pos, channel)
            else:
                malformed.append(pos)

    for not_closed in opened:
        malformed.extend(not_closed)
    malformed = np.array(sorted(malformed), dtype=int)

    if strict and len(malformed) > 0:
        raise MalformedStructureError(table, malformed)
    return table, malformed


def dot_bracket(table, unpaired_symbol="."):
    """
    Represent a pair table in bracket notation.

    Each pair is written with the brackets of its pairing channel.

    Parameters
    ----------
    table : PairTable
        The pairs to be represented.
    unpaired_symbol : str, optional
        The symbol for unpaired columns.

    Returns
    -------
    notation : str
        The bracket notation.

    See Also
    --------
    resolve : The reverse operation.

    Examples
    --------

    >>> table = PairTable(6)
    >>> table.add_pair(0, 3)
    >>> table.add_pair(2, 5, channel=4)
    >>> dot_bracket(table)
    '(.A).a'
    """
    notation = [unpaired_symbol] * len(table)
    for first, second in table.base_pairs():
        channel = table.channels[first]
        notation[first] = _OPENING_BRACKETS[channel]
        notation[second] = _CLOSING_BRACKETS[channel]
    return "".join(notation)
