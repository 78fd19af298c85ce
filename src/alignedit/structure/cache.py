# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "alignedit.structure"
__author__ = "The alignedit contributors"
__all__ = ["StructureCache"]

import numpy as np
from alignedit.structure.pairs import PairTable, resolve


class StructureCache:
    """
    The pair table of a consensus secondary structure, memoized for the
    structure string it was computed from.

    The cache never refreshes itself:
    Whenever the consensus structure may have changed, the owner calls
    :func:`update()`, which recomputes the table only if the structure
    string differs from the cached one.

    Attributes
    ----------
    source : str or None
        The structure string the table was built from, ``None`` if the
        cache is empty.
    table : PairTable
        The pairs of `source`.
    malformed : ndarray, dtype=int
        The columns of unmatched brackets in `source`.
    """

    def __init__(self):
        self.source = None
        self.table = PairTable()
        self.malformed = np.zeros(0, dtype=int)

    def is_valid_for(self, source):
        """
        Check whether the cached table was built from the given
        structure string.
        """
        return self.source == source

    def update(self, source):
        """
        Rebuild the pair table from a structure string.

        Parameters
        ----------
        source : str or None
            The consensus structure.
            ``None`` empties the cache.

        Returns
        -------
        malformed : ndarray, dtype=int
            The columns of unmatched brackets.
            An empty array indicates a well-formed structure.
            The pairs of all matched brackets are cached nevertheless.
        """
        if source is None:
            self.table = PairTable()
            self.malformed = np.zeros(0, dtype=int)
        else:
            self.table, self.malformed = resolve(source)
        self.source = source
        return self.malformed

    def get_pair(self, col):
        return self.table.get_pair(col)

    def is_paired(self, col):
        return self.table.is_paired(col)
