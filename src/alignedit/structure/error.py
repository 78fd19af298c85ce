# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors of the `structure` subpackage.
"""

__name__ = "alignedit.structure"
__author__ = "The alignedit contributors"
__all__ = ["MalformedStructureError", "MalformedStructureWarning"]


class MalformedStructureError(Exception):
    """
    Indicates that a bracket notation contains unmatched brackets.

    Parameters
    ----------
    table : PairTable
        The pairs, that could be matched nevertheless.
    malformed : ndarray, dtype=int
        The columns of the unmatched brackets.
    """

    def __init__(self, table, malformed):
        self.table = table
        self.malformed = malformed
        super().__init__(
            "Unmatched brackets at column(s) "
            + ", ".join(str(col + 1) for col in malformed)
        )


class MalformedStructureWarning(Warning):
    """
    Indicates that a consensus structure contains unmatched brackets,
    which are treated as unpaired columns.
    """

    pass
