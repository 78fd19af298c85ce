# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for the aligned data model.

An :class:`Alignment` is a grid of symbols:
Each row is a :class:`Sequence` with an identifier and its aligned
symbols, including gap symbols.
Parallel to the sequences, an alignment holds annotations on several
levels, named after the respective lines in *Stockholm* files:

    - :class:`FileAnnotation` (``#=GF``) - describes the alignment as
      a whole
    - :class:`SequenceAnnotation` (``#=GS``) - describes a whole
      sequence
    - :class:`ColumnAnnotation` (``#=GC``) - one symbol per column,
      e.g. the consensus secondary structure ``SS_cons``
    - :class:`ResidueAnnotation` (``#=GR``) - one symbol per column of
      a single sequence

Sequence and residue annotations are joined to their sequence via the
sequence identifier.

The alignment offers two kinds of edit operations:
The *global column operations* insert or remove a column in all rows
at once and hence keep all column-aligned series synchronized.
The *row-local operations* insert, remove or move gaps in a single
sequence and mirror the change into the residue annotations of that
sequence only.
None of the operations raises an exception for an invalid position or
an unmet precondition, instead they report their success as return
value and leave the alignment unchanged on failure.
"""

__name__ = "alignedit.alignment"
__author__ = "The alignedit contributors"

from .error import *
from .annotation import *
from .sequence import *
from .alignment import *
