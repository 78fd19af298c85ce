# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for secondary structure annotations.

The consensus secondary structure of an alignment is given in
bracket notation, one symbol per column.
:func:`resolve()` converts it into a :class:`PairTable`, that maps each
paired column to its partner column.
Pseudoknots are expressed by using additional bracket types, the
*pairing channels*, that are resolved independently of each other.

Unmatched brackets are not an error:
:func:`resolve()` reports their columns alongside all pairs, that could
be matched.

A :class:`StructureCache` keeps the pair table of the current
consensus structure and recomputes it only, when it is explicitly
updated with a different structure string.
"""

__name__ = "alignedit.structure"
__author__ = "The alignedit contributors"

from .error import *
from .pairs import *
from .cache import *
