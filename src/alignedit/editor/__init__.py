# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for interactive editing of an alignment.

An :class:`EditSession` holds the edited :class:`Alignment` together
with a cursor and applies the edit operations of
:mod:`alignedit.alignment` at the cursor position.
Before each modification, the session saves a copy of the alignment
and the cursor position in its :class:`History`, so that every
operation can be undone and redone.
After each modification, that may change the consensus secondary
structure, the session updates its
:class:`alignedit.structure.StructureCache`.

Operations, whose precondition is not met, do not raise exceptions:
They return false and leave a human-readable message in
:attr:`EditSession.status_message`.

:class:`InputHistory` stores lines entered in a command prompt.
"""

__name__ = "alignedit.editor"
__author__ = "The alignedit contributors"

from .history import *
from .session import *
