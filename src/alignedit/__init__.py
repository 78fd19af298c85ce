# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *alignedit*.

*alignedit* is the editing core of an interactive editor for
multiple sequence alignments with a consensus secondary structure
annotation.
The data model lives in :mod:`alignedit.alignment`, the base pairing
logic in :mod:`alignedit.structure` and the undo/redo history together
with the cursor-based editing session in :mod:`alignedit.editor`.

The top-level package itself only provides base classes used by the
subpackages.
"""

__version__ = "0.3.0"
__name__ = "alignedit"
__author__ = "The alignedit contributors"

from .copyable import *
