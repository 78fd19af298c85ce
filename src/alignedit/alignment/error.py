# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors of the `alignment` subpackage.
"""

__name__ = "alignedit.alignment"
__author__ = "The alignedit contributors"
__all__ = [
    "AlignmentError",
    "DuplicateSequenceIdError",
    "AnnotationReferenceError",
    "RaggedAlignmentWarning",
]


class AlignmentError(Exception):
    """
    Indicates that an alignment cannot be constructed or modified in
    the requested way.
    """

    pass


class DuplicateSequenceIdError(AlignmentError):
    """
    Indicates that two sequences in an alignment would share the same
    identifier.
    """

    pass


class AnnotationReferenceError(AlignmentError):
    """
    Indicates that a per-sequence or per-residue annotation refers to a
    sequence identifier, that is not part of the alignment.
    """

    pass


class RaggedAlignmentWarning(Warning):
    """
    Indicates that the rows of an alignment do not have a common
    length.
    """

    pass
