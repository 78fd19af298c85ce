# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Records for the different annotation levels of an alignment.
"""

__name__ = "alignedit.alignment"
__author__ = "The alignedit contributors"
__all__ = [
    "FileAnnotation",
    "SequenceAnnotation",
    "ColumnAnnotation",
    "ResidueAnnotation",
]

from alignedit.copyable import Copyable


class _TaggedValue(Copyable):
    """
    Common base of all annotation records: a *tag* and a single text
    value, that describes the whole alignment or a whole sequence.
    """

    def __init__(self, tag, value):
        self.tag = tag
        self.value = value

    def __copy_create__(self):
        return type(self)(self.tag, self.value)

    def __repr__(self):
        return f"{type(self).__name__}({self.tag!r}, {self.value!r})"

    def __eq__(self, item):
        if type(item) is not type(self):
            return False
        return self.tag == item.tag and self.value == item.value


class _TaggedRow(Copyable):
    """
    Common base of all annotation records, that contain one symbol per
    alignment column.
    """

    def __init__(self, tag, data):
        self.tag = tag
        self.data = data

    def __copy_create__(self):
        return type(self)(self.tag, self.data)

    def __repr__(self):
        return f"{type(self).__name__}({self.tag!r}, {self.data!r})"

    def __eq__(self, item):
        if type(item) is not type(self):
            return False
        return self.tag == item.tag and self.data == item.data

    def __len__(self):
        return len(self.data)


class FileAnnotation(_TaggedValue):
    """
    Annotation of the alignment as a whole (``#=GF``), e.g. its
    accession or author.
    """

    pass


class SequenceAnnotation(_TaggedValue):
    """
    Annotation of a single sequence (``#=GS``), e.g. its organism.
    """

    pass


class ColumnAnnotation(_TaggedRow):
    """
    Annotation with one symbol per alignment column (``#=GC``).

    The consensus secondary structure (tag ``SS_cons``) and the
    reference annotation (tag ``RF``) are column annotations.
    """

    pass


class ResidueAnnotation(_TaggedRow):
    """
    Annotation with one symbol per residue of a single sequence
    (``#=GR``), e.g. the secondary structure or posterior probability
    of each residue.
    """

    pass
