# This source code is part of the alignedit package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "alignedit"
__author__ = "The alignedit contributors"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for all objects of the alignment model, that must be
    copied by value.

    The undo history stores value copies of an :class:`Alignment`,
    hence every object reachable from an alignment must be copyable
    without sharing mutable state with the original.

    The public method `copy()` first creates a fresh instance of the
    class via `__copy_create__()`.
    All attributes, that are not set by the constructor, are then
    copied via `__copy_fill__()`, starting with the method in the
    uppermost base class and ending with the class of the instance to
    be copied.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            A copy of this object, that does not share mutable state
            with it.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Only the constructor should be called in this method.
        All further attributes, that need to be copied, are handled
        in `__copy_fill__()`.

        This method must be overridden, if the constructor takes
        mandatory parameters.

        Returns
        -------
        copy
            A freshly instantiated copy of *self*.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Copy all remaining attributes to the new object.

        Always call the `super()` method as first statement.

        Parameters
        ----------
        clone
            The freshly instantiated copy of *self*.
        """
        pass
