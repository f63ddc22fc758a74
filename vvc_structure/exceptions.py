"""
The :py:mod:`vvc_structure.exceptions` module defines the result codes
returned by :py:meth:`~vvc_structure.decoder.DecoderInstance.print_pic_structure`
and the exceptions raised when a dump cannot be completed.

Expected caller mistakes (an uninitialised decoder, a missing or unknown frame
handle) are reported as :py:class:`Status` values. Everything else derives
from :py:exc:`StructureDumpError` and propagates to the caller.

.. autoclass:: Status
    :members:

.. autoexception:: StructureDumpError
    :members:

.. autoexception:: SinkWriteError

.. autoexception:: CorruptStructureError

.. autoexception:: ScopeOrderError

"""

from enum import IntEnum

from textwrap import dedent

__all__ = [
    "Status",
    "StructureDumpError",
    "SinkWriteError",
    "CorruptStructureError",
    "ScopeOrderError",
]


class Status(IntEnum):
    """Result codes. Values match libvvdec's error codes."""

    ok = 0
    err_initialize = -2
    err_parameter = -7


class StructureDumpError(Exception):
    """
    Base class for all exceptions raised while dumping a picture structure.
    """

    def __str__(self):
        return self.explain().partition("\n")[0]

    def explain(self):
        """
        Produce a detailed human readable explanation of the failure.

        The first line will be used as a summary when the exception is printed
        using :py:func:`str`.
        """
        raise NotImplementedError()


class SinkWriteError(StructureDumpError):
    """
    Thrown when the output sink raised an error while being written to.

    Attributes
    ==========
    error : :py:exc:`OSError`
        The error raised by the sink.
    """

    def __init__(self, error):
        self.error = error
        super(SinkWriteError, self).__init__(error)

    def explain(self):
        return dedent(
            """
            Writing to the output sink failed: {}

            The partially written output is incomplete and should be discarded.
        """
        ).strip().format(self.error)


class CorruptStructureError(StructureDumpError):
    """
    Thrown when a decoder structure holds fewer entries than its own counts
    claim, e.g. a CTU whose ``num_cus`` exceeds the number of coding units it
    actually holds.

    Attributes
    ==========
    what : str
        Name of the structure being walked (e.g. ``"CTU 3"``).
    field : str
        Name of the count which was exceeded (e.g. ``"num_cus"``).
    expected : int
        The count claimed.
    actual : int
        The number of entries actually present.
    """

    def __init__(self, what, field, expected, actual):
        self.what = what
        self.field = field
        self.expected = expected
        self.actual = actual
        super(CorruptStructureError, self).__init__(what, field, expected, actual)

    def explain(self):
        return dedent(
            """
            {} claims {} = {} but only {} entries are present.

            The decoder structure is inconsistent; no data past the last entry
            was read.
        """
        ).strip().format(self.what, self.field, self.expected, self.actual)


class ScopeOrderError(StructureDumpError):
    """
    Thrown when a :py:mod:`~vvc_structure.json_writer` scope is written to
    while one of its children is still open, or after it has been closed.

    Attributes
    ==========
    message : str
        Description of the misuse.
    """

    def __init__(self, message):
        self.message = message
        super(ScopeOrderError, self).__init__(message)

    def explain(self):
        return self.message
