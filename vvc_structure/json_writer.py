r"""
The :py:mod:`vvc_structure.json_writer` module provides a minimal writer for
JSON-like text which cannot produce unbalanced or badly separated output.

Output is produced through scope objects: a :py:class:`Dict` (an object,
``{ ... }``) or an :py:class:`Array` (a list, ``[ ... ]``). A scope writes its
opening delimiter when created and its closing delimiter when closed, which
normally happens when the ``with`` block holding it is left (including by an
exception)::

    >>> import sys
    >>> from vvc_structure.json_writer import Dict

    >>> with Dict(sys.stdout) as prn:
    ...     prn.print_int("index", 7)
    ...     with prn.start_dict("dimension") as dim:
    ...         dim.print_int("width", 64)
    ...         dim.print_int("height", 48)
    ...     with prn.start_array("CTUs") as ctus:
    ...         with ctus.start_dict() as ctu:
    ...             ctu.print_string("name", "first")
    {
      "index" : 7,
      "dimension" : {
        "width" : 64,
        "height" : 48
      },
      "CTUs" : [
        {
          "name" : "first"
        }
      ]
    }

Only one child of a scope may be open at a time, and a scope may not be
written to while its child is open. Violations raise
:py:exc:`~vvc_structure.exceptions.ScopeOrderError`. Closing a scope closes
any child it still has open first.

.. note::

    Strings are written verbatim between double quotes. Callers must not pass
    strings containing quotes, backslashes or control characters.

.. autodata:: INDENT_STEP

.. autoclass:: Dict
    :members:

.. autoclass:: Array
    :members:

"""

from vvc_structure.exceptions import SinkWriteError, ScopeOrderError

__all__ = [
    "INDENT_STEP",
    "Dict",
    "Array",
]


INDENT_STEP = 2
"""Number of spaces of indentation added by each level of nesting."""


class Item(object):
    """
    Common state of an open scope.

    Parameters
    ==========
    sink : file-like object
        Any object with a ``write(str)`` method. Borrowed, not closed.
    tab : int
        Indentation (in spaces) of the values inside this scope.
    """

    def __init__(self, sink, tab):
        self.sink = sink
        self.tab = tab
        self.num_values = 0
        self.closed = False
        self._child = None

    def _write(self, text):
        try:
            self.sink.write(text)
        except OSError as e:
            raise SinkWriteError(e) from e

    def _check_writable(self):
        if self.closed:
            raise ScopeOrderError(
                "Cannot write to a {} which has been closed.".format(
                    type(self).__name__
                )
            )
        if self._child is not None and not self._child.closed:
            raise ScopeOrderError(
                "Cannot write to a {} while its child {} is still open.".format(
                    type(self).__name__, type(self._child).__name__,
                )
            )

    def _print_tab(self, tab, closing=False):
        if not closing and self.num_values:
            self._write(",")
        self._write("\n" + " " * tab)
        self.num_values += 1

    def _open_child(self, cls):
        self._child = cls(self.sink, self.tab + INDENT_STEP)
        return self._child

    def _close(self, delimiter):
        if self.closed:
            return
        if self._child is not None and not self._child.closed:
            self._child.close()
        self.closed = True
        self._print_tab(self.tab - INDENT_STEP, closing=True)
        self._write(delimiter)

    def close(self):
        raise NotImplementedError()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None and issubclass(exc_type, SinkWriteError):
            # The sink is broken; don't try to write to it again
            self.closed = True
        else:
            self.close()
        return False


class Dict(Item):
    """
    A scope which writes a JSON-like object: ``{``, named values, ``}``.

    User code only constructs the top level :py:class:`Dict`, bound to an
    output sink. Nested scopes are created using :py:meth:`start_dict` and
    :py:meth:`start_array`.

    Parameters
    ==========
    sink : file-like object
        Any object with a ``write(str)`` method.
    tab : int
        Indentation of the values inside this dictionary. Defaults to
        :py:data:`INDENT_STEP` (i.e. a top-level dictionary).
    """

    def __init__(self, sink, tab=INDENT_STEP):
        super(Dict, self).__init__(sink, tab)
        self._write("{")

    def _print_name(self, name):
        self._check_writable()
        self._print_tab(self.tab)
        self._write('"{}" : '.format(name))

    def print_int(self, name, value):
        """Write ``"name" : value`` with value in decimal."""
        # Formatted before anything is written so a bad value leaves no key
        text = "{:d}".format(value)
        self._print_name(name)
        self._write(text)

    def print_string(self, name, value):
        """Write ``"name" : "value"``. The value is not escaped."""
        text = '"{}"'.format(value)
        self._print_name(name)
        self._write(text)

    def start_dict(self, name):
        """
        Start a nested dictionary stored under ``name`` and return its
        :py:class:`Dict`. No further values may be written to this dictionary
        until the returned one is closed.
        """
        self._print_name(name)
        return self._open_child(Dict)

    def start_array(self, name):
        """
        Start a nested array stored under ``name`` and return its
        :py:class:`Array`. No further values may be written to this dictionary
        until the returned one is closed.
        """
        self._print_name(name)
        return self._open_child(Array)

    def close(self):
        """
        Write the closing ``}`` (closing any open child first). Does nothing
        if already closed.
        """
        self._close("}")


class Array(Item):
    """
    A scope which writes a JSON-like list of dictionaries: ``[``, ``{...}``,
    ..., ``]``. Created by :py:meth:`Dict.start_array`.
    """

    def __init__(self, sink, tab):
        super(Array, self).__init__(sink, tab)
        self._write("[")

    def start_dict(self):
        """
        Start a new (unnamed) dictionary element and return its
        :py:class:`Dict`.
        """
        self._check_writable()
        self._print_tab(self.tab)
        return self._open_child(Dict)

    def close(self):
        """
        Write the closing ``]`` (closing any open child first). Does nothing
        if already closed.
        """
        self._close("]")
