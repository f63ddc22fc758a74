"""
The :py:mod:`vvc_structure` module renders the internal picture partitioning
state of a VVC decoder as a human readable, JSON-like text tree.

..
    You are currently reading the documentation in its source form (e.g.
    directly from the Python source docstrings or via ``help()``).


Main components
---------------

The software consists of three parts:

* A structural text writer (:py:mod:`vvc_structure.json_writer`) whose
  :py:class:`~vvc_structure.json_writer.Dict` and
  :py:class:`~vvc_structure.json_writer.Array` scopes guarantee balanced,
  correctly separated and indented output.
* A tree walker (:py:mod:`vvc_structure.walker`) which visits a decoded
  picture, its coding-tree units and their coding units and drives the writer.
* An entry point (:py:meth:`vvc_structure.decoder.DecoderInstance.print_pic_structure`)
  which looks up a picture by its frame handle and produces the complete dump.

The decoder structures being dumped are modelled by the read-only records in
:py:mod:`vvc_structure.picture`, and the enumerated values they carry by
:py:mod:`vvc_structure.tables`.


Usage
-----

::

    >>> import sys
    >>> from vvc_structure.decoder import DecoderInstance
    >>> from vvc_structure.picture import Frame, Picture

    >>> decoder = DecoderInstance()
    >>> decoder.initialize()
    >>> frame = Frame(sequence_number=7)
    >>> decoder.add_frame(frame, picture)
    >>> decoder.print_pic_structure(sys.stdout, frame)
    {
      "frames" : [
        {
          "index" : 7,
          ...


Output format
-------------

Keys and string values are always double quoted (strings are never escaped),
integers are printed in decimal and every nesting level adds two spaces of
indentation. Every value after the first in a scope is preceded by a comma and
closing delimiters always appear on their own line.

"""

from vvc_structure.version import __version__
