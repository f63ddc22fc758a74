"""
The :py:mod:`vvc_structure.decoder` module provides
:py:class:`DecoderInstance`, a stand-in for the state of a running decoder
which the picture structure dump needs: whether the decoder has been
initialised and which frames it currently holds.

Usage
-----

::

    >>> import sys
    >>> decoder = DecoderInstance()
    >>> decoder.initialize()
    >>> decoder.add_frame(frame, picture)
    >>> decoder.print_pic_structure(sys.stdout, frame)
    {
      "frames" : [
        ...
      ]
    }
    <Status.ok: 0>

.. autoclass:: DecoderInstance
    :members:

"""

import logging

from vvc_structure.exceptions import Status

from vvc_structure.json_writer import Dict

from vvc_structure.walker import DEFAULT_MAX_CTUS, print_picture

__all__ = [
    "DecoderInstance",
]


class DecoderInstance(object):
    """
    The parts of a decoder instance used when dumping picture structures.

    Attributes
    ==========
    initialized : bool
        True once :py:meth:`initialize` has been called.
    frame_list : [(:py:class:`~vvc_structure.picture.Frame`, :py:class:`~vvc_structure.picture.Picture`), ...]
        The frames currently held by the decoder and the pictures they were
        produced from.
    """

    def __init__(self):
        self.initialized = False
        self.frame_list = []
        self._error_string = ""

    def initialize(self):
        self.initialized = True

    def uninitialize(self):
        self.initialized = False
        self.frame_list = []

    def add_frame(self, frame, picture):
        """Register a frame handle and the picture it refers to."""
        self.frame_list.append((frame, picture))

    def remove_frame(self, frame):
        """
        Forget a previously registered frame. Raises :py:exc:`KeyError` if
        the frame is not registered.
        """
        for i, (entry_frame, _) in enumerate(self.frame_list):
            if entry_frame is frame:
                del self.frame_list[i]
                return
        raise KeyError(frame)

    def find_picture(self, frame):
        """
        Return the picture registered for ``frame`` (matched by identity) or
        None.
        """
        for entry_frame, picture in self.frame_list:
            if entry_frame is frame:
                return picture
        return None

    def get_last_error(self):
        """The error message recorded by the last failing operation."""
        return self._error_string

    def print_pic_structure(self, sink, frame, max_ctus=DEFAULT_MAX_CTUS):
        """
        Write the structure of the picture behind ``frame`` to ``sink``.

        Nothing is written to the sink unless the returned status is
        :py:attr:`~vvc_structure.exceptions.Status.ok`.

        Parameters
        ==========
        sink : file-like object
            Any object with a ``write(str)`` method.
        frame : :py:class:`~vvc_structure.picture.Frame`
            A frame handle previously registered with :py:meth:`add_frame`.
        max_ctus : int or :py:data:`~vvc_structure.walker.ALL_CTUS`
            See :py:func:`~vvc_structure.walker.print_picture`.

        Returns
        =======
        status : :py:class:`~vvc_structure.exceptions.Status`
            ``err_initialize`` if the decoder is not initialised,
            ``err_parameter`` if ``frame`` is None or not registered.

        Raises
        ======
        :py:exc:`~vvc_structure.exceptions.SinkWriteError`
            If writing to the sink fails.
        :py:exc:`~vvc_structure.exceptions.CorruptStructureError`
            If the picture holds fewer CTUs or coding units than it claims.
        """
        if not self.initialized:
            return Status.err_initialize

        if frame is None:
            self._error_string = "print_pic_structure: frame is null\n"
            return Status.err_parameter

        picture = self.find_picture(frame)
        if picture is None:
            self._error_string = "print_pic_structure: unknown frame\n"
            logging.debug(
                "print_pic_structure: cannot find picture in internal list."
            )
            return Status.err_parameter

        with Dict(sink) as prn:
            with prn.start_array("frames") as prn_frames:
                with prn_frames.start_dict() as prn_frame:
                    print_picture(prn_frame, frame, picture, max_ctus)

        return Status.ok
