"""
The :py:mod:`vvc_structure.walker` module walks a
:py:class:`~vvc_structure.picture.Picture` and writes its structure into a
:py:class:`~vvc_structure.json_writer.Dict`.

Each function fills in an already open dictionary and opens the nested scopes
it needs itself.

.. autofunction:: print_picture

.. autofunction:: print_picture_properties

.. autofunction:: print_ctu

.. autofunction:: print_cu

.. autodata:: DEFAULT_MAX_CTUS

.. autodata:: ALL_CTUS

"""

from sentinels import Sentinel

from vvc_structure.exceptions import CorruptStructureError

from vvc_structure.tables import (
    ChannelTypes,
    PredModes,
    chroma_format_to_string,
    channel_type_to_string,
    pred_mode_to_string,
    intra_pred_mode_to_string,
)

__all__ = [
    "DEFAULT_MAX_CTUS",
    "ALL_CTUS",
    "print_picture",
    "print_picture_properties",
    "print_ctu",
    "print_cu",
]


DEFAULT_MAX_CTUS = 2
"""
Number of CTUs dumped per picture by default. Only the first CTUs are
written, regardless of ``sizeInCTUs``; pass :py:data:`ALL_CTUS` to dump all
of them.
"""

ALL_CTUS = Sentinel("ALL_CTUS")
"""
A value for the ``max_ctus`` argument of :py:func:`print_picture` which
causes every CTU in the picture to be dumped.
"""


def print_picture_properties(prn, frame, picture):
    """Write the picture's dimensions, chroma format and bit depth."""
    with prn.start_dict("dimension") as prn_dim:
        prn_dim.print_int("width", picture.luma_width)
        prn_dim.print_int("height", picture.luma_height)
    prn.print_string("chromaFormat", chroma_format_to_string(picture.chroma_format))
    prn.print_int("bitDepth", picture.bit_depth)


def print_cu(prn, cu):
    """
    Write a coding unit's index, position, size and prediction information.
    ``intraMode`` is only written for intra coding units.
    """
    prn.print_int("cuIdx", cu.idx)
    with prn.start_dict("position") as prn_pos:
        prn_pos.print_int("x", cu.x)
        prn_pos.print_int("y", cu.y)
    with prn.start_dict("size") as prn_size:
        prn_size.print_int("width", cu.width)
        prn_size.print_int("height", cu.height)
    prn.print_string("channelType", channel_type_to_string(cu.ch_type))
    prn.print_string("predMode", pred_mode_to_string(cu.pred_mode))
    if cu.pred_mode == PredModes.intra:
        if cu.ch_type == ChannelTypes.luma:
            intra_dir = cu.intra_dir[0]
        else:
            intra_dir = cu.intra_dir[1]
        prn.print_string("intraMode", intra_pred_mode_to_string(intra_dir))


def print_ctu(prn, ctu):
    """
    Write a CTU's indices and counts followed by its first ``num_cus`` coding
    units.

    Raises
    ======
    :py:exc:`~vvc_structure.exceptions.CorruptStructureError`
        If the CTU holds fewer than ``num_cus`` coding units. This is checked
        before any coding unit is written.
    """
    prn.print_int("ctuIdx", ctu.ctu_idx)
    prn.print_int("colIdx", ctu.col_idx)
    prn.print_int("lineIdx", ctu.line_idx)
    prn.print_int("numCUs", ctu.num_cus)
    prn.print_int("numTUs", ctu.num_tus)

    if len(ctu.cus) < ctu.num_cus:
        raise CorruptStructureError(
            "CTU {}".format(ctu.ctu_idx), "num_cus", ctu.num_cus, len(ctu.cus)
        )

    with prn.start_array("CUs") as prn_cus:
        for cu in ctu.cus[: ctu.num_cus]:
            with prn_cus.start_dict() as prn_cu:
                print_cu(prn_cu, cu)


def print_picture(prn, frame, picture, max_ctus=DEFAULT_MAX_CTUS):
    """
    Write a complete picture: its frame index, properties, CTU count and
    CTUs.

    Parameters
    ==========
    prn : :py:class:`~vvc_structure.json_writer.Dict`
        The (open) dictionary to fill in.
    frame : :py:class:`~vvc_structure.picture.Frame`
    picture : :py:class:`~vvc_structure.picture.Picture`
    max_ctus : int or :py:data:`ALL_CTUS`
        The maximum number of CTUs to write. Never more than
        ``picture.size_in_ctus`` CTUs are written.
    """
    prn.print_int("index", frame.sequence_number)
    with prn.start_dict("properties") as prn_props:
        print_picture_properties(prn_props, frame, picture)
    size_in_ctus = picture.size_in_ctus
    prn.print_int("sizeInCTUs", size_in_ctus)

    if max_ctus is ALL_CTUS:
        num_ctus = size_in_ctus
    else:
        num_ctus = min(max_ctus, size_in_ctus)

    with prn.start_array("CTUs") as prn_ctus:
        for ctu_idx in range(num_ctus):
            ctu = picture.get_ctu_data(ctu_idx)
            with prn_ctus.start_dict() as prn_ctu:
                print_ctu(prn_ctu, ctu)
