"""
The :py:mod:`vvc_structure.picture` module defines read-only records
describing the decoder structures which can be dumped: frames, pictures,
coding-tree units (CTUs) and coding units (CUs).

These records are produced by the host decoder. The dumping code only reads
them and never keeps a reference once a dump has finished.

.. autoclass:: Frame

.. autoclass:: Picture
    :members: get_ctu_data

.. autoclass:: CtuData

.. autoclass:: CodingUnit

"""

from collections import namedtuple

from vvc_structure.exceptions import CorruptStructureError


__all__ = [
    "Frame",
    "Picture",
    "CtuData",
    "CodingUnit",
]


Frame = namedtuple("Frame", "sequence_number")
"""
A decoded frame as handed out to decoder users. Frames act as opaque handles:
:py:class:`~vvc_structure.decoder.DecoderInstance` matches them by identity,
never by value.

Parameters
==========
sequence_number : int
    The frame's position in output order.
"""


class Picture(
    namedtuple(
        "Picture",
        "luma_width,luma_height,chroma_format,bit_depth,size_in_ctus,ctus",
    )
):
    """
    A decoded picture.

    Parameters
    ==========
    luma_width, luma_height : int
        Dimensions of the luma plane.
    chroma_format : :py:class:`~vvc_structure.tables.ChromaFormats`
    bit_depth : int
    size_in_ctus : int
        The number of CTUs the picture is partitioned into.
    ctus : [:py:class:`CtuData`, ...]
        The picture's CTUs in raster order.
    """

    __slots__ = ()

    def get_ctu_data(self, ctu_idx):
        """
        Return the :py:class:`CtuData` for CTU ``ctu_idx``.

        Raises :py:exc:`IndexError` if ``ctu_idx`` lies outside
        ``size_in_ctus`` and
        :py:exc:`~vvc_structure.exceptions.CorruptStructureError` if the
        picture holds fewer CTUs than ``size_in_ctus`` claims.
        """
        if not 0 <= ctu_idx < self.size_in_ctus:
            raise IndexError(ctu_idx)
        if ctu_idx >= len(self.ctus):
            raise CorruptStructureError(
                "Picture", "size_in_ctus", self.size_in_ctus, len(self.ctus)
            )
        return self.ctus[ctu_idx]


CtuData = namedtuple("CtuData", "ctu_idx,col_idx,line_idx,num_cus,num_tus,cus")
"""
A coding-tree unit.

Parameters
==========
ctu_idx : int
    Raster index of the CTU within the picture.
col_idx, line_idx : int
    Column and line of the CTU, in CTUs.
num_cus, num_tus : int
    Number of coding units and transform units in the CTU.
cus : [:py:class:`CodingUnit`, ...]
    The CTU's coding units in decoding order. Must hold at least ``num_cus``
    entries.
"""


CodingUnit = namedtuple(
    "CodingUnit", "idx,x,y,width,height,ch_type,pred_mode,intra_dir",
)
"""
A coding unit.

Parameters
==========
idx : int
x, y : int
    Position of the top-left luma sample.
width, height : int
    Size in luma samples.
ch_type : :py:class:`~vvc_structure.tables.ChannelTypes`
pred_mode : :py:class:`~vvc_structure.tables.PredModes`
intra_dir : (int, int)
    Intra prediction directions for the (luma, chroma) channels. Only
    meaningful when ``pred_mode`` is intra.
"""
