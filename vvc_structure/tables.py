"""
Constants used by the VVC decoder structures and their textual labels.

The label functions are total: codes without a label (e.g. those introduced by
later versions of the decoder) are still rendered, as ``"UNKNOWN"`` or as a
decimal number.
"""

from enum import IntEnum


__all__ = [
    "ChromaFormats",
    "ChannelTypes",
    "PredModes",
    "IntraPredModes",
    "chroma_format_to_string",
    "channel_type_to_string",
    "pred_mode_to_string",
    "intra_pred_mode_to_string",
]


class ChromaFormats(IntEnum):
    """Chroma sampling formats (``chroma_format_idc``)."""
    chroma_400 = 0
    chroma_420 = 1
    chroma_422 = 2
    chroma_444 = 3


class ChannelTypes(IntEnum):
    """Channel type of a coding unit."""
    luma = 0
    chroma = 1


class PredModes(IntEnum):
    """Prediction modes of a coding unit."""
    inter = 0
    intra = 1
    ibc = 2
    plt = 3


class IntraPredModes(IntEnum):
    """
    Named intra prediction directions. All other values in the range 2-66 are
    angular modes without a name.
    """
    planar = 0
    dc = 1
    horizontal = 18
    diagonal = 34
    vertical = 50
    vdiagonal = 66


CHROMA_FORMAT_LABELS = {
    ChromaFormats.chroma_400: "400",
    ChromaFormats.chroma_420: "420",
    ChromaFormats.chroma_422: "422",
    ChromaFormats.chroma_444: "444",
}
"""Lookup from :py:class:`ChromaFormats` to the label printed in dumps."""


def chroma_format_to_string(chroma_format):
    """
    Convert a chroma format code into a string such as ``"420"``. Unknown
    codes produce ``"UNKNOWN"``.
    """
    return CHROMA_FORMAT_LABELS.get(chroma_format, "UNKNOWN")


def channel_type_to_string(ch_type):
    """``"luma"`` for luma coding units, ``"chroma"`` for anything else."""
    return "luma" if ch_type == ChannelTypes.luma else "chroma"


def pred_mode_to_string(pred_mode):
    """``"intra"`` for intra coding units, ``"inter"`` for anything else."""
    return "intra" if pred_mode == PredModes.intra else "inter"


def intra_pred_mode_to_string(intra_pred_mode):
    """
    Convert an intra prediction direction into a string such as
    ``"PLANAR"``. Unnamed (angular) directions produce their decimal value,
    e.g. ``"23"``.
    """
    try:
        return IntraPredModes(intra_pred_mode).name.upper()
    except ValueError:
        return "{:d}".format(intra_pred_mode)
