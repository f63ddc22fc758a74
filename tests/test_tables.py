import pytest

from vvc_structure.tables import (
    ChromaFormats,
    ChannelTypes,
    PredModes,
    IntraPredModes,
    chroma_format_to_string,
    channel_type_to_string,
    pred_mode_to_string,
    intra_pred_mode_to_string,
)


@pytest.mark.parametrize(
    "chroma_format,expected",
    [
        (ChromaFormats.chroma_400, "400"),
        (ChromaFormats.chroma_420, "420"),
        (ChromaFormats.chroma_422, "422"),
        (ChromaFormats.chroma_444, "444"),
        # Plain ints work too
        (1, "420"),
        # Unknown values
        (4, "UNKNOWN"),
        (-1, "UNKNOWN"),
    ],
)
def test_chroma_format_to_string(chroma_format, expected):
    assert chroma_format_to_string(chroma_format) == expected


@pytest.mark.parametrize(
    "intra_pred_mode,expected",
    [
        (IntraPredModes.planar, "PLANAR"),
        (IntraPredModes.dc, "DC"),
        (IntraPredModes.horizontal, "HORIZONTAL"),
        (IntraPredModes.diagonal, "DIAGONAL"),
        (IntraPredModes.vertical, "VERTICAL"),
        (IntraPredModes.vdiagonal, "VDIAGONAL"),
        (50, "VERTICAL"),
        # Unnamed angular modes
        (2, "2"),
        (23, "23"),
        # Out of range values are still printed
        (-1, "-1"),
        (81, "81"),
    ],
)
def test_intra_pred_mode_to_string(intra_pred_mode, expected):
    assert intra_pred_mode_to_string(intra_pred_mode) == expected


@pytest.mark.parametrize(
    "ch_type,expected",
    [(ChannelTypes.luma, "luma"), (ChannelTypes.chroma, "chroma"), (0, "luma")],
)
def test_channel_type_to_string(ch_type, expected):
    assert channel_type_to_string(ch_type) == expected


@pytest.mark.parametrize(
    "pred_mode,expected",
    [
        (PredModes.intra, "intra"),
        (PredModes.inter, "inter"),
        # Everything which isn't intra is shown as inter
        (PredModes.ibc, "inter"),
        (PredModes.plt, "inter"),
    ],
)
def test_pred_mode_to_string(pred_mode, expected):
    assert pred_mode_to_string(pred_mode) == expected
