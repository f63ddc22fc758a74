"""
Small hand-made pictures shared by the tests.
"""

from textwrap import dedent

from vvc_structure.picture import Frame, Picture, CtuData, CodingUnit

from vvc_structure.tables import (
    ChromaFormats,
    ChannelTypes,
    PredModes,
    IntraPredModes,
)


def make_cu(
    idx=0,
    x=0,
    y=0,
    width=16,
    height=16,
    ch_type=ChannelTypes.luma,
    pred_mode=PredModes.intra,
    intra_dir=(IntraPredModes.planar, IntraPredModes.dc),
):
    return CodingUnit(idx, x, y, width, height, ch_type, pred_mode, intra_dir)


def make_ctu(ctu_idx=0, col_idx=0, line_idx=0, cus=(), num_cus=None, num_tus=0):
    if num_cus is None:
        num_cus = len(cus)
    return CtuData(ctu_idx, col_idx, line_idx, num_cus, num_tus, list(cus))


def make_picture(ctus, size_in_ctus=None, chroma_format=ChromaFormats.chroma_420):
    if size_in_ctus is None:
        size_in_ctus = len(ctus)
    return Picture(
        luma_width=64,
        luma_height=48,
        chroma_format=chroma_format,
        bit_depth=10,
        size_in_ctus=size_in_ctus,
        ctus=list(ctus),
    )


def make_example_frame_and_picture():
    """
    Frame 7: a 64x48 4:2:0 10-bit picture with two CTUs, the first holding a
    single 16x16 planar intra luma CU, the second holding none.
    """
    frame = Frame(sequence_number=7)
    picture = make_picture(
        [
            make_ctu(0, 0, 0, [make_cu()], num_tus=1),
            make_ctu(1, 1, 0, []),
        ]
    )
    return frame, picture


EXAMPLE_DUMP = dedent(
    """
    {
      "frames" : [
        {
          "index" : 7,
          "properties" : {
            "dimension" : {
              "width" : 64,
              "height" : 48
            },
            "chromaFormat" : "420",
            "bitDepth" : 10
          },
          "sizeInCTUs" : 2,
          "CTUs" : [
            {
              "ctuIdx" : 0,
              "colIdx" : 0,
              "lineIdx" : 0,
              "numCUs" : 1,
              "numTUs" : 1,
              "CUs" : [
                {
                  "cuIdx" : 0,
                  "position" : {
                    "x" : 0,
                    "y" : 0
                  },
                  "size" : {
                    "width" : 16,
                    "height" : 16
                  },
                  "channelType" : "luma",
                  "predMode" : "intra",
                  "intraMode" : "PLANAR"
                }
              ]
            },
            {
              "ctuIdx" : 1,
              "colIdx" : 1,
              "lineIdx" : 0,
              "numCUs" : 0,
              "numTUs" : 0,
              "CUs" : [
              ]
            }
          ]
        }
      ]
    }
"""
).strip()
"""The dump expected for :py:func:`make_example_frame_and_picture`."""
