import pytest

from vvc_structure.exceptions import CorruptStructureError

from sample_pictures import make_ctu, make_picture


class TestPicture(object):
    def test_get_ctu_data(self):
        ctus = [make_ctu(0), make_ctu(1)]
        picture = make_picture(ctus)
        assert picture.get_ctu_data(0) is ctus[0]
        assert picture.get_ctu_data(1) is ctus[1]

    @pytest.mark.parametrize("ctu_idx", [-1, 4, 100])
    def test_get_ctu_data_out_of_range(self, ctu_idx):
        picture = make_picture([make_ctu(0), make_ctu(1)], size_in_ctus=4)
        with pytest.raises(IndexError):
            picture.get_ctu_data(ctu_idx)

    @pytest.mark.parametrize("ctu_idx", [1, 3])
    def test_get_ctu_data_missing_ctu(self, ctu_idx):
        picture = make_picture([make_ctu(0)], size_in_ctus=4)
        with pytest.raises(CorruptStructureError) as exc_info:
            picture.get_ctu_data(ctu_idx)
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 1
        assert str(exc_info.value) == (
            "Picture claims size_in_ctus = 4 but only 1 entries are present."
        )

    def test_immutable(self):
        picture = make_picture([])
        with pytest.raises(AttributeError):
            picture.bit_depth = 8
