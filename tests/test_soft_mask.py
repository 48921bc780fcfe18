import pytest

from pdfweave.soft_mask import MaskSubType, SoftMask
from pdfweave.util import Name, Stream


def test_new_mask_entries():
    group = Stream(content=b"0 0 m")
    mask = SoftMask(MaskSubType.LUMINOSITY, group)
    assert mask.dictionary["S"] == Name("Luminosity")
    assert mask.dictionary["G"] is group
    assert "Type" not in mask.dictionary


def test_typed_and_backdrop():
    mask = SoftMask(MaskSubType.ALPHA, Stream()).typed().with_backdrop([0.5, 0.5, 0.5])
    assert mask.dictionary["Type"] == Name("Mask")
    assert mask.dictionary["S"] == Name("Alpha")
    assert mask.dictionary["BG"] == [0.5, 0.5, 0.5]


def test_identity_transfer():
    mask = SoftMask(MaskSubType.ALPHA, Stream()).with_function_identity()
    assert mask.dictionary["TR"] == Name("Identity")


def test_transfer_set_twice_raises():
    mask = SoftMask(MaskSubType.ALPHA, Stream()).with_function({"FunctionType": 2})
    assert mask.dictionary["TR"] == {"FunctionType": 2}
    with pytest.raises(ValueError):
        mask.with_function_identity()


def test_typed_twice_raises():
    mask = SoftMask(MaskSubType.LUMINOSITY, Stream()).typed()
    with pytest.raises(ValueError):
        mask.typed()