import pytest

from pdfweave.page_size import PageSize


def test_default_is_a4():
    assert PageSize.default() == PageSize.A4


def test_a4_matches_custom_mm():
    assert PageSize.A4.dims_points() == PageSize.custom_mm(210.0, 297.0).dims_points()


def test_letter_matches_custom_inches():
    assert PageSize.LETTER.dims_points() == PageSize.custom_inches(8.5, 11.0).dims_points()


def test_one_inch_is_72_points():
    d = PageSize.custom_inches(1.0, 2.0).dims_points()
    assert (d.width, d.height) == (72.0, 144.0)


def test_custom_points_identity():
    d = PageSize.custom_points(300.0, 400.0).dims_points()
    assert (d.width, d.height) == (300.0, 400.0)


def test_custom_negative_clamped():
    d = PageSize.custom_points(-5.0, 10.0).dims_points()
    assert d.width == 0.0
    assert d.height == 10.0


def test_a_series_halving_relation():
    assert PageSize.A3.dims_points().width == PageSize.A4.dims_points().height
    assert PageSize.A4.dims_points().width == PageSize.A5.dims_points().height


@pytest.mark.parametrize(
    "size",
    [PageSize.A0, PageSize.A1, PageSize.A2, PageSize.A3, PageSize.A4, PageSize.A5,
     PageSize.LETTER, PageSize.LEGAL],
)
def test_named_sizes_are_portrait(size):
    d = size.dims_points()
    assert 0 < d.width < d.height


def test_legal_taller_than_letter():
    assert PageSize.LEGAL.dims_points().height > PageSize.LETTER.dims_points().height
    assert PageSize.LEGAL.dims_points().width == PageSize.LETTER.dims_points().width


def test_rect_array():
    dims = PageSize.A4.dims_points()
    assert PageSize.A4.rect_to_pdf_array() == [0.0, 0.0, dims.width, dims.height]