import pytest

from pdfweave.pattern import PaintType, TilingPattern, TilingType
from pdfweave.util import Matrix, Rectangle


def make(content=b"0 0 5 5 re f", x_step=10.0, paint=PaintType.COLORED,
         tiling=TilingType.CONSTANT_SPACING):
    return TilingPattern(
        Rectangle(0.0, 0.0, 10.0, 20.0),
        x_step,
        20.0,
        paint,
        tiling,
        content,
    )


def test_dictionary_entries():
    pattern = make()
    d = pattern.stream.dictionary
    assert d["Type"] == "Pattern"
    assert d["BBox"] == [0.0, 0.0, 10.0, 20.0]
    assert d["XStep"] == 10.0
    assert d["YStep"] == 20.0
    assert d["PaintType"] == 1
    assert d["TilingType"] == 1
    assert pattern.stream.content == b"0 0 5 5 re f"


def test_enum_codes_in_dictionary():
    pattern = make(paint=PaintType.UNCOLORED, tiling=TilingType.FASTER_TILING)
    d = pattern.stream.dictionary
    assert d["PaintType"] == 2
    assert d["TilingType"] == 3


def test_with_matrix():
    m = Matrix(1.0, 0.0, 0.0, 1.0, 5.0, 6.0)
    pattern = make().with_matrix(m)
    assert pattern.stream.dictionary["Matrix"] == m.as_pdf_array()


def test_matrix_twice_rejected():
    m = Matrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
    pattern = make().with_matrix(m)
    with pytest.raises(ValueError):
        pattern.with_matrix(m)


def test_cache_key_prefix():
    assert make().cache_key().startswith("tiling:10:20:1:")


def test_cache_key_depends_only_on_content_value():
    first = make(content=b"abc")
    second = make(content=bytes([97, 98, 99]))
    assert first.cache_key() == second.cache_key()


def test_cache_key_depends_on_content_and_settings():
    base = make().cache_key()
    assert make(content=b"other").cache_key() != base
    assert make(x_step=12.5).cache_key() != base
    assert make(paint=PaintType.UNCOLORED).cache_key() != base