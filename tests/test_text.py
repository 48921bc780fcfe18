import pytest

from pdfweave.text import StandardFont, WrapMode, wrap_text


def test_font_pdf_name():
    assert StandardFont.HELVETICA.pdf_name() == "Helvetica"
    assert StandardFont.TIMES_BOLD.pdf_name() == "Times-Bold"
    assert StandardFont.COURIER.pdf_name() == "Courier"


def test_font_from_family():
    assert StandardFont.from_family("Helvetica", 400, False) is StandardFont.HELVETICA
    assert StandardFont.from_family("Helvetica", 700, False) is StandardFont.HELVETICA_BOLD
    assert StandardFont.from_family("Times", 400, True) is StandardFont.TIMES_ITALIC
    assert StandardFont.from_family("Courier", 700, True) is StandardFont.COURIER_BOLD_OBLIQUE


def test_from_family_none_defaults_to_helvetica():
    assert StandardFont.from_family(None, 400, False) is StandardFont.HELVETICA


def test_from_family_monospace_and_console():
    assert StandardFont.from_family("monospace", 400, False) is StandardFont.COURIER
    assert StandardFont.from_family("Lucida Console", 400, True) is StandardFont.COURIER_OBLIQUE


def test_from_family_serif_match_includes_sans_serif():
    assert StandardFont.from_family("sans-serif", 400, False) is StandardFont.TIMES_ROMAN


def test_from_family_case_insensitive():
    assert StandardFont.from_family("TIMES NEW ROMAN", 700, False) is StandardFont.TIMES_BOLD


def test_measure_text():
    width = StandardFont.HELVETICA.measure_text("Hello", 12.0)
    assert width > 0.0
    assert width < 100.0


def test_measure_text_scales_with_size():
    small = StandardFont.HELVETICA.measure_text("Hello", 10.0)
    large = StandardFont.HELVETICA.measure_text("Hello", 20.0)
    assert large == pytest.approx(2 * small)


def test_courier_wider_than_helvetica():
    assert StandardFont.COURIER.measure_text("abc", 12.0) > StandardFont.HELVETICA.measure_text(
        "abc", 12.0
    )


def test_measure_counts_utf8_bytes():
    assert StandardFont.HELVETICA.measure_text("é", 12.0) == StandardFont.HELVETICA.measure_text(
        "ab", 12.0
    )


def test_wrap_no_wrap():
    lines = wrap_text("This is a test", 100.0, StandardFont.HELVETICA, 12.0, WrapMode.NO_WRAP)
    assert len(lines) == 1
    assert lines[0] == "This is a test"


def test_wrap_word_wrap():
    text = "This is a long line of text"
    lines = wrap_text(text, 50.0, StandardFont.HELVETICA, 12.0, WrapMode.WORD_WRAP)
    assert len(lines) > 1
    assert " ".join(lines).split() == text.split()


def test_word_wrap_lines_fit_unless_single_word():
    lines = wrap_text(
        "alpha beta gamma delta epsilon", 60.0, StandardFont.HELVETICA, 12.0, WrapMode.WORD_WRAP
    )
    for line in lines:
        fits = StandardFont.HELVETICA.measure_text(line, 12.0) <= 60.0
        assert fits or " " not in line


def test_char_wrap_preserves_characters():
    text = "abcdefghij"
    lines = wrap_text(text, 20.0, StandardFont.COURIER, 10.0, WrapMode.CHAR_WRAP)
    assert "".join(lines) == text
    assert all(StandardFont.COURIER.measure_text(line, 10.0) <= 20.0 for line in lines)


def test_wrap_empty_text_gives_one_empty_line():
    assert wrap_text("", 100.0, StandardFont.HELVETICA, 12.0, WrapMode.WORD_WRAP) == [""]
    assert wrap_text("   ", 100.0, StandardFont.HELVETICA, 12.0, WrapMode.CHAR_WRAP) == ["   "]


def test_word_wrap_wide_enough_keeps_one_line():
    lines = wrap_text("a b c", 1000.0, StandardFont.HELVETICA, 12.0, WrapMode.WORD_WRAP)
    assert lines == ["a b c"]