import pytest

from heatmap_painter.engine.font import FONT_5X7
from heatmap_painter.engine.glyphs import rasterize_text
from heatmap_painter.engine.glyphs import supported_characters
from heatmap_painter.engine.glyphs import text_width


def test_font_glyphs_are_seven_rows_of_five_bits() -> None:
    for char, glyph in FONT_5X7.items():
        assert len(glyph) == 7, char
        assert all(len(row) == 5 and set(row) <= {"0", "1"} for row in glyph), char


@pytest.mark.parametrize(
    ("text", "spacing", "expected_width"),
    [("A", 1, 5), ("AB", 1, 11), ("AB", 0, 10), ("HELLO", 2, 33), ("", 1, 0)],
)
def test_bitmap_width_matches_layout(text: str, spacing: int, expected_width: int) -> None:
    bitmap = rasterize_text(text, spacing)

    assert len(bitmap) == 7
    assert all(len(row) == expected_width for row in bitmap)
    assert text_width(text, spacing) == expected_width


def test_single_glyph_matches_font_table() -> None:
    bitmap = rasterize_text("A", 1)

    assert ["".join(str(pixel) for pixel in row) for row in bitmap] == list(
        FONT_5X7["A"]
    )


def test_lowercase_renders_like_uppercase() -> None:
    assert rasterize_text("hello", 1) == rasterize_text("HELLO", 1)


def test_unknown_characters_render_blank() -> None:
    bitmap = rasterize_text("é", 1)

    assert bitmap == [[0] * 5 for _ in range(7)]


def test_spacing_columns_stay_unset() -> None:
    bitmap = rasterize_text("HH", 2)

    assert [row[5] for row in bitmap] == [0] * 7
    assert [row[6] for row in bitmap] == [0] * 7
    assert [row[7] for row in bitmap] == [1] * 7


def test_negative_spacing_is_treated_as_zero() -> None:
    assert rasterize_text("AB", -3) == rasterize_text("AB", 0)


def test_supported_characters_cover_letters_digits_and_space() -> None:
    characters = supported_characters()

    assert " " in characters
    assert set("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789") <= set(characters)


def test_each_character_maps_to_one_glyph() -> None:
    bitmap = rasterize_text("ß", 1)

    assert text_width("ß", 1) == 5
    assert bitmap == [[0] * 5 for _ in range(7)]
