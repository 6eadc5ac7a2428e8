from heatmap_painter.engine.font import FONT_5X7
from heatmap_painter.engine.font import GLYPH_HEIGHT
from heatmap_painter.engine.font import GLYPH_WIDTH


# Largest gap the HTTP layer accepts between glyphs.
MAX_SPACING = 5


def glyph_for(char: str) -> tuple[str, ...]:
    # Upper-cased one character at a time so every input character maps to
    # exactly one glyph; "ß" renders blank instead of expanding to "SS".
    return FONT_5X7.get(char.upper(), FONT_5X7[" "])


def text_width(text: str, spacing: int = 1) -> int:
    """Width in pixel columns of ``text`` laid out with ``spacing`` gaps."""

    spacing = max(0, spacing)
    count = len(text or "")
    if count == 0:
        return 0
    return count * (GLYPH_WIDTH + spacing) - spacing


def rasterize_text(text: str, spacing: int = 1) -> list[list[int]]:
    """Render ``text`` into a 7-row bitmap of 0/1 pixels.

    Characters missing from the font render as blanks. Empty text yields
    seven rows of width zero.
    """

    spacing = max(0, spacing)
    glyphs = [glyph_for(char) for char in (text or "")]
    width = text_width(text, spacing)
    bitmap = [[0] * width for _ in range(GLYPH_HEIGHT)]

    x = 0
    for glyph in glyphs:
        for y in range(GLYPH_HEIGHT):
            row = glyph[y]
            for i in range(GLYPH_WIDTH):
                bitmap[y][x + i] = 1 if row[i] == "1" else 0
        x += GLYPH_WIDTH + spacing

    return bitmap


def supported_characters() -> list[str]:
    return sorted(FONT_5X7)
