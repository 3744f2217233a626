"""Plotting helpers: text measurement, palette access, and figure saving.

Single Responsibility: everything a chart needs from its environment (fonts,
colors, files) without knowing what the chart draws.
"""

import re
from typing import Iterable, List, Optional, Sequence, Union

from matplotlib import font_manager
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextToPath

from protein_util.base.log import Logger, get_logger
from protein_util.base.util import create_dirs_by_file_path
from protein_util.constants import CM_PER_POINT, DEFAULT_COLORS, PLOT_FORMATS

_CHINESE_PATTERN = re.compile(r"[\u4e00-\u9fa5]")

_text_to_path = TextToPath()


def contains_chinese(text: str) -> bool:
    """Return True if ``text`` contains at least one CJK unified ideograph."""
    return bool(_CHINESE_PATTERN.search(text))


def get_text_length(
    text_vector: Iterable[str],
    font_family: Union[str, Sequence[str]] = "DejaVu Sans",
    font_size: float = 12.0,
) -> List[float]:
    """Measure the rendered width of each string.

    Widths come from the glyph advances of the matched font file, so they
    do not depend on a display or DPI. When ``font_family`` is a list, each
    glyph is taken from the first family that has it, the same fallback
    matplotlib uses when drawing text.

    Args:
        text_vector: Strings to measure
        font_family: Font family name, or fallback list of names
        font_size: Font size in points

    Returns:
        Width of each string in centimeters, in input order
    """
    family = [font_family] if isinstance(font_family, str) else list(font_family)
    prop = FontProperties(family=family, size=font_size)
    return [_text_width(str(text), prop) for text in text_vector]


def find_glyph_font(char: str, font_family: Union[str, Sequence[str]]) -> Optional[str]:
    """Path of the first installed family in ``font_family`` that has ``char``.

    Returns None when no listed family is installed with that glyph.
    """
    families = [font_family] if isinstance(font_family, str) else list(font_family)
    for family in families:
        try:
            path = font_manager.findfont(FontProperties(family=family), fallback_to_default=False)
        except ValueError:
            continue
        if font_manager.get_font(path).get_char_index(ord(char)):
            return path
    return None


def get_glyph_width(char: str, font_family: Union[str, Sequence[str]], font_size: float = 12.0) -> float:
    """Advance width of one glyph in centimeters, from a font that has it.

    Falls back to one em (``font_size`` points) when none of the families
    contains the glyph, which is the advance of a full-width character.
    """
    path = find_glyph_font(char, font_family)
    if path is None:
        return font_size * CM_PER_POINT
    font = font_manager.get_font(path)
    # 72 dpi makes one pixel one point; linearHoriAdvance is 16.16 fixed point
    font.set_size(font_size, 72)
    glyph = font.load_char(ord(char))
    return glyph.linearHoriAdvance / 65536 * CM_PER_POINT


def _text_width(text: str, prop: FontProperties) -> float:
    width_pt, _, _ = _text_to_path.get_text_width_height_descent(text, prop, ismath=False)
    return width_pt * CM_PER_POINT


def get_palette(n_colors: int) -> List[str]:
    """Return the first ``n_colors`` entries of the default palette.

    Raises:
        ValueError: If more colors are requested than the palette holds
    """
    if n_colors < 0 or n_colors > len(DEFAULT_COLORS):
        raise ValueError(f"n_colors must be between 0 and {len(DEFAULT_COLORS)}, got {n_colors}")
    return list(DEFAULT_COLORS[:n_colors])


def save_plot(
    plot: Figure,
    output_path: str,
    width: float = 8.0,
    height: float = 6.0,
    plot_format: str = "both",
    logger: Optional[Logger] = None,
    dpi: int = 300,
) -> List[str]:
    """Save a figure as PNG, PDF, or both.

    Missing parent directories are created. One INFO line is logged per file.

    Args:
        plot: Figure to save
        output_path: Path without extension
        width: Figure width in inches
        height: Figure height in inches
        plot_format: 'png', 'pdf', or 'both'
        logger: Optional report logger; the shared one is used if omitted
        dpi: Raster resolution for PNG output

    Returns:
        Paths of the written files

    Raises:
        ValueError: If ``plot_format`` is not one of PLOT_FORMATS
    """
    if logger is None:
        logger = get_logger("_SavePlot.log", console_output=True, file_output=True)

    if plot_format not in PLOT_FORMATS:
        raise ValueError(f"Invalid plot_format: {plot_format}. Use one of {PLOT_FORMATS}")

    create_dirs_by_file_path(output_path)
    plot.set_size_inches(width, height)

    saved = []
    if plot_format in ("png", "both"):
        png_path = f"{output_path}.png"
        plot.savefig(png_path, format="png", dpi=dpi)
        logger.info(f"Plot saved as PNG: {png_path}")
        saved.append(png_path)

    if plot_format in ("pdf", "both"):
        pdf_path = f"{output_path}.pdf"
        plot.savefig(pdf_path, format="pdf")
        logger.info(f"Plot saved as PDF: {pdf_path}")
        saved.append(pdf_path)

    return saved
