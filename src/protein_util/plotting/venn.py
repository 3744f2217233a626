"""Venn diagram drawing for 2 to 4 sets.

Turns a table whose columns are sets into a saved Venn figure plus a padded
membership table. The canvas is sized from the set-name widths so long labels
are not clipped:

    sets  width          height
    2     2*T + 4        H + 7
    3     2*T + 4        2*H + 7
    4     2*T + 7        2*H + 7

where T is the widest set name and H is the width of one full-width reference
glyph. The width never drops below the configured minimum.
"""

import os
from typing import List, Optional

import matplotlib
import numpy as np
import pandas as pd
from matplotlib.figure import Figure
from venn import venn

from protein_util.base.log import LoggedFatalError, Logger, get_logger
from protein_util.config import Config
from protein_util.constants import MAX_VENN_SETS, MIN_VENN_SETS
from protein_util.models import NamedSet, VennLayout, VennResult
from protein_util.plotting.plot_base import find_glyph_font, get_glyph_width, get_palette, get_text_length, save_plot


class VennPlotError(Exception):
    """Base exception for Venn diagram errors."""

    pass


class InvalidInputKindError(VennPlotError, LoggedFatalError):
    """Raised (after logging) when the input is not a table."""

    pass


class UnsupportedSetCountError(VennPlotError, ValueError):
    """Raised when the number of non-empty sets is outside 2..4."""

    pass


class DuplicateSetNameError(VennPlotError, ValueError):
    """Raised when two non-empty columns share a set name."""

    pass


def _member_text(value) -> Optional[str]:
    """Cell value as member text, or None for a missing or blank cell."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if pd.api.types.is_scalar(value) and bool(pd.isna(value)):
        return None
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        # Integer columns padded with NaN arrive as floats
        return str(int(value))
    return str(value).strip() or None


def build_set_list(input_data_frame: pd.DataFrame, logger: Optional[Logger] = None) -> List[NamedSet]:
    """Collect one NamedSet per column, skipping missing and empty cells.

    Members are the cell text with surrounding whitespace removed; whole
    numbers read as floats are written without the trailing ".0". Columns
    that end up with no members are dropped (with a warning when a logger
    is given). Member order follows the rows.

    Args:
        input_data_frame: Table whose columns are sets
        logger: Optional report logger for dropped-column warnings

    Returns:
        NamedSets in column order

    Raises:
        DuplicateSetNameError: If two kept columns have the same name
        UnsupportedSetCountError: If fewer than 2 or more than 4 sets remain
    """
    set_list = []
    for col_index in range(input_data_frame.shape[1]):
        name = str(input_data_frame.columns[col_index])
        column = input_data_frame.iloc[:, col_index]
        texts = (_member_text(value) for value in column.tolist())
        elements = tuple(text for text in texts if text is not None)
        if not elements:
            if logger is not None:
                logger.warning(f"Set '{name}' has no elements and is skipped")
            continue
        if any(named_set.name == name for named_set in set_list):
            raise DuplicateSetNameError(f"Set name '{name}' appears in more than one column")
        set_list.append(NamedSet(name=name, elements=elements))

    if not MIN_VENN_SETS <= len(set_list) <= MAX_VENN_SETS:
        raise UnsupportedSetCountError(
            f"The number of sets should be between {MIN_VENN_SETS} and {MAX_VENN_SETS}, "
            f"got {len(set_list)}"
        )
    return set_list


def compute_venn_layout(
    set_count: int,
    text_max_length: float,
    glyph_height: float,
    min_width: float = 8.0,
) -> VennLayout:
    """Size the canvas for ``set_count`` sets.

    Args:
        set_count: Number of sets (2, 3, or 4)
        text_max_length: Width of the widest set name
        glyph_height: Width of the reference glyph (vertical spacing unit)
        min_width: Smallest allowed canvas width

    Returns:
        VennLayout with the final width and height

    Raises:
        UnsupportedSetCountError: For any other set count
    """
    if set_count == 2:
        width = text_max_length * 2 + 4
        height = glyph_height + 7
    elif set_count == 3:
        width = text_max_length * 2 + 4
        height = glyph_height * 2 + 7
    elif set_count == 4:
        width = text_max_length * 2 + 7
        height = glyph_height * 2 + 7
    else:
        raise UnsupportedSetCountError(
            f"The number of sets should be between {MIN_VENN_SETS} and {MAX_VENN_SETS}, got {set_count}"
        )
    return VennLayout(width=max(width, min_width), height=height)


def venn_colors(set_count: int) -> List[str]:
    """Fill colors for ``set_count`` sets, taken in palette order."""
    return get_palette(set_count)


def tabulate_set_list(set_list: List[NamedSet]) -> pd.DataFrame:
    """Lay the sets out side by side, padding shorter columns with NaN."""
    columns = [pd.Series(list(named_set.elements), name=named_set.name, dtype=object) for named_set in set_list]
    return pd.concat(columns, axis=1)


def render_venn(set_list: List[NamedSet], layout: VennLayout, config: Config) -> Figure:
    """Draw the diagram on a new Figure of the layout's size."""
    data = {named_set.name: named_set.as_set() for named_set in set_list}

    with matplotlib.rc_context({"font.family": config.font.render_families}):
        figure = Figure(figsize=(layout.width, layout.height))
        ax = figure.add_subplot(111)
        venn(
            data,
            fmt="{size}",
            cmap=venn_colors(len(set_list)),
            alpha=config.venn.alpha,
            fontsize=config.venn.text_size,
            legend_loc=config.venn.legend_loc,
            ax=ax,
        )
        legend = ax.get_legend()
        if legend is not None:
            for text in legend.get_texts():
                text.set_fontsize(config.venn.set_name_size)
    return figure


def draw_venn_plot(
    input_data_frame: pd.DataFrame,
    output_file_name: str,
    logger: Optional[Logger] = None,
    plot_format: Optional[str] = None,
    config: Optional[Config] = None,
) -> VennResult:
    """Draw a Venn diagram from a table of sets and save it.

    Args:
        input_data_frame: Table where each column is a set and cells are members
        output_file_name: Output path without extension
        logger: Optional report logger; the shared one is used if omitted
        plot_format: 'png', 'pdf', or 'both'; defaults to the plot config
        config: Optional master config; defaults are used if omitted

    Returns:
        VennResult with the Figure and the padded membership table

    Raises:
        InvalidInputKindError: If the input is not a DataFrame (logged first)
        DuplicateSetNameError: If two columns have the same set name
        UnsupportedSetCountError: If fewer than 2 or more than 4 sets are present
    """
    if logger is None:
        logger = get_logger("_DrawVennPlot.log", console_output=True, file_output=True)
    config = config or Config()

    if not isinstance(input_data_frame, pd.DataFrame):
        logger.error(
            f"Invalid plot input type: expected a DataFrame, got {type(input_data_frame).__name__}",
            error_cls=InvalidInputKindError,
        )

    set_list = build_set_list(input_data_frame, logger)
    names = [named_set.name for named_set in set_list]
    logger.info(f"Drawing Venn diagram for {len(set_list)} sets: {', '.join(names)}")

    fonts = config.font
    text_max_length = max(get_text_length(names, font_family=fonts.render_families, font_size=fonts.measure_size))
    if find_glyph_font(fonts.reference_glyph, fonts.chinese_font) is None:
        logger.warning(
            f"No font among {', '.join(fonts.chinese_font)} has '{fonts.reference_glyph}'; "
            f"using one em for the glyph width"
        )
    glyph_height = get_glyph_width(fonts.reference_glyph, fonts.chinese_font, font_size=fonts.measure_size)
    layout = compute_venn_layout(len(set_list), text_max_length, glyph_height, min_width=config.venn.min_width)

    figure = render_venn(set_list, layout, config)
    save_plot(
        figure,
        output_file_name,
        width=layout.width,
        height=layout.height,
        plot_format=plot_format or config.plot.plot_format,
        logger=logger,
        dpi=config.plot.dpi,
    )

    return VennResult(plot=figure, data_frame=tabulate_set_list(set_list))


def venn_diagram_demo(demo_path: str = "VennDemo") -> VennResult:
    """Draw the three-set example into ``demo_path`` and log the table."""
    input_data_frame = pd.DataFrame({
        "Set1": ["A", "B", "C", None],
        "Set2": ["B", "C", "D", "E"],
        "Set3": ["A", "E", "F", None],
    })

    os.makedirs(demo_path, exist_ok=True)
    logger = get_logger(os.path.join(demo_path, "_DrawVennPlotDemo.log"), console_output=True, file_output=True)

    result = draw_venn_plot(input_data_frame, os.path.join(demo_path, "VennDiagram"), logger)
    logger.debug("Venn membership table:", result.data_frame.to_string())
    return result
