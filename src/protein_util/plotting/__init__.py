"""Plotting components: text metrics, figure saving, and Venn diagrams."""

from protein_util.plotting.plot_base import (
    contains_chinese,
    find_glyph_font,
    get_glyph_width,
    get_palette,
    get_text_length,
    save_plot,
)
from protein_util.plotting.venn import (
    VennPlotError,
    DuplicateSetNameError,
    InvalidInputKindError,
    UnsupportedSetCountError,
    build_set_list,
    compute_venn_layout,
    draw_venn_plot,
    tabulate_set_list,
    venn_colors,
    venn_diagram_demo,
)

__all__ = [
    'contains_chinese',
    'find_glyph_font',
    'get_glyph_width',
    'get_palette',
    'get_text_length',
    'save_plot',
    'VennPlotError',
    'DuplicateSetNameError',
    'InvalidInputKindError',
    'UnsupportedSetCountError',
    'build_set_list',
    'compute_venn_layout',
    'draw_venn_plot',
    'tabulate_set_list',
    'venn_colors',
    'venn_diagram_demo',
]
