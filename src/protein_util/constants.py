"""Shared constants for the protein-util report helpers.

This module consolidates the color palette, plot formats, and log line
formats used across base/log.py, plotting/plot_base.py, and plotting/venn.py.
"""

from typing import Tuple

# =============================================================================
# Color Palette
# =============================================================================

# Fixed categorical palette. Reports depend on index i always mapping to the
# same color, so entries are only ever appended, never reordered.
DEFAULT_COLORS: Tuple[str, ...] = (
    "#D51F26", "#272E6A", "#208A42", "#89288F", "#F47D2B", "#FEE500", "#8A9FD1",
    "#C06CAB", "#E6C2DC", "#90D5E4", "#89C75F", "#F37B7D", "#9983BD", "#D24B27",
    "#3BBCA8", "#6E4B9E", "#0C727C", "#7E1416", "#D8A767", "#7DD06F", "#844081",
    "#688EC1", "#C17E73", "#484125", "#6CD3A7", "#597873", "#7B6FD0", "#CF4A31",
    "#D0CD47", "#722A2D", "#CBC594", "#D19EC4", "#5A7E36", "#D4477D", "#403552",
    "#76D73C", "#96CED5", "#CE54D1", "#C48736", "#FFB300", "#803E75", "#FF6800",
    "#A6BDD7", "#C10020", "#CEA262", "#817066", "#007D34", "#F6768E", "#00538A",
    "#FF7A5C", "#53377A", "#FF8E00", "#B32851", "#F4C800", "#7F180D", "#93AA00",
    "#593315", "#F13A13", "#232C16", "#faa818", "#41a30d", "#fbdf72", "#367d7d",
    "#d33502", "#6ebcbc", "#37526d", "#916848", "#f5b390", "#342739", "#bed678",
    "#a6d9ee", "#0d74b6", "#60824f", "#725ca5", "#e0598b", "#371377", "#7700FF",
    "#9E0142", "#FF0080", "#DC494C", "#F88D51", "#FAD510", "#FFFF5F", "#88CFA4",
    "#238B45", "#02401B", "#0AD7D3", "#046C9A", "#A2A475", "#595959", "#D52126",
    "#88CCEE", "#FEE52C", "#117733", "#CC61B0", "#99C945", "#2F8AC4", "#332288",
    "#E68316", "#661101", "#F97B72", "#DDCC77", "#11A579", "#E73F74", "#A6CDE2",
    "#1E78B4", "#74C476", "#34A047", "#F59899", "#E11E26", "#FCBF6E", "#F47E1F",
    "#CAB2D6", "#6A3E98", "#FAF39B", "#B15928", "#1a1334", "#01545a", "#017351",
    "#03c383", "#aad962", "#fbbf45", "#ef6a32", "#ed0345", "#a12a5e", "#710162",
    "#3B9AB2", "#2a7185", "#a64027", "#9cdff0", "#022336", "#78B7C5", "#EBCC2A",
    "#E1AF00", "#F21A00", "#FF0000", "#00A08A", "#F2AD00", "#F98400", "#5BBCD6",
)

# =============================================================================
# Plot Output
# =============================================================================

# Accepted values for the save format; 'both' writes PNG and PDF
PLOT_FORMATS: Tuple[str, ...] = ('png', 'pdf', 'both')

# Venn layouts are only defined for this range of sets
MIN_VENN_SETS: int = 2
MAX_VENN_SETS: int = 4

# Centimeters per typographic point (1 pt = 1/72 in, 1 in = 2.54 cm)
CM_PER_POINT: float = 2.54 / 72.0

# =============================================================================
# Log Line Format
# =============================================================================

LOG_FORMAT: str = '[%(asctime)s] [%(tag)s] - %(message)s'
LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

# Extensions read as spreadsheets rather than delimited text
EXCEL_EXTENSIONS: Tuple[str, ...] = ('.xlsx', '.xls')
TAB_EXTENSIONS: Tuple[str, ...] = ('.tsv', '.txt')
