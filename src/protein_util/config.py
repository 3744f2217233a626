"""Configuration dataclasses for the protein-util report helpers."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from protein_util.constants import PLOT_FORMATS


@dataclass(frozen=True)
class LogConfig:
    """Configuration for the shared report logger."""

    log_file: str = "log.txt"
    console_output: bool = True
    file_output: bool = True


@dataclass(frozen=True)
class FontConfig:
    """Fonts used for label measurement and rendering.

    ``chinese_font`` is a fallback list: the reference glyph is measured in
    the first family that actually contains it, and Chinese set names render
    through the same list. The reference glyph is a full-width character
    whose width (one em in any CJK font) is the vertical spacing unit in the
    Venn layout.
    """

    english_font: str = "DejaVu Serif"
    chinese_font: Tuple[str, ...] = (
        "Noto Sans CJK SC",
        "Source Han Sans SC",
        "SimSun",
        "Microsoft YaHei",
        "WenQuanYi Zen Hei",
        "DejaVu Sans",
    )
    measure_size: float = 12.0
    reference_glyph: str = "一"

    def __post_init__(self) -> None:
        families = (self.chinese_font,) if isinstance(self.chinese_font, str) else tuple(self.chinese_font)
        object.__setattr__(self, "chinese_font", families)
        if not self.chinese_font:
            raise ValueError("chinese_font must name at least one font family")
        if self.measure_size <= 0:
            raise ValueError(f"Invalid measure_size: {self.measure_size}. Must be positive")
        if len(self.reference_glyph) != 1:
            raise ValueError(f"reference_glyph must be a single character, got {self.reference_glyph!r}")

    @property
    def render_families(self) -> List[str]:
        """English font first, then the Chinese fallbacks, without repeats."""
        families = [self.english_font]
        for family in self.chinese_font:
            if family not in families:
                families.append(family)
        return families


@dataclass(frozen=True)
class VennConfig:
    """Rendering options for Venn diagrams."""

    set_name_size: float = 10.0
    text_size: float = 8.0
    min_width: float = 8.0
    alpha: float = 0.4
    legend_loc: Optional[str] = "upper right"


@dataclass(frozen=True)
class PlotConfig:
    """Options for saving figures."""

    # Save format options:
    #   'png'  - raster only
    #   'pdf'  - vector only
    #   'both' - PNG and PDF side by side
    plot_format: str = 'both'
    width: float = 8.0
    height: float = 6.0
    dpi: int = 300

    def __post_init__(self) -> None:
        if self.plot_format not in PLOT_FORMATS:
            raise ValueError(f"Invalid plot_format: {self.plot_format}. Use one of {PLOT_FORMATS}")
        if self.dpi <= 0:
            raise ValueError(f"Invalid dpi: {self.dpi}. Must be positive")


@dataclass
class Config:
    """Master configuration combining all config sections."""

    log: LogConfig = field(default_factory=LogConfig)
    font: FontConfig = field(default_factory=FontConfig)
    venn: VennConfig = field(default_factory=VennConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
