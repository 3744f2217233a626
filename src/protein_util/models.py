"""Value objects passed between the Venn plotting steps.

These dataclasses are produced per call and not shared; the caller owns
whatever it keeps from a VennResult.
"""

from dataclasses import dataclass
from typing import Tuple

import pandas as pd
from matplotlib.figure import Figure


@dataclass(frozen=True)
class NamedSet:
    """A column of set members with its display label.

    Attributes:
        name: Column header, used as the set label and table column
        elements: Non-missing, non-empty members in original order
    """
    name: str
    elements: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.elements)

    def as_set(self) -> set:
        """Return the members as a Python set for overlap drawing."""
        return set(self.elements)


@dataclass(frozen=True)
class VennLayout:
    """Canvas size reserved for a Venn diagram, in inches."""
    width: float
    height: float


@dataclass
class VennResult:
    """Rendered Venn figure and the padded membership table.

    Attributes:
        plot: The matplotlib Figure holding the diagram
        data_frame: One column per set, padded with NaN to the largest set
    """
    plot: Figure
    data_frame: pd.DataFrame
