"""protein-util: report helpers for bioinformatics tables."""

__version__ = "0.1.0"
