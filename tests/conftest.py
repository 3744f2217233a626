"""Pytest fixtures for protein-util tests."""

import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest

# Add src directory to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import protein_util.base.log as log_module
from protein_util.base.log import Logger
from protein_util.config import LogConfig


@pytest.fixture(autouse=True)
def reset_shared_logger(monkeypatch):
    """Give every test a fresh shared-logger slot."""
    monkeypatch.setattr(log_module, "_instance", None)
    yield
    if log_module._instance is not None:
        log_module._instance.close()


@pytest.fixture
def log_path(tmp_path):
    """Path of a log file inside the test's temporary directory."""
    return tmp_path / "test.log"


@pytest.fixture
def file_logger(log_path):
    """Logger writing only to the temporary log file."""
    logger = Logger(LogConfig(log_file=str(log_path), console_output=False, file_output=True))
    yield logger
    logger.close()


@pytest.fixture
def three_set_frame():
    """The three-set example table with NA padding."""
    return pd.DataFrame({
        "Set1": ["A", "B", "C", None],
        "Set2": ["B", "C", "D", "E"],
        "Set3": ["A", "E", "F", None],
    })


@pytest.fixture
def two_set_frame():
    """Two gene sets of different lengths with blank cells."""
    return pd.DataFrame({
        "Control": ["TP53", "BRCA1", "", "EGFR", None],
        "Treated": ["BRCA1", "MYC", "KRAS", "EGFR", "PTEN"],
    })

