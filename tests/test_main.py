"""Tests for the command-line entry point."""

import pandas as pd
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from protein_util.main import main


@pytest.fixture
def sets_csv(tmp_path):
    path = tmp_path / "sets.csv"
    path.write_text("Set1,Set2,Set3\nA,B,A\nB,C,E\nC,D,F\n,E,\n", encoding="utf-8")
    return path


class TestMain:
    """Tests for main()."""

    def test_draws_and_writes_table(self, tmp_path, sets_csv):
        stem = tmp_path / "out" / "venn"
        log_file = tmp_path / "run.log"
        code = main([str(sets_csv), str(stem), "--log-file", str(log_file), "--format", "png", "--no-console"])
        assert code == 0
        assert (tmp_path / "out" / "venn.png").exists()
        assert not (tmp_path / "out" / "venn.pdf").exists()

        table = pd.read_csv(tmp_path / "out" / "venn.tsv", sep="\t")
        assert list(table.columns) == ["Set1", "Set2", "Set3"]
        assert len(table) == 4
        assert "Membership table saved" in log_file.read_text(encoding="utf-8")

    def test_unsupported_set_count_exits_nonzero(self, tmp_path):
        path = tmp_path / "one.csv"
        path.write_text("Only\nA\nB\n", encoding="utf-8")
        log_file = tmp_path / "run.log"
        code = main([str(path), str(tmp_path / "venn"), "--log-file", str(log_file), "--no-console"])
        assert code == 1
        assert "[ERROR] - The number of sets should be between 2 and 4" in log_file.read_text(encoding="utf-8")

    def test_demo(self, tmp_path):
        demo_path = tmp_path / "demo"
        assert main(["--demo", str(demo_path)]) == 0
        assert (demo_path / "VennDiagram.png").exists()

    def test_missing_arguments(self):
        with pytest.raises(SystemExit):
            main(["only_input.csv"])


class TestPackageLayout:
    """Everything installs under one import package."""

    def test_single_top_level_package(self):
        src = Path(__file__).parent.parent / "src"
        entries = [p.name for p in src.iterdir() if p.name != "__pycache__" and not p.name.endswith(".egg-info")]
        assert entries == ["protein_util"]

    def test_console_script_target(self):
        text = (Path(__file__).parent.parent / "pyproject.toml").read_text(encoding="utf-8")
        assert 'protein-venn = "protein_util.main:main"' in text
        assert "py-modules" not in text
