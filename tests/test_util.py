"""Tests for folder and table helpers."""

import pandas as pd
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from protein_util.base.log import LoggedFatalError
from protein_util.base.util import create_dirs_by_file_path, create_nested_folders, read_data_frame


class TestCreateDirsByFilePath:
    """Tests for parent directory creation."""

    def test_creates_missing_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "plot.png"
        created = create_dirs_by_file_path(target)
        assert created == tmp_path / "a" / "b"
        assert created.is_dir()
        assert not target.exists()

    def test_existing_directory_is_fine(self, tmp_path):
        create_dirs_by_file_path(tmp_path / "plot.png")
        assert tmp_path.is_dir()


class TestCreateNestedFolders:
    """Tests for nested folder tree creation."""

    def test_creates_tree(self, tmp_path, file_logger, log_path):
        """Every key becomes a folder, dict values become subfolders."""
        base = tmp_path / "report"
        create_nested_folders(str(base), {"plots": {"venn": None, "bar": None}, "tables": None}, file_logger)
        assert (base / "plots" / "venn").is_dir()
        assert (base / "plots" / "bar").is_dir()
        assert (base / "tables").is_dir()
        assert "Created base folder" in log_path.read_text(encoding="utf-8")

    def test_existing_folders_warn(self, tmp_path, file_logger, log_path):
        """Re-running on an existing tree logs warnings instead of failing."""
        base = tmp_path / "report"
        create_nested_folders(str(base), {"plots": None}, file_logger)
        create_nested_folders(str(base), {"plots": None}, file_logger)
        text = log_path.read_text(encoding="utf-8")
        assert "[WARNING] - Base folder already exists" in text
        assert "[WARNING] - Folder already exists" in text

    def test_invalid_base_path(self, file_logger, log_path):
        with pytest.raises(LoggedFatalError):
            create_nested_folders(None, {"plots": None}, file_logger)
        assert "[ERROR]" in log_path.read_text(encoding="utf-8")

    def test_invalid_folder_list(self, tmp_path, file_logger):
        with pytest.raises(LoggedFatalError):
            create_nested_folders(str(tmp_path), ["plots"], file_logger)


class TestReadDataFrame:
    """Tests for extension-based table reading."""

    def test_read_csv(self, tmp_path):
        path = tmp_path / "sets.csv"
        path.write_text("Set1,Set2\nA,B\n,C\n", encoding="utf-8")
        frame = read_data_frame(path)
        assert list(frame.columns) == ["Set1", "Set2"]
        assert frame.shape == (2, 2)
        assert pd.isna(frame.loc[1, "Set1"])

    def test_read_tsv(self, tmp_path):
        path = tmp_path / "sets.tsv"
        path.write_text("Set1\tSet2\nA\tB\n", encoding="utf-8")
        frame = read_data_frame(path)
        assert list(frame.columns) == ["Set1", "Set2"]

    def test_identifiers_kept_as_text(self, tmp_path):
        """Numeric-looking members keep their original text."""
        path = tmp_path / "ids.csv"
        path.write_text("Set1,Set2\n001,7\n002,\n", encoding="utf-8")
        frame = read_data_frame(path)
        assert frame["Set1"].tolist() == ["001", "002"]

    def test_explicit_delimiter(self, tmp_path):
        path = tmp_path / "sets.dat"
        path.write_text("Set1;Set2\nA;B\n", encoding="utf-8")
        frame = read_data_frame(path, delim=";")
        assert list(frame.columns) == ["Set1", "Set2"]

    def test_read_excel(self, tmp_path):
        path = tmp_path / "sets.xlsx"
        pd.DataFrame({"Set1": ["A", "B"], "Set2": ["B", None]}).to_excel(path, index=False)
        frame = read_data_frame(path)
        assert list(frame.columns) == ["Set1", "Set2"]
        assert frame["Set1"].tolist() == ["A", "B"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_data_frame(tmp_path / "missing.csv")
