"""File, folder, and table helpers shared by the report scripts."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pandas as pd

from protein_util.base.log import Logger, get_logger
from protein_util.constants import EXCEL_EXTENSIONS, TAB_EXTENSIONS


# ----------------------------------------------- File & Folder -----------------------------------------------

def create_dirs_by_file_path(file_path: Union[str, Path]) -> Path:
    """Create the parent directories of ``file_path`` if they do not exist.

    Args:
        file_path: Full path including the file name

    Returns:
        The parent directory
    """
    dir_path = Path(file_path).parent
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def create_nested_folders(
    base_path: str,
    folder_list: Dict[str, Any],
    logger: Optional[Logger] = None,
) -> None:
    """Create a folder tree described by a nested dict.

    Each key is a folder name; a dict value describes its subfolders, any
    other value (usually None) marks a leaf.

    Example:
        create_nested_folders("/data/report", {"plots": {"venn": None}, "tables": None})

    Args:
        base_path: Directory under which the tree is created
        folder_list: Nested dict of folder names
        logger: Optional report logger; the shared one is used if omitted

    Raises:
        LoggedFatalError: If ``base_path`` is not a string or ``folder_list``
            is not a dict
    """
    if logger is None:
        logger = get_logger("_CreateNestedFolders.log", console_output=True, file_output=True)

    if not isinstance(base_path, str) or not base_path:
        logger.error("Invalid base path. Provide a non-empty string as the base path.")
    if not isinstance(folder_list, dict):
        logger.error("Invalid folder list. Provide a nested dict as the folder structure.")

    if not os.path.isdir(base_path):
        os.makedirs(base_path, exist_ok=True)
        logger.info(f"Created base folder: {base_path}")
    else:
        logger.warning(f"Base folder already exists: {base_path}")

    def _create_folders(parent: str, folders: Dict[str, Any]) -> None:
        for folder_name, children in folders.items():
            current_path = os.path.join(parent, folder_name)
            if not os.path.isdir(current_path):
                os.makedirs(current_path, exist_ok=True)
                logger.info(f"Created folder: {current_path}")
            else:
                logger.warning(f"Folder already exists: {current_path}")

            if isinstance(children, dict):
                _create_folders(current_path, children)

    _create_folders(base_path, folder_list)


# ----------------------------------------------- DataFrame -----------------------------------------------

def read_data_frame(
    file_path: Union[str, Path],
    delim: Optional[str] = None,
    col_names: bool = True,
) -> pd.DataFrame:
    """Read a table from an Excel workbook or a delimited text file.

    ``.xlsx``/``.xls`` go through ``pandas.read_excel``. Everything else is
    read as delimited text: tab for ``.tsv``/``.txt``, comma otherwise,
    unless ``delim`` is given. Cells are kept as strings and blanks become
    missing values.

    Args:
        file_path: Path of the table
        delim: Explicit delimiter for text files
        col_names: Whether the first row holds column names

    Returns:
        The table as a DataFrame

    Raises:
        FileNotFoundError: If ``file_path`` does not exist
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    header = 0 if col_names else None
    suffix = path.suffix.lower()

    if suffix in EXCEL_EXTENSIONS:
        return pd.read_excel(path, header=header, dtype=str)

    if delim is None:
        delim = "\t" if suffix in TAB_EXTENSIONS else ","
    return pd.read_csv(path, sep=delim, header=header, dtype=str, encoding="utf-8")
