"""Base components: the report logger and file/table helpers."""

from protein_util.base.log import Logger, LoggedFatalError, format_debug_value, get_logger
from protein_util.base.util import create_dirs_by_file_path, create_nested_folders, read_data_frame

__all__ = [
    'Logger',
    'LoggedFatalError',
    'format_debug_value',
    'get_logger',
    'create_dirs_by_file_path',
    'create_nested_folders',
    'read_data_frame',
]
