"""File system utilities for react test generator."""

import logging
from pathlib import Path

from react_test_generator.exceptions import SourceReadError, WriteError

logger = logging.getLogger(__name__)


class FileUtils:
    """Utility functions for file system operations."""

    @staticmethod
    def read_file_safely(file_path: Path, encoding: str = 'utf-8') -> str:
        """
        Safely read file contents.

        Args:
            file_path: Path to file
            encoding: File encoding

        Returns:
            File contents

        Raises:
            SourceReadError: If file cannot be read
        """
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                return f.read()
        except FileNotFoundError:
            raise SourceReadError(
                f"File not found: {file_path}",
                filepath=str(file_path),
                suggestion="Check that the file exists and the path is correct."
            )
        except PermissionError:
            raise SourceReadError(
                f"Permission denied reading file: {file_path}",
                filepath=str(file_path),
                suggestion="Check file permissions or run with appropriate privileges."
            )
        except UnicodeDecodeError as e:
            raise SourceReadError(
                f"File encoding error: {e}",
                filepath=str(file_path),
                suggestion="Check if the file is a binary file."
            )
        except OSError as e:
            raise SourceReadError(
                f"Failed to read file: {e}",
                filepath=str(file_path),
                suggestion="Check the file and try again."
            )

    @staticmethod
    def ensure_directory_exists(directory: Path) -> None:
        """
        Ensure directory exists, create if necessary.

        Raises:
            WriteError: If directory cannot be created
        """
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise WriteError(
                f"Permission denied when creating directory: {directory}",
                filepath=str(directory),
                suggestion="Check directory permissions or choose a different location."
            )
        except OSError as e:
            raise WriteError(
                f"Failed to create directory: {e}",
                filepath=str(directory),
                suggestion="Check that the path is valid and not blocked by an existing file."
            )

    @staticmethod
    def get_relative_path(file_path: Path, base_path: Path) -> str:
        """Relative path for display; falls back to the absolute path."""
        try:
            return str(Path(file_path).relative_to(base_path))
        except ValueError:
            return str(file_path)
