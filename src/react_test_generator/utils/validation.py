"""Input validation utilities for test scaffold generation."""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Union

from react_test_generator.exceptions import InputError, ValidationError

logger = logging.getLogger(__name__)


class Validator:
    """Input validation with helpful error messages."""

    @staticmethod
    def find_workspace_root(start: Union[str, Path], markers: Iterable[str]) -> Optional[Path]:
        """
        Find the workspace containing ``start`` by looking for marker files.

        Args:
            start: File or directory to start searching from
            markers: File or directory names that mark a workspace root

        Returns:
            The nearest directory holding a marker, or None
        """
        current = Path(start).resolve()
        if not current.is_dir():
            current = current.parent

        markers = list(markers)
        for parent in [current] + list(current.parents):
            for marker in markers:
                if (parent / marker).exists():
                    logger.debug(f"Found workspace root at {parent} (marker: {marker})")
                    return parent

        logger.debug(f"No workspace markers found above {current}")
        return None

    @staticmethod
    def validate_source_file(filepath: Optional[Union[str, Path]]) -> Path:
        """
        Validate the component file a test is requested for.

        A missing file is accepted; reading it later degrades to fallbacks.

        Raises:
            InputError: If no path was given or it names a directory
        """
        if filepath is None or str(filepath).strip() == "":
            raise InputError(
                "No file selected",
                suggestion="Pass the path of a component file, e.g. src/components/Card.tsx"
            )

        file_path = Path(filepath).resolve()
        if file_path.is_dir():
            raise InputError(
                f"Path exists but is not a file: {file_path}",
                path=str(file_path),
                suggestion="Please provide a path to a component file, not a directory."
            )
        if not file_path.exists():
            logger.warning(f"Source file does not exist: {file_path}")
        return file_path

    @staticmethod
    def validate_workspace(workspace: Union[str, Path], must_be_writable: bool = True) -> Path:
        """
        Validate an explicitly given workspace directory.

        Raises:
            InputError: If the directory does not exist or is not writable
        """
        workspace_path = Path(workspace).resolve()
        if not workspace_path.is_dir():
            raise InputError(
                f"Workspace directory does not exist: {workspace_path}",
                path=str(workspace_path),
                suggestion="Pass an existing directory with --workspace."
            )
        if must_be_writable and not os.access(workspace_path, os.W_OK):
            raise InputError(
                f"Workspace directory is not writable: {workspace_path}",
                path=str(workspace_path),
                suggestion="Please check permissions and ensure you have write access."
            )
        return workspace_path

    @staticmethod
    def validate_config_file(config_file: Union[str, Path]) -> Path:
        """
        Validate that a given configuration path is a readable file, if present.

        Raises:
            ValidationError: If the path exists but is not a readable file
        """
        config_path = Path(config_file)
        if config_path.exists():
            if not config_path.is_file():
                raise ValidationError(
                    f"Configuration path is not a file: {config_path}",
                    suggestion="Point --config at a YAML file."
                )
            if not os.access(config_path, os.R_OK):
                raise ValidationError(
                    f"Configuration file is not readable: {config_path}",
                    suggestion="Check file permissions."
                )
        return config_path
