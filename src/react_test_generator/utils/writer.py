"""Test file writing utilities."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from react_test_generator.exceptions import WriteError
from react_test_generator.utils.file_utils import FileUtils

logger = logging.getLogger(__name__)


class TestFileWriter:
    """Write generated test files into the workspace."""
    __test__ = False  # not a pytest test class

    def __init__(self, root_dir: Optional[Union[str, Path]] = None):
        self.root_dir = Path(root_dir).resolve() if root_dir else None

    def exists(self, test_path: Union[str, Path]) -> bool:
        return Path(test_path).exists()

    def write_test_file(self, test_path: Union[str, Path], test_content: str) -> Path:
        """Write test content, creating parent directories and replacing any existing file."""
        full_test_path = Path(test_path)

        FileUtils.ensure_directory_exists(full_test_path.parent)
        logger.debug(f"Ensured directory: {full_test_path.parent}")

        # Write to a temp file in the same directory, then swap it in
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile('w', delete=False, dir=str(full_test_path.parent), prefix='.tmp_',
                                             suffix=full_test_path.suffix, encoding='utf-8') as tmp:
                tmp_path = tmp.name
                tmp.write(test_content)
            os.replace(tmp_path, full_test_path)
        except (OSError, UnicodeError) as e:
            logger.error(f"Failed to write test file {full_test_path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise WriteError(
                f"Failed to write test file: {e}",
                filepath=str(full_test_path),
                suggestion="Check directory permissions and available disk space."
            )

        logger.info(f"Written test file: {self._display(full_test_path)} ({len(test_content):,} characters)")
        return full_test_path

    def _display(self, path: Path) -> str:
        if self.root_dir:
            return FileUtils.get_relative_path(path, self.root_dir)
        return str(path)
