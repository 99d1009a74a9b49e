import pytest

from react_test_generator.exceptions import SourceReadError, WriteError
from react_test_generator.utils.file_utils import FileUtils


class TestReadFileSafely:
    """Test FileUtils.read_file_safely method."""

    def test_reads_text(self, tmp_path):
        source = tmp_path / "Card.tsx"
        source.write_text("export default Card\n", encoding="utf-8")

        assert FileUtils.read_file_safely(source) == "export default Card\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError) as exc_info:
            FileUtils.read_file_safely(tmp_path / "Ghost.tsx")

        assert exc_info.value.message.startswith("File not found")
        assert exc_info.value.filepath == str(tmp_path / "Ghost.tsx")

    def test_binary_file(self, tmp_path):
        """Test undecodable bytes are reported as a read error."""
        blob = tmp_path / "logo.tsx"
        blob.write_bytes(b"\xff\xfe\x00\x81")

        with pytest.raises(SourceReadError) as exc_info:
            FileUtils.read_file_safely(blob)

        assert "encoding" in exc_info.value.message

    def test_directory(self, tmp_path):
        with pytest.raises(SourceReadError):
            FileUtils.read_file_safely(tmp_path)


class TestEnsureDirectoryExists:
    """Test FileUtils.ensure_directory_exists method."""

    def test_creates_nested(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"

        FileUtils.ensure_directory_exists(target)

        assert target.is_dir()

    def test_blocked_by_file(self, tmp_path):
        (tmp_path / "a").write_text("")

        with pytest.raises(WriteError):
            FileUtils.ensure_directory_exists(tmp_path / "a" / "b")


class TestGetRelativePath:
    """Test FileUtils.get_relative_path method."""

    def test_inside_base(self, tmp_path):
        assert FileUtils.get_relative_path(tmp_path / "tests" / "x.ts", tmp_path) == "tests/x.ts"

    def test_outside_base(self, tmp_path):
        other = tmp_path.parent / "elsewhere.ts"

        assert FileUtils.get_relative_path(other, tmp_path / "inner") == str(other)
