"""Tests for destination path helpers."""

from file_organizer.organization.paths import (
    resolve_unique_destination,
    split_extension,
)


class TestSplitExtension:
    """Test splitting names at the last dot."""

    def test_split(self):
        """Test a plain name splits before its extension."""
        assert split_extension("file.txt") == ("file", ".txt")

    def test_split_multiple_dots(self):
        """Test only the last dot separates the extension."""
        assert split_extension("archive.tar.gz") == ("archive.tar", ".gz")

    def test_split_no_dot(self):
        """Test a name without a dot is all base."""
        assert split_extension("README") == ("README", "")


class TestResolveUniqueDestination:
    """Test collision-safe destination resolution."""

    def test_no_conflict(self, tmp_path):
        """Test a free destination is returned unchanged."""
        dest = resolve_unique_destination(tmp_path, "file.txt")
        assert dest == tmp_path / "file.txt"

    def test_missing_category_dir(self, tmp_path):
        """Test a category folder that does not exist yet."""
        category_dir = tmp_path / "Images"
        dest = resolve_unique_destination(category_dir, "a.jpg")
        assert dest == category_dir / "a.jpg"

    def test_first_conflict(self, tmp_path):
        """Test an existing file gets the (1) suffix."""
        (tmp_path / "file.txt").write_text("existing")

        dest = resolve_unique_destination(tmp_path, "file.txt")

        assert dest == tmp_path / "file (1).txt"
        assert not dest.exists()

    def test_second_conflict(self, tmp_path):
        """Test the counter skips suffixes already in use."""
        (tmp_path / "file.txt").write_text("existing")
        (tmp_path / "file (1).txt").write_text("existing")

        dest = resolve_unique_destination(tmp_path, "file.txt")

        assert dest == tmp_path / "file (2).txt"

    def test_conflict_without_extension(self, tmp_path):
        """Test the suffix is appended to names without an extension."""
        (tmp_path / "README").write_text("existing")

        dest = resolve_unique_destination(tmp_path, "README")

        assert dest == tmp_path / "README (1)"

    def test_conflict_keeps_only_last_extension(self, tmp_path):
        """Test the suffix goes before the last extension."""
        (tmp_path / "archive.tar.gz").write_text("existing")

        dest = resolve_unique_destination(tmp_path, "archive.tar.gz")

        assert dest == tmp_path / "archive.tar (1).gz"

    def test_reserved_paths_count_as_taken(self, tmp_path):
        """Test destinations claimed earlier in the run are avoided."""
        reserved = {tmp_path / "file.txt", tmp_path / "file (1).txt"}

        dest = resolve_unique_destination(tmp_path, "file.txt", reserved)

        assert dest == tmp_path / "file (2).txt"

    def test_reserved_and_existing_combined(self, tmp_path):
        """Test disk state and reservations are both checked."""
        (tmp_path / "file.txt").write_text("existing")
        reserved = {tmp_path / "file (1).txt"}

        dest = resolve_unique_destination(tmp_path, "file.txt", reserved)

        assert dest == tmp_path / "file (2).txt"
