"""Tests for the diff metadata line parsers."""

from gitdelta.stream.metadata import (
    get_extension,
    get_file_change_description_from_diff_line,
    get_file_extension_from_diff_line,
    get_file_paths_from_diff_line,
    parse_hunk_metadata,
)


class TestFileExtension:
    def test_same_extension(self):
        assert get_file_extension_from_diff_line("diff --git a/src/main.rs b/src/main.rs") == "rs"

    def test_extensionless_file_uses_name(self):
        assert get_file_extension_from_diff_line("diff --git a/Makefile b/Makefile") == "Makefile"

    def test_last_dot_wins(self):
        assert get_file_extension_from_diff_line("diff --git a/a.tar.gz b/a.tar.gz") == "gz"

    def test_disagreeing_extensions(self):
        assert get_file_extension_from_diff_line("diff --git a/notes.txt b/notes.md") is None

    def test_only_one_path(self):
        assert get_file_extension_from_diff_line("diff --cc src/lib.py") == "py"

    def test_no_paths(self):
        assert get_file_extension_from_diff_line("diff --git") is None
        assert get_file_extension_from_diff_line("") is None

    def test_null_device_is_not_an_extension(self):
        assert get_extension("/dev/null") is None
        assert get_extension(None) is None

    def test_dotfile(self):
        assert get_extension(".gitignore") == ".gitignore"


class TestFilePaths:
    def test_paths_with_spaces(self):
        line = "diff --git a/my docs/read me.md b/my docs/read me.md"
        assert get_file_paths_from_diff_line(line) == ("my docs/read me.md", "my docs/read me.md")

    def test_no_prefix_output(self):
        assert get_file_paths_from_diff_line("diff --git src/x.py src/x.py") == ("src/x.py", "src/x.py")


class TestChangeDescription:
    def test_modified(self):
        assert (
            get_file_change_description_from_diff_line("diff --git a/src/main.rs b/src/main.rs")
            == "src/main.rs"
        )

    def test_renamed(self):
        assert (
            get_file_change_description_from_diff_line("diff --git a/old.py b/new.py")
            == "renamed: old.py ⟶ new.py"
        )

    def test_added(self):
        assert (
            get_file_change_description_from_diff_line("diff --git /dev/null b/new.py")
            == "added: new.py"
        )

    def test_deleted(self):
        assert (
            get_file_change_description_from_diff_line("diff --git a/old.py /dev/null")
            == "deleted: old.py"
        )

    def test_unparseable(self):
        assert get_file_change_description_from_diff_line("diff --git") == "?"
        assert get_file_change_description_from_diff_line("diff --cc only.py") == "?"


class TestHunkMetadata:
    def test_fragment_and_line_number(self):
        assert parse_hunk_metadata("@@ -74,15 +75,14 @@ pub fn delta(") == (" pub fn delta(", "75")

    def test_named_fields(self):
        meta = parse_hunk_metadata("@@ -1,2 +3,4 @@ def f():")
        assert meta.code_fragment == " def f():"
        assert meta.line_number == "3"

    def test_single_line_ranges(self):
        assert parse_hunk_metadata("@@ -1 +1 @@") == ("", "1")

    def test_fragment_containing_at_signs(self):
        assert parse_hunk_metadata("@@ -1,2 +1,2 @@ x = a @@ b").code_fragment == " x = a @@ b"

    def test_malformed(self):
        assert parse_hunk_metadata("@@") == ("", "")
        assert parse_hunk_metadata("@@ garbage @@ frag") == (" frag", "")
        assert parse_hunk_metadata("") == ("", "")
