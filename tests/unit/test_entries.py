"""Tests for building candidate entry lists."""

from upsert_dotfiles.config import Config
from upsert_dotfiles.entries import (
    Entry,
    allow_list_entries,
    candidate_entries,
    enumerated_entries,
)


def _make_tree(root, names):
    for name in names:
        if name.endswith("/"):
            (root / name.rstrip("/")).mkdir()
        else:
            (root / name).write_text(name)


class TestAllowListEntries:
    """Tests for allow_list_entries."""

    def test_keeps_list_order(self, tmp_path):
        """Entries follow the allow-list order, not directory order."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, ["pytest.ini", ".gitignore", ".ruff.toml"])

        entries = allow_list_entries(
            src, tmp_path, [".ruff.toml", ".gitignore", "pytest.ini"]
        )

        assert [e.name for e in entries] == [
            ".ruff.toml",
            ".gitignore",
            "pytest.ini",
        ]

    def test_missing_names_are_skipped(self, tmp_path):
        """Names absent from the source produce no entry."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, [".gitignore"])

        entries = allow_list_entries(src, tmp_path, [".gitignore", ".coveragerc"])

        assert [e.name for e in entries] == [".gitignore"]

    def test_entry_paths(self, tmp_path):
        """Source and destination are the name under each root."""
        src = tmp_path / "src"
        dst = tmp_path / "dst"
        src.mkdir()
        _make_tree(src, [".gitignore"])

        (entry,) = allow_list_entries(src, dst, [".gitignore"])

        assert entry == Entry(".gitignore", src / ".gitignore", dst / ".gitignore")


class TestEnumeratedEntries:
    """Tests for enumerated_entries."""

    def test_includes_hidden_and_directories(self, tmp_path):
        """Hidden files and directories are both candidates."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, [".editorconfig", "scripts/", "pytest.ini"])

        names = {e.name for e in enumerated_entries(src, tmp_path, [])}

        assert names == {".editorconfig", "scripts", "pytest.ini"}

    def test_excludes_configured_names(self, tmp_path):
        """Names in the exclusion set are dropped."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, [".git/", ".github/", "README.md", ".gitignore"])

        names = [
            e.name
            for e in enumerated_entries(
                src, tmp_path, [".git", ".github", "README.md"]
            )
        ]

        assert names == [".gitignore"]

    def test_no_dot_entries(self, tmp_path):
        """The current and parent directory never appear."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, [".a"])

        names = [e.name for e in enumerated_entries(src, tmp_path, [])]

        assert "." not in names
        assert ".." not in names


class TestCandidateEntries:
    """Tests for policy dispatch."""

    def test_include_policy_by_default(self, tmp_path):
        """Default config uses the allow-list."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, [".gitignore", "README.md", "extra.txt"])

        entries = candidate_entries(Config(), src, tmp_path)

        assert [e.name for e in entries] == [".gitignore"]

    def test_enumerate_policy(self, tmp_path):
        """Enumerate policy takes everything not excluded."""
        src = tmp_path / "src"
        src.mkdir()
        _make_tree(src, [".gitignore", "README.md", "extra.txt"])
        config = Config()
        config.data["policy"] = "enumerate"

        names = {e.name for e in candidate_entries(config, src, tmp_path)}

        assert names == {".gitignore", "extra.txt"}
