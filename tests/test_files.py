"""Tests for tvcalc.utils.files.collect_markdown_files."""

from tvcalc.utils import collect_markdown_files


class TestCollectMarkdownFiles:
    def test_finds_nested_markdown_only(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "a.md").write_text("# A")
        (tmp_path / "sub" / "b.md").write_text("# B")
        (tmp_path / "notes.txt").write_text("not markdown")

        files = collect_markdown_files(tmp_path)

        assert len(files) == 2
        assert all(f.name.endswith(".md") for f in files)
        assert {f.name for f in files} == {"a.md", "b.md"}

    def test_missing_directory_returns_empty(self, tmp_path):
        assert collect_markdown_files(tmp_path / "does-not-exist") == []

    def test_file_as_root_returns_empty(self, tmp_path):
        path = tmp_path / "post.md"
        path.write_text("# Post")
        assert collect_markdown_files(path) == []

    def test_order_is_sorted_depth_first(self, tmp_path):
        (tmp_path / "b").mkdir()
        (tmp_path / "c.md").write_text("")
        (tmp_path / "a.md").write_text("")
        (tmp_path / "b" / "z.md").write_text("")

        names = [p.relative_to(tmp_path).as_posix() for p in collect_markdown_files(tmp_path)]

        assert names == ["a.md", "b/z.md", "c.md"]

    def test_accepts_string_path(self, tmp_path):
        (tmp_path / "a.md").write_text("")
        assert len(collect_markdown_files(str(tmp_path))) == 1
