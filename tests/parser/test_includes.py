"""Tests for include extraction and traversal."""

from collections.abc import Callable
from pathlib import Path

import pytest

from specscope.core.errors import ReadError
from specscope.parser.includes import (
    build_include_tree,
    extract_includes,
    extract_includes_from_file,
    get_included_files,
    parse_tags,
    resolve_include_path,
    walk_include_tree,
)

WriteTree = Callable[[Path, dict[str, str]], None]


class TestExtractIncludes:
    """Directive parsing."""

    def test_plain_directive(self) -> None:
        includes = extract_includes("= T\ninclude::chapters/a.adoc[]\n")
        assert len(includes) == 1
        assert includes[0].path == "chapters/a.adoc"
        assert includes[0].line == 2
        assert includes[0].tags == ()

    def test_surrounding_whitespace_is_trimmed(self) -> None:
        includes = extract_includes("   include::a.adoc[]  \n")
        assert [i.path for i in includes] == ["a.adoc"]

    def test_tags_parsed(self) -> None:
        includes = extract_includes("include::a.adoc[tag=intro;tag=usage]\n")
        assert includes[0].tags == ("intro", "usage")

    @pytest.mark.parametrize(
        "line",
        ["include:a.adoc[]", "include::a.adoc", "text include::a.adoc[]", "include::[]"],
    )
    def test_non_directives_ignored(self, line: str) -> None:
        assert extract_includes(line) == []

    def test_parse_tags_ignores_other_options(self) -> None:
        assert parse_tags("leveloffset=+1,tag=x") == ("x",)
        assert parse_tags("") == ()


class TestResolveIncludePath:
    def test_relative_joined_and_normalised(self) -> None:
        assert resolve_include_path("/spec/chapters", "../common/a.adoc") == "/spec/common/a.adoc"

    def test_absolute_kept(self) -> None:
        assert resolve_include_path("/spec", "/shared/a.adoc") == "/shared/a.adoc"


class TestExtractIncludesFromFile:
    def test_resolves_against_including_file(self, spec_tree: Path) -> None:
        perf = spec_tree.parent / "chapters" / "perf.adoc"
        includes = extract_includes_from_file(perf)
        assert includes[0].abs_path == str(spec_tree.parent / "chapters" / "caching.adoc")
        assert includes[0].source_file == str(perf)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ReadError):
            extract_includes_from_file(tmp_path / "missing.adoc")


class TestGetIncludedFiles:
    """Flat transitive include list."""

    def test_depth_first_order(self, spec_tree: Path) -> None:
        base = spec_tree.parent
        assert get_included_files(spec_tree) == [
            str(base / "chapters" / "perf.adoc"),
            str(base / "chapters" / "caching.adoc"),
            str(base / "chapters" / "api.adoc"),
        ]

    def test_cycle_terminates_and_lists_each_once(self, cyclic_tree: Path) -> None:
        files = get_included_files(cyclic_tree)
        base = cyclic_tree.parent
        assert files == [str(base / "b.adoc"), str(base / "a.adoc")]

    def test_self_include_lists_root_once(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("include::root.adoc[]\ninclude::root.adoc[]\n")
        assert get_included_files(tmp_path / "root.adoc") == [str(tmp_path / "root.adoc")]

    def test_cycle_from_non_root_entry(self, tmp_path: Path, write_tree: WriteTree) -> None:
        write_tree(
            tmp_path,
            {
                "root.adoc": "include::a.adoc[]\n",
                "a.adoc": "include::b.adoc[]\n",
                "b.adoc": "include::a.adoc[]\n",
            },
        )
        files = get_included_files(tmp_path / "root.adoc")
        assert files == [str(tmp_path / "a.adoc"), str(tmp_path / "b.adoc")]

    def test_diamond_listed_once(self, tmp_path: Path, write_tree: WriteTree) -> None:
        write_tree(
            tmp_path,
            {
                "root.adoc": "include::a.adoc[]\ninclude::b.adoc[]\n",
                "a.adoc": "include::shared.adoc[]\n",
                "b.adoc": "include::shared.adoc[]\n",
                "shared.adoc": "shared\n",
            },
        )
        files = get_included_files(tmp_path / "root.adoc")
        assert [Path(f).name for f in files] == ["a.adoc", "shared.adoc", "b.adoc"]

    def test_unreadable_include_listed_without_descendants(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("include::missing.adoc[]\n")
        assert get_included_files(tmp_path / "root.adoc") == [str(tmp_path / "missing.adoc")]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ReadError):
            get_included_files(tmp_path / "missing.adoc")

    def test_depth_cap(self, tmp_path: Path, write_tree: WriteTree) -> None:
        write_tree(
            tmp_path,
            {
                "root.adoc": "include::a.adoc[]\n",
                "a.adoc": "include::b.adoc[]\n",
                "b.adoc": "include::c.adoc[]\n",
                "c.adoc": "end\n",
            },
        )
        files = get_included_files(tmp_path / "root.adoc", max_depth=2)
        assert [Path(f).name for f in files] == ["a.adoc", "b.adoc"]


class TestBuildIncludeTree:
    """Include dependency tree."""

    def test_tree_shape(self, spec_tree: Path) -> None:
        tree = build_include_tree(spec_tree)

        assert tree.path == "MANIFEST.adoc"
        assert tree.tags == ()
        assert [c.path for c in tree.children] == ["perf.adoc", "api.adoc"]
        assert [c.path for c in tree.children[0].children] == ["caching.adoc"]

    def test_tags_inherited_from_directive(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("include::a.adoc[tag=intro]\n")
        (tmp_path / "a.adoc").write_text("text\n")

        tree = build_include_tree(tmp_path / "root.adoc")
        assert tree.children[0].tags == ("intro",)

    def test_cycle_back_edge_has_no_node(self, cyclic_tree: Path) -> None:
        tree = build_include_tree(cyclic_tree)

        assert [c.path for c in tree.children] == ["b.adoc"]
        assert tree.children[0].children == []

    def test_unreadable_file_is_childless_node(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("include::missing.adoc[]\n")

        tree = build_include_tree(tmp_path / "root.adoc")
        assert len(tree.children) == 1
        assert tree.children[0].path == "missing.adoc"
        assert tree.children[0].children == []

    def test_unreadable_root_is_childless_node(self, tmp_path: Path) -> None:
        tree = build_include_tree(tmp_path / "missing.adoc")
        assert tree.path == "missing.adoc"
        assert tree.children == []

    def test_walk_yields_depths(self, spec_tree: Path) -> None:
        walked = [(depth, node.path) for depth, node in walk_include_tree(build_include_tree(spec_tree))]
        assert walked == [
            (0, "MANIFEST.adoc"),
            (1, "perf.adoc"),
            (2, "caching.adoc"),
            (1, "api.adoc"),
        ]

    def test_depth_cap_leaves_node_childless(self, tmp_path: Path, write_tree: WriteTree) -> None:
        write_tree(
            tmp_path,
            {
                "root.adoc": "include::a.adoc[]\n",
                "a.adoc": "include::b.adoc[]\n",
                "b.adoc": "include::c.adoc[]\n",
                "c.adoc": "end\n",
            },
        )

        tree = build_include_tree(tmp_path / "root.adoc", max_depth=2)

        walked = [(depth, node.path) for depth, node in walk_include_tree(tree)]
        assert walked == [(0, "root.adoc"), (1, "a.adoc"), (2, "b.adoc")]
        assert tree.children[0].children[0].children == []
