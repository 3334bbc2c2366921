"""Tests for the indentation-based key-path resolver."""

from __future__ import annotations

from i18nupdate.keys.resolver import (
    find_irregular_indentation,
    has_children,
    is_key_line,
    is_locale_header,
    is_parent_key_line,
    is_root_locale_line,
    resolve_key_paths,
)

NESTED = "a:\n  b:\n    c: 1\n  d: 2\n".splitlines()


class TestResolveKeyPaths:
    def test_nested_without_locale_root(self) -> None:
        assert resolve_key_paths(NESTED, "c: 1") == ["a.b.c"]
        assert resolve_key_paths(NESTED, "d: 2") == ["a.d"]

    def test_under_locale_root(self, base_locale: str) -> None:
        lines = base_locale.splitlines()
        assert resolve_key_paths(lines, "body: The page is gone") == ["errors.not_found.body"]
        assert resolve_key_paths(lines, "greeting: Hello") == ["greeting"]
        assert resolve_key_paths(lines, "copyright: All rights reserved") == [
            "footer.copyright"
        ]

    def test_target_is_trimmed(self, base_locale: str) -> None:
        lines = base_locale.splitlines()
        assert resolve_key_paths(lines, "      title: Not found  ") == ["errors.not_found.title"]

    def test_root_locale_line_never_matches(self, base_locale: str) -> None:
        assert resolve_key_paths(base_locale.splitlines(), "en:") == []

    def test_root_locale_line_not_in_any_path(self, base_locale: str) -> None:
        lines = base_locale.splitlines()
        for target in ("title: Not found", "greeting: Hello"):
            for path in resolve_key_paths(lines, target):
                assert not path.startswith("en.")

    def test_region_locale_root(self) -> None:
        lines = ["en-US:", "  errors:", "    title: Oops", "  greeting: Hello"]
        assert resolve_key_paths(lines, "greeting: Hello") == ["greeting"]
        assert resolve_key_paths(lines, "title: Oops") == ["errors.title"]

    def test_identifier_root_is_an_ordinary_key(self) -> None:
        lines = ["pt_BR:", "  greeting: Ola"]
        assert resolve_key_paths(lines, "greeting: Ola") == ["pt_BR.greeting"]

    def test_not_found(self, base_locale: str) -> None:
        assert resolve_key_paths(base_locale.splitlines(), "missing: value") == []

    def test_empty_value_has_children(self) -> None:
        lines = ["en:", "  x:", "    y: 1"]
        assert resolve_key_paths(lines, "y: 1") == ["x.y"]

    def test_empty_value_key_matches_itself(self) -> None:
        lines = ["en:", "  x:", "    y: 1"]
        assert resolve_key_paths(lines, "x:") == ["x"]

    def test_block_scalar_pushes_key(self) -> None:
        lines = ["en:", "  intro: |", "    Some text", "  outro: Bye"]
        assert resolve_key_paths(lines, "intro: |") == ["intro"]
        assert resolve_key_paths(lines, "outro: Bye") == ["outro"]

    def test_sibling_after_deep_nesting(self) -> None:
        lines = [
            "en:",
            "  one:",
            "    two:",
            "      three: deep",
            "  four: shallow",
        ]
        assert resolve_key_paths(lines, "four: shallow") == ["four"]

    def test_identical_lines_all_match(self) -> None:
        lines = [
            "en:",
            "  admin:",
            "    title: Same",
            "  public:",
            "    title: Same",
        ]
        assert resolve_key_paths(lines, "title: Same") == ["admin.title", "public.title"]

    def test_duplicates_removed(self) -> None:
        lines = ["en:", "  a:", "    k: v", "    k: v"]
        assert resolve_key_paths(lines, "k: v") == ["a.k"]

    def test_crlf_lines(self) -> None:
        lines = ["en:\r\n", "  a:\r\n", "    k: v\r\n"]
        assert resolve_key_paths(lines, "k: v") == ["a.k"]

    def test_idempotent(self, base_locale: str) -> None:
        lines = base_locale.splitlines()
        first = resolve_key_paths(lines, "title: Not found")
        assert resolve_key_paths(lines, "title: Not found") == first


class TestLineClassifiers:
    def test_root_locale(self) -> None:
        assert is_root_locale_line("en:")
        assert is_root_locale_line("pt:   ")
        assert not is_root_locale_line("  en:")
        assert not is_root_locale_line("eng:")
        assert not is_root_locale_line("en: value")

    def test_locale_header(self) -> None:
        assert is_locale_header("en:")
        assert is_locale_header("en-US:")
        assert is_locale_header("zh-Hant-TW:  \n")
        assert not is_locale_header("pt_BR:")
        assert not is_locale_header("  en-US:")
        assert not is_locale_header("en-US: value")
        assert not is_locale_header("- item:")
        assert not is_locale_header("# comment:")

    def test_key_line(self) -> None:
        assert is_key_line("title: Hello")
        assert is_key_line("    Title_2: x")
        assert not is_key_line("- item")
        assert not is_key_line("just text")
        assert not is_key_line("2fa: code")

    def test_parent_key_line(self) -> None:
        assert is_parent_key_line("errors:")
        assert is_parent_key_line("  errors:  ")
        assert not is_parent_key_line("errors: x")
        assert not is_parent_key_line("intro: |")

    def test_has_children(self) -> None:
        assert has_children("")
        assert has_children("  ")
        assert has_children(" |")
        assert has_children(" >")
        assert not has_children(" value")


class TestFindIrregularIndentation:
    def test_regular(self, base_locale: str) -> None:
        assert find_irregular_indentation(base_locale.splitlines()) == []

    def test_odd_indent(self) -> None:
        lines = ["en:", "  a:", "   b: 1", "  c: 2"]
        assert find_irregular_indentation(lines) == [3]

    def test_tabs(self) -> None:
        lines = ["en:", "\ta: 1"]
        assert find_irregular_indentation(lines) == [2]

    def test_ignores_non_key_lines(self) -> None:
        lines = ["en:", "  intro: |", "     odd block text"]
        assert find_irregular_indentation(lines) == []
