"""Unit tests for exception resolution: path tables, attributes, skip conditions."""

import unittest

import pytest

from check_typo.domain.constants import ALL, LONG_LINE, MISSING_HEADER, TAB, VERY_LONG_LINE
from check_typo.domain.entities import FileContext
from check_typo.domain.exemptions import (
    ExceptionResolver,
    ExemptionEntry,
    parse_attribute,
    under_directory,
)


class TestParseAttribute(unittest.TestCase):
    def test_comma_and_space_separated(self) -> None:
        self.assertEqual(parse_attribute("tab, long-line white-at-eol"),
                         ("tab", "long-line", "white-at-eol"))

    def test_repeats_are_dropped(self) -> None:
        self.assertEqual(parse_attribute("tab,tab,,long-line"), ("tab", "long-line"))

    def test_git_placeholders_mean_no_exceptions(self) -> None:
        for value in ("", "unspecified", "unset", "set", "  "):
            with self.subTest(value=value):
                self.assertEqual(parse_attribute(value), ())


class TestUnderDirectory(unittest.TestCase):
    def test_parent_at_any_depth(self) -> None:
        matches = under_directory("ocamldoc")
        self.assertTrue(matches("ocamldoc/odoc.ml"))
        self.assertTrue(matches("tools/ocamldoc/generators/odoc_html.ml"))

    def test_file_name_does_not_count(self) -> None:
        self.assertFalse(under_directory("ocamldoc")("tools/ocamldoc"))


def resolve(path: str, resolver: ExceptionResolver | None = None, **kwargs: object):
    return (resolver or ExceptionResolver()).resolve(FileContext(path=path, **kwargs))


class TestBuiltinExemptions:
    @pytest.mark.parametrize(
        "path",
        ["foo.reference", "testsuite/tests/reference", "reference", ".depend", "src/.depend.nt"],
    )
    def test_reference_outputs_are_skipped(self, path: str) -> None:
        resolution = resolve(path)
        assert resolution.exempt
        assert resolution.reason == "reference output"

    @pytest.mark.parametrize("path", ["Makefile", "src/Makefile.common", "Makefile.nt"])
    def test_makefiles_may_contain_tabs(self, path: str) -> None:
        resolution = resolve(path)
        assert not resolution.exempt
        assert resolution.is_suppressed(TAB)

    @pytest.mark.parametrize("path", ["Makefile.d/rules.mk", "src/Makefile.d/gen/rules.mk"])
    def test_files_under_a_makefile_prefix_may_contain_tabs(self, path: str) -> None:
        assert resolve(path).is_suppressed(TAB)

    def test_other_makefile_spellings_are_not_matched(self) -> None:
        assert not resolve("src/GNUmakefile").is_suppressed(TAB)

    @pytest.mark.parametrize("path", [".gitignore", "src/.gitignore", "stdlib/stdlib.mllib"])
    def test_headerless_build_files(self, path: str) -> None:
        assert resolve(path).is_suppressed(MISSING_HEADER)

    def test_ocamldoc_sources_may_have_long_lines(self) -> None:
        resolution = resolve("ocamldoc/odoc_html.ml")
        assert resolution.is_suppressed(LONG_LINE)
        assert not resolution.is_suppressed(VERY_LONG_LINE)

    def test_matching_entries_accumulate(self) -> None:
        resolution = resolve("ocamldoc/Makefile")
        assert resolution.suppressed == frozenset({TAB, LONG_LINE})

    def test_path_entries_are_not_declared(self) -> None:
        """Only attribute-declared exceptions are audited for being unused."""
        assert resolve("Makefile").declared == ()


class TestExceptionResolver:
    def test_sources_are_unioned(self) -> None:
        resolver = ExceptionResolver(global_disable=["white-at-eol"])
        resolution = resolve("src/Makefile", resolver, attributes="long-line")
        assert resolution.suppressed == frozenset({"white-at-eol", TAB, LONG_LINE})
        assert resolution.declared == (LONG_LINE,)

    def test_binary_file_is_skipped(self) -> None:
        resolution = resolve("logo.png", is_binary=True)
        assert resolution.exempt
        assert resolution.reason == "binary"

    def test_binary_token_in_attribute(self) -> None:
        assert resolve("data.bin", attributes="binary").exempt

    def test_untracked_walked_file_is_skipped(self) -> None:
        resolution = resolve("scratch.ml", is_tracked=False, is_explicit=False)
        assert resolution.exempt
        assert resolution.reason == "untracked"

    def test_untracked_explicit_file_is_checked(self) -> None:
        assert not resolve("scratch.ml", is_tracked=False, is_explicit=True).exempt

    def test_prune_token_is_not_a_rule(self) -> None:
        resolution = resolve("src/a.ml", attributes="prune,tab")
        assert resolution.declared == (TAB,)
        assert "prune" not in resolution.suppressed

    def test_unspecified_attribute(self) -> None:
        resolution = resolve("src/a.ml", attributes="unspecified")
        assert resolution.declared == ()
        assert resolution.suppressed == frozenset()

    def test_configured_entries(self) -> None:
        resolver = ExceptionResolver(
            extra_entries=[
                ExemptionEntry.from_glob("vendor/*", ALL),
                ExemptionEntry.from_glob("*.mly", LONG_LINE),
            ]
        )
        assert resolve("vendor/lib/x.ml", resolver).exempt
        assert resolve("parsing/parser.mly", resolver).is_suppressed(LONG_LINE)

