"""Tests for merging single-language trees into a multi-language catalog.

Covers:
- wrap_language() adding the language dimension
- merge() union across languages, nested paths, and entry forms
- Last-write-wins for the same language at the same path
- CatalogMergeError for structural conflicts and invalid values
- Inputs never mutated
- Properties: order independence for distinct languages
- Fuzz: every ordering of three deep single-language trees (-m fuzz)

Python 3.13+.
"""

from __future__ import annotations

import copy
import itertools

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from tests.strategies import language_codes, partial_trees, walk_variants
from transtree.catalog import CatalogEntry, lookup, merge, wrap_language
from transtree.diagnostics import CatalogMergeError, DiagnosticCode, DiagnosticsEmitter
from transtree.localization import Translator

IT = {
    "pear": "Pera",
    "apple": ["Mela", "Mele", "Nessuna mela"],
    "vegetable": {"root": {"carrot": "Carota"}},
    "sub": {"strawberry": ["1 fragola", "2+ fragole", "0 fragole"]},
}

EN = {
    "pear": "Pear",
    "apple": ["Apple", "Apples", "No apples"],
    "vegetable": {"root": {"carrot": "Carrot"}},
    "sub": {"strawberry": ["1 strawberry", "%n strawberries", "0 strawberry"]},
}


class TestWrapLanguage:
    """Test adding the language dimension to one tree."""

    def test_wraps_every_variant(self) -> None:
        """Bare variants become one-language leaves at every depth."""
        assert wrap_language("it", {"pear": "Pera", "vegetable": {"carrot": "Carota"}}) == {
            "pear": {"it": "Pera"},
            "vegetable": {"carrot": {"it": "Carota"}},
        }

    def test_invalid_value(self) -> None:
        """Values that are neither variants nor mappings are rejected with their path."""
        with pytest.raises(CatalogMergeError) as exc_info:
            wrap_language("en", {"sub": {"strawberry": ["1 strawberry", "0 strawberries"]}})
        assert exc_info.value.path == "sub.strawberry"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MERGE_INVALID_VALUE


class TestMerge:
    """Test merge() across entries."""

    def test_two_languages(self) -> None:
        """Leaves for different languages are united at every path."""
        assert merge([("it", IT), ("en", EN)]) == {
            "pear": {"it": "Pera", "en": "Pear"},
            "apple": {
                "it": ["Mela", "Mele", "Nessuna mela"],
                "en": ["Apple", "Apples", "No apples"],
            },
            "vegetable": {"root": {"carrot": {"it": "Carota", "en": "Carrot"}}},
            "sub": {
                "strawberry": {
                    "it": ["1 fragola", "2+ fragole", "0 fragole"],
                    "en": ["1 strawberry", "%n strawberries", "0 strawberry"],
                }
            },
        }

    def test_disjoint_paths(self) -> None:
        """Paths present for one language only keep a one-language leaf."""
        merged = merge([("it", {"banana": "Banana"}), ("en", {"pear": "Pear"})])
        assert merged == {"banana": {"it": "Banana"}, "pear": {"en": "Pear"}}

    def test_same_language_last_write_wins(self) -> None:
        """A later entry for the same language overrides an earlier one."""
        merged = merge([("it", {"pear": "Pera"}), ("it", {"pear": "Pera!"})])
        assert merged == {"pear": {"it": "Pera!"}}

    def test_same_language_split_resources(self) -> None:
        """One language spread across several trees is united."""
        merged = merge([("it", {"sub": {"orange": "Arancia"}}), ("it", {"sub": {"kiwi": "Kiwi"}})])
        assert merged == {"sub": {"orange": {"it": "Arancia"}, "kiwi": {"it": "Kiwi"}}}

    def test_entry_forms(self) -> None:
        """CatalogEntry, pairs and {'language', 'tree'} mappings are accepted."""
        merged = merge(
            [
                CatalogEntry(language="it", tree={"pear": "Pera"}),
                ("en", {"pear": "Pear"}),
                {"language": "de", "tree": {"pear": "Birne"}},
            ]
        )
        assert merged == {"pear": {"it": "Pera", "en": "Pear", "de": "Birne"}}

    def test_unsupported_entry(self) -> None:
        """Other entry types raise TypeError."""
        with pytest.raises(TypeError, match="merge\\(\\) entries"):
            merge(["it"])  # type: ignore[list-item]

    def test_empty(self) -> None:
        """No entries produce an empty catalog."""
        assert merge([]) == {}

    def test_empty_subtree_compatible(self) -> None:
        """Empty sub-catalogs merge with anything."""
        merged = merge([("it", {"sub": {}}), ("en", {"sub": {"orange": "Orange"}})])
        assert merged == {"sub": {"orange": {"en": "Orange"}}}

    def test_leaf_catalog_conflict(self) -> None:
        """A path that is a leaf in one tree and a subtree in another is rejected."""
        with pytest.raises(CatalogMergeError) as exc_info:
            merge([("it", {"fruit": "Frutta"}), ("en", {"fruit": {"red": "Apple"}})])
        error = exc_info.value
        assert error.path == "fruit"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.MERGE_CONFLICT
        assert "Rename one of the conflicting keys" in str(error)

    def test_nested_conflict_path(self) -> None:
        """Conflict paths are reported in full."""
        with pytest.raises(CatalogMergeError) as exc_info:
            merge(
                [
                    ("it", {"sub": {"fruit": {"red": "Mela"}}}),
                    ("en", {"sub": {"fruit": "Fruit"}}),
                ]
            )
        assert exc_info.value.path == "sub.fruit"

    def test_inputs_not_mutated(self) -> None:
        """merge() copies instead of mutating its inputs."""
        it_tree = copy.deepcopy(IT)
        en_tree = copy.deepcopy(EN)
        merge([("it", it_tree), ("en", en_tree), ("it", {"pear": "Pera!"})])
        assert it_tree == IT
        assert en_tree == EN

    def test_merged_catalog_translates(self) -> None:
        """The merged catalog is directly usable by a Translator."""
        with DiagnosticsEmitter() as emitter:
            translator = Translator(merge([("it", IT), ("en", EN)]), language="en", emitter=emitter)
            assert translator.t("strawberry", prefix="sub", count=3) == "3 strawberries"
            translator.set_language("it")
            assert translator.t("vegetable.root.carrot") == "Carota"


class TestMergeProperties:
    """Property-based tests for merge()."""

    @given(first=language_codes, second=language_codes, tree=partial_trees())
    def test_order_independent_for_distinct_languages(
        self, first: str, second: str, tree: dict[str, object]
    ) -> None:
        """Property: entries for distinct languages merge the same in any order."""
        assume(first != second)
        other = copy.deepcopy(tree)
        forward = merge([(first, tree), (second, other)])
        backward = merge([(second, other), (first, tree)])
        assert forward == backward

    @given(first=language_codes, second=language_codes, tree=partial_trees())
    def test_every_language_present_at_every_path(
        self, first: str, second: str, tree: dict[str, object]
    ) -> None:
        """Property: same-shaped trees yield leaves holding both languages."""
        assume(first != second)
        merged = merge([(first, tree), (second, tree)])
        for path, variant in walk_variants(tree):
            assert lookup(merged, path) == {first: variant, second: variant}


@pytest.mark.fuzz
class TestMergeFuzz:
    """Heavy merge properties, run only with -m fuzz."""

    @settings(max_examples=2000, deadline=None)
    @given(
        languages=st.lists(language_codes, min_size=3, max_size=3, unique=True),
        tree=partial_trees(max_depth=4),
    )
    def test_every_ordering_merges_alike(
        self, languages: list[str], tree: dict[str, object]
    ) -> None:
        """Property: any ordering of distinct-language entries yields one catalog."""
        entries = [(language, copy.deepcopy(tree)) for language in languages]
        expected = merge(entries)
        for ordering in itertools.permutations(entries):
            assert merge(ordering) == expected
        for path, variant in walk_variants(tree):
            assert lookup(expected, path) == dict.fromkeys(languages, variant)
