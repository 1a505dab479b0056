"""Unit tests for the transform registry."""

import pytest

from textamender.core.exceptions import (
    DuplicateTransformError,
    RegistryError,
    TransformNotFoundError,
)
from textamender.transforms import (
    Category,
    Registry,
    TransformSummary,
    build_registry,
    default_definitions,
)


class TestBuildRegistry:
    """Tests for registry construction."""

    def test_preserves_definition_order(self, transform_factory):
        """all() should return transforms in the order they were defined."""
        definitions = [transform_factory("b"), transform_factory("a"), transform_factory("c")]
        registry = build_registry(definitions)

        assert [t.key for t in registry.all()] == ["b", "a", "c"]
        assert registry.keys() == ["b", "a", "c"]
        assert len(registry) == 3

    def test_duplicate_keys_raise(self, transform_factory):
        """Two definitions sharing a key should be rejected."""
        definitions = [
            transform_factory("strip-quotes", name="Strip surrounding quotes"),
            transform_factory("strip-quotes", name="This PC Folders to Full Path"),
        ]

        with pytest.raises(DuplicateTransformError) as exc_info:
            build_registry(definitions)

        assert exc_info.value.context["duplicate_keys"] == ["strip-quotes"]
        assert isinstance(exc_info.value, RegistryError)

    def test_empty_registry(self):
        """An empty definition list gives an empty registry."""
        registry = build_registry([])
        assert registry.all() == ()
        assert len(registry) == 0

    def test_all_is_read_only(self, transform_factory):
        """all() returns an immutable snapshot."""
        registry = build_registry([transform_factory("a")])
        assert isinstance(registry.all(), tuple)


class TestLookup:
    """Tests for key lookup."""

    def test_get_returns_transform(self, transform_factory):
        transform = transform_factory("a")
        registry = build_registry([transform])

        assert registry.get("a") is transform

    def test_get_unknown_key_raises(self, transform_factory):
        """Unknown keys are reported as not found."""
        registry = build_registry([transform_factory("a")])

        with pytest.raises(TransformNotFoundError) as exc_info:
            registry.get("missing")

        assert "missing" in str(exc_info.value)
        assert exc_info.value.context["available_keys"] == "a"

    def test_not_found_is_a_key_error(self):
        registry = build_registry([])
        with pytest.raises(KeyError):
            registry.get("anything")

    def test_find_and_contains(self, transform_factory):
        transform = transform_factory("a")
        registry = build_registry([transform])

        assert registry.find("a") is transform
        assert registry.find("b") is None
        assert "a" in registry
        assert "b" not in registry

    def test_lookup_is_exact(self, transform_factory):
        """Keys are matched exactly, not by prefix or case."""
        registry = build_registry([transform_factory("csv-ext")])
        assert "csv" not in registry
        assert "CSV-EXT" not in registry


class TestByCategory:
    """Tests for category grouping."""

    def test_one_bucket_per_category_in_declared_order(self, transform_factory):
        registry = build_registry([transform_factory("a", category=Category.PATHS)])
        groups = registry.by_category()

        assert list(groups.keys()) == list(Category)

    def test_empty_buckets_included(self, transform_factory):
        registry = build_registry([transform_factory("a", category=Category.PATHS)])
        groups = registry.by_category()

        assert groups[Category.TABULAR] == ()
        assert [t.key for t in groups[Category.PATHS]] == ["a"]

    def test_relative_order_preserved_within_group(self, transform_factory):
        definitions = [
            transform_factory("s1", category=Category.STRINGS),
            transform_factory("p1", category=Category.PATHS),
            transform_factory("s2", category=Category.STRINGS),
            transform_factory("p2", category=Category.PATHS),
        ]
        groups = build_registry(definitions).by_category()

        assert [t.key for t in groups[Category.STRINGS]] == ["s1", "s2"]
        assert [t.key for t in groups[Category.PATHS]] == ["p1", "p2"]


class TestSummaries:
    """Tests for display summaries."""

    def test_summaries_exclude_operation(self, transform_factory):
        registry = build_registry([transform_factory("a")])
        summary = registry.summaries()[0]

        assert isinstance(summary, TransformSummary)
        assert summary.key == "a"
        assert summary.category == Category.STRINGS
        assert "operation" not in summary.model_dump()


class TestDefaultCatalog:
    """Tests for the built-in catalog."""

    def test_keys_are_unique(self):
        keys = [t.key for t in default_definitions()]
        assert len(keys) == len(set(keys))

    def test_default_registry_builds(self, registry):
        assert isinstance(registry, Registry)
        assert len(registry) == len(default_definitions())

    def test_formerly_colliding_entries_have_distinct_keys(self, registry):
        assert registry.get("strip-quotes").name == "Strip surrounding quotes"
        assert registry.get("this-pc-full-path").name == "This PC Folders to Full Path"

    def test_every_category_is_populated(self, registry):
        for category, transforms in registry.by_category().items():
            assert transforms, f"{category} has no transforms"

    def test_operations_are_total_on_awkward_input(self, registry):
        """No built-in transform raises, whatever the input."""
        samples = [
            "", "\n", "(", ")", "{", "[[", "%E0%A4", "&", "\t\t", "-", "@&@", "é",
            "- 2024-01-01", "- !!binary aGVsbG8=", "[" * 5000 + "]" * 5000,
        ]
        for transform in registry:
            for sample in samples:
                assert isinstance(transform.apply(sample), str), transform.key
