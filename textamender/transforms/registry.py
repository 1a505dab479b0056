"""Immutable catalog of transforms keyed by their unique identifier."""

import logging
from typing import Iterable, Iterator, Optional

from textamender.core.exceptions import (
    DuplicateTransformError,
    TransformNotFoundError,
)
from textamender.transforms.base import Category, Transform, TransformSummary

logger = logging.getLogger(__name__)


class Registry:
    """Ordered, read-only collection of transforms.

    Built once from a fixed definition list; every key is unique. Pipelines
    and callers share the same instance, there is no module-level registry.
    """

    def __init__(self, transforms: Iterable[Transform]):
        """Initialize from transform definitions.

        Args:
            transforms: Transform values in catalog order.

        Raises:
            DuplicateTransformError: If two definitions share a key.
        """
        ordered = tuple(transforms)
        index: dict[str, Transform] = {}
        duplicates: list[str] = []
        for transform in ordered:
            if transform.key in index:
                duplicates.append(transform.key)
                continue
            index[transform.key] = transform

        if duplicates:
            raise DuplicateTransformError(
                f"Transform keys must be unique: {sorted(set(duplicates))}",
                context={"duplicate_keys": sorted(set(duplicates))},
            )

        self._transforms = ordered
        self._index = index

    def all(self) -> tuple[Transform, ...]:
        """Return every transform in definition order."""
        return self._transforms

    def keys(self) -> list[str]:
        return [t.key for t in self._transforms]

    def summaries(self) -> list[TransformSummary]:
        """Return display metadata for every transform, in definition order."""
        return [t.summary() for t in self._transforms]

    def by_category(self) -> dict[Category, tuple[Transform, ...]]:
        """Group transforms by category.

        Returns one entry per Category member in declaration order, including
        empty groups. Definition order is preserved inside each group.
        """
        groups: dict[Category, list[Transform]] = {c: [] for c in Category}
        for transform in self._transforms:
            groups[transform.category].append(transform)
        return {category: tuple(items) for category, items in groups.items()}

    def get(self, key: str) -> Transform:
        """Return the transform registered under key.

        Raises:
            TransformNotFoundError: If no transform has this key.
        """
        transform = self._index.get(key)
        if transform is None:
            available = ", ".join(sorted(self._index)) or "(none)"
            raise TransformNotFoundError(
                f"Unknown transform: '{key}'",
                context={"key": key, "available_keys": available},
            )
        return transform

    def find(self, key: str) -> Optional[Transform]:
        return self._index.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Transform]:
        return iter(self._transforms)

    def __len__(self) -> int:
        return len(self._transforms)

    def __repr__(self) -> str:
        return f"Registry({len(self._transforms)} transforms)"


def build_registry(definitions: Iterable[Transform]) -> Registry:
    """Build a registry from a fixed list of transform definitions.

    Args:
        definitions: Transform values in catalog order.

    Returns:
        A new Registry.

    Raises:
        DuplicateTransformError: If two definitions share a key.
    """
    registry = Registry(definitions)
    logger.debug(
        "Registry built",
        extra={"context": {"transforms": len(registry)}},
    )
    return registry


def default_registry() -> Registry:
    """Build a registry holding the built-in catalog."""
    from textamender.transforms.catalog import default_definitions

    return build_registry(default_definitions())
