"""Pipeline that folds an ordered list of transforms over a string."""

import logging
from typing import Iterable, Iterator, Optional

from textamender.core.exceptions import PipelineIndexError, TransformError
from textamender.transforms.base import Transform
from textamender.transforms.registry import Registry

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "txt"


class Pipeline:
    """Executes transforms sequentially on a string.

    Holds references to registry transforms, never copies. Not safe for
    concurrent mutation; callers serialize access.
    """

    def __init__(self, transforms: Optional[Iterable[Transform]] = None):
        """Initialize pipeline, optionally pre-seeded.

        Args:
            transforms: Transforms to start with, in run order.
        """
        self._transforms: list[Transform] = list(transforms or [])

    @classmethod
    def from_keys(cls, registry: Registry, keys: Iterable[str]) -> "Pipeline":
        """Create a pipeline by resolving keys against a registry.

        Raises:
            TransformNotFoundError: If any key is unknown.
        """
        return cls(registry.get(key) for key in keys)

    @property
    def transforms(self) -> tuple[Transform, ...]:
        return tuple(self._transforms)

    def keys(self) -> list[str]:
        return [t.key for t in self._transforms]

    def append(self, transform: Transform) -> None:
        """Add a transform at the end. Duplicates are allowed."""
        self._transforms.append(transform)

    def remove_at(self, index: int) -> Transform:
        """Remove and return the transform at index.

        Negative indices are rejected rather than counted from the end.

        Raises:
            PipelineIndexError: If index is outside [0, len).
        """
        if not 0 <= index < len(self._transforms):
            raise PipelineIndexError(
                f"Pipeline index {index} out of range",
                context={"index": index, "length": len(self._transforms)},
            )
        return self._transforms.pop(index)

    def clear(self) -> None:
        self._transforms.clear()

    def run(self, text: str) -> str:
        """Apply all transforms left to right.

        Args:
            text: Input string.

        Returns:
            The output of the last transform, or text unchanged if the
            pipeline is empty.

        Raises:
            TransformError: If a transform raises instead of returning a
                diagnostic string.
        """
        output = text
        for step_index, transform in enumerate(self._transforms):
            output = self._apply_step(output, transform, step_index)
        logger.debug(
            "Pipeline run completed",
            extra={"context": {"steps": len(self._transforms)}},
        )
        return output

    def _apply_step(self, text: str, transform: Transform, step_index: int) -> str:
        try:
            return transform.apply(text)
        except Exception as e:
            raise TransformError(
                f"Transform failed at step {step_index}",
                context={
                    "step_index": step_index,
                    "key": transform.key,
                    "error": str(e),
                },
            ) from e

    def resolve_extension(self) -> str:
        """Return the output file extension, without a leading dot.

        The last force-extension transform wins; DEFAULT_EXTENSION if none.
        """
        extension = DEFAULT_EXTENSION
        for transform in self._transforms:
            if transform.forces_extension:
                extension = transform.extension or DEFAULT_EXTENSION
        return extension

    def output_filename(self, basename: str) -> str:
        """Join basename and resolved extension with exactly one dot."""
        stem = basename.rstrip(".")
        extension = self.resolve_extension().lstrip(".")
        return f"{stem}.{extension}"

    def __len__(self) -> int:
        return len(self._transforms)

    def __iter__(self) -> Iterator[Transform]:
        return iter(self._transforms)

    def __getitem__(self, index: int) -> Transform:
        return self._transforms[index]

    def __repr__(self) -> str:
        return f"Pipeline({self.keys()!r})"
