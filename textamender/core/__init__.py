"""Core module for textamender package."""

from textamender.core.exceptions import (
    DuplicateTransformError,
    PipeConfigError,
    PipelineError,
    PipelineIndexError,
    RegistryError,
    TextAmenderError,
    TransformError,
    TransformNotFoundError,
)
from textamender.core.logging import StructuredFormatter, configure_logging

__all__ = [
    "TextAmenderError",
    "RegistryError",
    "DuplicateTransformError",
    "TransformNotFoundError",
    "PipelineError",
    "PipelineIndexError",
    "TransformError",
    "PipeConfigError",
    "configure_logging",
    "StructuredFormatter",
]
