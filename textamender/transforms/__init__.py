"""Transform pipeline module for text amendments.

Provides:
- Transform, Category: value objects and the catalog taxonomy
- Registry: immutable catalog of transforms keyed by unique key
- Pipeline: ordered, mutable sequence folded over an input string
- Built-in catalog via default_definitions() / default_registry()
"""

from textamender.transforms.base import (
    EXTENSION_DELIMITER,
    Category,
    Operation,
    Transform,
    TransformSummary,
    amendment,
)
from textamender.transforms.catalog import default_definitions
from textamender.transforms.pipeline import DEFAULT_EXTENSION, Pipeline
from textamender.transforms.registry import (
    Registry,
    build_registry,
    default_registry,
)

__all__ = [
    # Values
    "Transform",
    "TransformSummary",
    "Category",
    "Operation",
    "amendment",
    "EXTENSION_DELIMITER",
    # Registry
    "Registry",
    "build_registry",
    "default_registry",
    "default_definitions",
    # Pipeline
    "Pipeline",
    "DEFAULT_EXTENSION",
]
