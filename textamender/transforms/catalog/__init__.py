"""Built-in transform catalog.

Each module exposes a TRANSFORMS tuple; default_definitions() concatenates
them in catalog order.
"""

from textamender.transforms.base import Transform
from textamender.transforms.catalog import (
    boilerplate,
    documents,
    equations,
    extensions,
    paths,
    strings,
    tabular,
)

_CATALOG_MODULES = (
    boilerplate,
    paths,
    strings,
    equations,
    tabular,
    documents,
    extensions,
)


def default_definitions() -> tuple[Transform, ...]:
    """Return every built-in transform in catalog order."""
    return tuple(t for module in _CATALOG_MODULES for t in module.TRANSFORMS)


__all__ = ["default_definitions"]
