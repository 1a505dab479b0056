"""Public Python API for textamender package.

This module provides the main entry points for building and running pipes.
"""

import logging
from typing import Iterable, Optional

from textamender.models.loader import load_pipe_config
from textamender.models.pipe_config import PipeConfig
from textamender.transforms.pipeline import Pipeline
from textamender.transforms.registry import Registry, default_registry

logger = logging.getLogger(__name__)


def from_yaml(path: str) -> PipeConfig:
    """Load a pipe definition from a YAML file.

    Args:
        path: Path to pipe YAML file

    Returns:
        Validated PipeConfig instance

    Raises:
        PipeConfigError: If file not found, invalid YAML or validation fails

    Example:
        >>> config = from_yaml("examples/pipes/kv_csv_to_json.yaml")
        >>> config.steps
        ['csv-to-json', 'json-ext']
    """
    return load_pipe_config(path)


def build_pipeline(
    keys: Iterable[str],
    registry: Optional[Registry] = None,
) -> Pipeline:
    """Resolve transform keys into a pipeline.

    Args:
        keys: Transform keys in run order.
        registry: Registry to resolve against; the built-in catalog if omitted.

    Raises:
        TransformNotFoundError: If a key is not registered.
    """
    registry = registry or default_registry()
    return Pipeline.from_keys(registry, keys)


def run_pipe(
    config: PipeConfig,
    text: str,
    registry: Optional[Registry] = None,
) -> str:
    """Run a loaded pipe definition over text.

    Args:
        config: Pipe definition.
        text: Input string.
        registry: Registry to resolve steps against; the built-in catalog if omitted.

    Returns:
        The amended text.

    Raises:
        TransformNotFoundError: If a step key is not registered.

    Example:
        >>> config = PipeConfig(name="paths", steps=["git-bash-2"])
        >>> run_pipe(config, "C:\\\\Users\\\\a")
        '/c/Users/a'
    """
    pipeline = build_pipeline(config.steps, registry)
    logger.info(
        "Running pipe",
        extra={"pipe_name": config.name, "context": {"steps": len(pipeline)}},
    )
    return pipeline.run(text)


def amend(text: str, *keys: str, registry: Optional[Registry] = None) -> str:
    """Apply the transforms named by keys to text, in order.

    Example:
        >>> amend("a,b\\n1,2", "csv-to-tsv")
        'a\\tb\\n1\\t2'
    """
    return build_pipeline(keys, registry).run(text)
