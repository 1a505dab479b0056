"""Pipe file loader with YAML parsing and validation."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from textamender.core.exceptions import PipeConfigError
from textamender.models.pipe_config import PipeConfig


def load_pipe_config(path: str) -> PipeConfig:
    """
    Load a pipe definition from a YAML file.

    Args:
        path: Path to pipe YAML file

    Returns:
        Validated PipeConfig instance

    Raises:
        PipeConfigError: If file not found, invalid YAML, or validation fails
    """
    pipe_path = Path(path)
    try:
        with open(pipe_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise PipeConfigError(
            f"Pipe file not found: {path}", context={"path": str(path)}
        )
    except yaml.YAMLError as e:
        raise PipeConfigError(
            f"Invalid YAML in pipe file: {e}", context={"path": str(path)}
        ) from e

    if not isinstance(data, dict):
        raise PipeConfigError(
            "Pipe file must contain a YAML dictionary",
            context={"path": str(path)},
        )

    try:
        return PipeConfig.from_dict(data)
    except ValidationError as e:
        raise PipeConfigError(
            f"Pipe validation failed: {e}", context={"path": str(path)}
        ) from e


def from_yaml(path: str) -> PipeConfig:
    """Load pipe definition from YAML file."""
    return load_pipe_config(path)
