"""Models module for pipe definitions."""

from textamender.models.loader import from_yaml, load_pipe_config
from textamender.models.pipe_config import OutputConfig, PipeConfig

__all__ = [
    "PipeConfig",
    "OutputConfig",
    "load_pipe_config",
    "from_yaml",
]
