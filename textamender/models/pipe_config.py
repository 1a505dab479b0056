"""Pipe file model: a saved, named sequence of transform keys."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class OutputConfig(BaseModel):
    """Where a pipe's result is written when saved to disk."""

    basename: str = Field(default="output", description="File name without extension")

    @field_validator("basename")
    @classmethod
    def validate_basename(cls, v):
        """Validate basename is a bare file name."""
        if not v.strip(".").strip():
            raise ValueError("basename must not be empty")
        if "/" in v or "\\" in v:
            raise ValueError("basename must not contain path separators")
        return v


class PipeConfig(BaseModel):
    """Complete pipe definition."""

    name: str = Field(description="Pipe name (required)")
    description: Optional[str] = Field(default=None, description="Free-form notes")
    steps: List[str] = Field(
        default_factory=list, description="Transform keys, applied in order"
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig, description="Output file configuration"
    )

    @field_validator("steps")
    @classmethod
    def validate_steps(cls, v):
        """Validate every step is a non-empty key."""
        for index, key in enumerate(v):
            if not key.strip():
                raise ValueError(f"step {index} must be a non-empty transform key")
        return [key.strip() for key in v]

    @classmethod
    def from_dict(cls, data: dict) -> "PipeConfig":
        """Create PipeConfig from a parsed YAML document."""
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "PipeConfig":
        """Load a pipe definition from a YAML file."""
        from textamender.models.loader import load_pipe_config

        return load_pipe_config(path)
