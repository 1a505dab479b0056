"""Text Amender - composable text transformation pipes.

Pick named amendments from a catalog, arrange them into a pipe and fold the
pipe over an input string.
"""

__version__ = "2.0.0"

# Public API
from textamender.api import amend, build_pipeline, from_yaml, run_pipe

# Exceptions
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

# Pipe model
from textamender.models.pipe_config import PipeConfig

# Core classes
from textamender.transforms import (
    Category,
    Pipeline,
    Registry,
    Transform,
    TransformSummary,
    amendment,
    build_registry,
    default_registry,
)

__all__ = [
    # Version
    "__version__",
    # Public API
    "amend",
    "build_pipeline",
    "from_yaml",
    "run_pipe",
    # Core classes
    "Category",
    "Transform",
    "TransformSummary",
    "amendment",
    "Registry",
    "build_registry",
    "default_registry",
    "Pipeline",
    "PipeConfig",
    # Exceptions
    "TextAmenderError",
    "RegistryError",
    "DuplicateTransformError",
    "TransformNotFoundError",
    "PipelineError",
    "PipelineIndexError",
    "TransformError",
    "PipeConfigError",
]
