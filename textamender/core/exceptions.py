"""Exception hierarchy for the textamender package."""


class TextAmenderError(Exception):
    """Base exception for all textamender errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class RegistryError(TextAmenderError):
    """Raised when registry construction or lookup fails."""

    pass


class DuplicateTransformError(RegistryError):
    """Raised when two transform definitions share a key."""

    pass


class TransformNotFoundError(RegistryError, KeyError):
    """Raised when a key does not match any registered transform."""

    pass


class PipelineError(TextAmenderError):
    """Raised when a pipeline operation fails."""

    pass


class PipelineIndexError(PipelineError, IndexError):
    """Raised when a pipeline position is outside [0, len)."""

    pass


class TransformError(TextAmenderError):
    """Raised when a transform raises instead of returning a diagnostic."""

    pass


class PipeConfigError(TextAmenderError):
    """Raised when pipe file parsing or validation fails."""

    pass
