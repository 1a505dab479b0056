"""Transform value objects and the category taxonomy."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

Operation = Callable[[str], str]

# Force-extension keys are "<ext>-ext"; the extension is everything before this.
EXTENSION_DELIMITER = "-"


class Category(str, Enum):
    """Closed set of catalog groups, in display order.

    FORCE_EXTENSION is a convention rather than a mechanism: its members have
    identity operations and exist only so that a pipeline can derive the
    output file extension from their key.
    """

    TABULAR = "CSV"
    PATHS = "Paths"
    STRINGS = "Strings"
    BOILERPLATE = "Boilerplate"
    WORD_EQUATIONS = "Word Equations"
    PANDOC = "Pandoc"
    PAPER = "Paper"
    FORCE_EXTENSION = "Force Extension"


class TransformSummary(BaseModel):
    """Display metadata for a transform, without its operation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human readable label")
    key: str = Field(description="Unique identifier within a registry")
    description: str = Field(default="", description="Free-form documentation")
    input_label: Optional[str] = Field(
        default=None, description="Hint describing the expected input"
    )
    input_example: Optional[str] = Field(default=None, description="Sample input")
    warning: Optional[str] = Field(default=None, description="Caveat shown to users")
    category: Category = Field(description="Catalog group")


@dataclass(frozen=True)
class Transform:
    """A named, pure, total string-to-string function.

    ``operation`` must never raise: malformed input is turned into a
    diagnostic string that becomes the output.
    """

    name: str
    key: str
    description: str
    category: Category
    operation: Operation
    input_label: Optional[str] = None
    input_example: Optional[str] = None
    warning: Optional[str] = None

    def apply(self, text: str) -> str:
        """Apply the operation to text."""
        return self.operation(text)

    @property
    def forces_extension(self) -> bool:
        return self.category is Category.FORCE_EXTENSION

    @property
    def extension(self) -> Optional[str]:
        """Extension token declared by a force-extension transform, else None."""
        if not self.forces_extension:
            return None
        return self.key.split(EXTENSION_DELIMITER, 1)[0]

    def summary(self) -> TransformSummary:
        return TransformSummary(
            name=self.name,
            key=self.key,
            description=self.description,
            input_label=self.input_label,
            input_example=self.input_example,
            warning=self.warning,
            category=self.category,
        )


def amendment(
    *,
    name: str,
    key: str,
    category: Category,
    description: str = "",
    input_label: Optional[str] = None,
    input_example: Optional[str] = None,
    warning: Optional[str] = None,
) -> Callable[[Operation], Transform]:
    """Declare a plain function as a Transform.

    Example:

        @amendment(name="To Upper Case", key="upper", category=Category.STRINGS)
        def to_upper(text: str) -> str:
            return text.upper()

    The decorated name is bound to the Transform value; use
    ``to_upper.apply(text)`` to run it.
    """

    def _wrap(operation: Operation) -> Transform:
        return Transform(
            name=name,
            key=key,
            description=description or (operation.__doc__ or "").strip(),
            category=category,
            operation=operation,
            input_label=input_label,
            input_example=input_example,
            warning=warning,
        )

    return _wrap
