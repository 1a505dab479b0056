"""Identity transforms that choose the output file extension.

Each key is "<ext>-ext"; a pipeline reads the extension from the key of
the last such transform it holds.
"""

from textamender.transforms.base import EXTENSION_DELIMITER, Category, Transform

FORCED_EXTENSIONS = ("csv", "json", "md", "html", "tex", "yaml")


def _identity(text: str) -> str:
    return text


def force_extension(extension: str) -> Transform:
    return Transform(
        name=f".{extension}",
        key=f"{extension}{EXTENSION_DELIMITER}ext",
        description=f"Changes the download format to .{extension}",
        category=Category.FORCE_EXTENSION,
        operation=_identity,
    )


TRANSFORMS = tuple(force_extension(ext) for ext in FORCED_EXTENSIONS)
