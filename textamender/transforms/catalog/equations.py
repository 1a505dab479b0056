"""Conversions for equations copied out of the MS Word equation editor."""

import re
from typing import Optional

from textamender.transforms.base import Category, amendment
from textamender.transforms.catalog.values import to_json

_LATEX_FIXUPS = (
    ("\\{", "\\lbrace"),
    ("\\}", "\\rbrace"),
    ("\\emsp", "\\quad"),
)
_ALIGN_LINE_SPLIT_RE = re.compile(r"\n|\\bigm")
_IMPLICIT_PRODUCT_RE = re.compile(r"(?<=[a-zA-Z0-9])(?=[a-zA-Z])")
_PAREN_COEFFICIENT_RE = re.compile(r"\)(\d+)")


def _fix_latex_notation(line: str) -> str:
    for old, new in _LATEX_FIXUPS:
        line = line.replace(old, new)
    return line


@amendment(
    name="Align",
    key="align",
    category=Category.WORD_EQUATIONS,
    description=(
        "Converts MS Word stacked equations into LaTeX. Set the equation box "
        "to LaTeX mode, copy the stacked equations (separated with SHIFT+ENTER) "
        "and paste them here. Starting each line with an operator reduces errors."
    ),
    input_label="MS Word Stacked Math",
    warning="MS Word's copy-paste output is not consistent, so expect errors.",
)
def align(text: str) -> str:
    lines = [f"& {_fix_latex_notation(line)} \\\\" for line in _ALIGN_LINE_SPLIT_RE.split(text)]
    return "$$\\begin{aligned}\n" + "\n".join(lines) + "\n\\end{aligned}$$\n"


@amendment(
    name="Unicode Copy",
    key="unicode-copy",
    category=Category.WORD_EQUATIONS,
    description=(
        "Converts a UnicodeMath equation copied from MS Word into a form search "
        "engines can evaluate. Only elementary arithmetic, complex numbers and "
        "the choose operator are supported."
    ),
    input_label="UnicodeMath code",
)
def unicode_copy(text: str) -> str:
    text = (
        text.replace("⋅", "*")
        .replace(" ", "")
        .replace("¦", " choose ")
        .replace("log_", "log")
        .replace("〖", "(")
        .replace("〗", ")")
        .replace("█", "")
        .replace("@", "")
    )
    return _PAREN_COEFFICIENT_RE.sub(r")*\1", text)


def to_math(text: str) -> str:
    """Make implicit multiplication explicit in a UnicodeMath expression."""
    text = (
        text.strip()
        .replace("⋅", "*")
        .replace(" ", "*")
        .replace("^''", "_q")
        .replace("^'", "_p")
    )
    return _IMPLICIT_PRODUCT_RE.sub("*", text)


math_to_code = amendment(
    name="Math to Code",
    key="to-math",
    category=Category.WORD_EQUATIONS,
    description="Converts a math-like expression in UnicodeMath (copied from MS Word) to code",
    input_label="Equation",
)(to_math)


def _matrix_cells(text: str) -> tuple[Optional[list[list[str]]], str]:
    """Extract the cells of a Word matrix, or a diagnostic if there are no parentheses."""
    first = text.find("(")
    last = text.rfind(")")
    if first == -1 or last == -1:
        return None, f"Invalid input: {first}, {last} | {text}"
    body = text[first + 1 : last]
    return [row.split("&") for row in body.split("@")], ""


@amendment(
    name="Matrix to code",
    key="matrix-to-code",
    category=Category.WORD_EQUATIONS,
    description=(
        "Converts a matrix in MS Word format to a nested list. The matrix must "
        "use square brackets (not parentheses) and may not contain nested matrices."
    ),
    input_label="Equation",
    input_example="[■(1&2&3@4&5&6@7&8&9)]",
)
def matrix_to_code(text: str) -> str:
    cells, diagnostic = _matrix_cells(text)
    if cells is None:
        return diagnostic
    return to_json([[to_math(cell) for cell in row] for row in cells]).replace('"', "")


@amendment(
    name="Transpose Matrix",
    key="transpose-matrix",
    category=Category.WORD_EQUATIONS,
    description=(
        "Transposes an MS Word equation editor matrix. The matrix must use "
        "square brackets (not parentheses) and may not contain nested matrices. "
        "The result is always wrapped in [square brackets]."
    ),
    input_label="Equation",
    input_example="[■(1&2@3&4)]",
)
def transpose_matrix(text: str) -> str:
    cells, diagnostic = _matrix_cells(text)
    if cells is None:
        return diagnostic
    widths = {len(row) for row in cells}
    if len(widths) != 1:
        return f"Invalid input: rows have {sorted(widths)} cells | {text}"
    transposed = zip(*cells)
    return "[■(" + "@".join("&".join(column) for column in transposed) + ")]"


@amendment(
    name="Plus Minus",
    key="plus-minus",
    category=Category.WORD_EQUATIONS,
    description=(
        "Splits an equation with ± into a complex number: the - branch is the "
        "real component and the + branch the imaginary one."
    ),
    input_label="Equation with ±",
)
def plus_minus(text: str) -> str:
    plus_branch = text.replace("±", "+").replace("∓", "-")
    minus_branch = text.replace("±", "-").replace("∓", "+")
    return f"({minus_branch}) + i*({plus_branch})"


TRANSFORMS = (
    math_to_code,
    matrix_to_code,
    unicode_copy,
    transpose_matrix,
    align,
    plus_minus,
)
