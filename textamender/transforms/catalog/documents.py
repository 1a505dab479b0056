"""Markdown, Pandoc and copied-document cleanups."""

import re
from dataclasses import dataclass, field

from textamender.transforms.base import Category, amendment

_PANDOC_DIV_RE = re.compile(r"::: (.*?)[\n ]+(.*?)[\n ]+:::")
_CODE_FENCE_RE = re.compile(r"(```.*?```)", re.DOTALL)
_LONE_NEWLINE_RE = re.compile(r"(?<!\n)\n(?!\n)")
_UNTERMINATED_NEWLINE_RE = re.compile(r"(?<!\.)\n")
_OUTLINE_ITEM_RE = re.compile(r"(?P<indent>[ \t]*)-\s*(?P<label>.*?)\s*")

TAB_WIDTH = 4


@amendment(
    name="Pandoc Markdown to HTML",
    key="pandoc-markdown",
    category=Category.PANDOC,
    description="Converts Pandoc Markdown fenced divs (::: class ... :::) into HTML divs",
    input_label="Pandoc Markdown",
    input_example="::: note Remember this :::",
)
def pandoc_markdown_to_html(text: str) -> str:
    return _PANDOC_DIV_RE.sub('<div class="\\1">\n\\2\n</div>', text)


@amendment(
    name="Fake List to List",
    key="fake-list-to-list",
    category=Category.PAPER,
    description='Turns dash-separated text such as "-Point 1 -Point 2- Point 3" into a Markdown list',
    input_label="Text",
)
def fake_list_to_list(text: str) -> str:
    return text.replace("-", "\n\n - ")


@amendment(
    name="PDF Newline Remover",
    key="pdf-newline-remover",
    category=Category.PAPER,
    description="Removes all newlines that aren't preceded by a period",
    input_label="Text from PDF",
)
def pdf_newline_remover(text: str) -> str:
    return _UNTERMINATED_NEWLINE_RE.sub(" ", text)


@amendment(
    name="Soft Wrapper",
    key="soft-wrapper",
    category=Category.PAPER,
    description="Replaces lone newline characters with spaces. Fenced code blocks are left untouched.",
    input_label="Text from MD",
)
def soft_wrapper(text: str) -> str:
    # Odd indices are the fenced blocks captured by the split.
    parts = _CODE_FENCE_RE.split(text)
    return "".join(
        part if index % 2 else _LONE_NEWLINE_RE.sub(" ", part)
        for index, part in enumerate(parts)
    )


@dataclass
class _OutlineNode:
    label: str
    children: list["_OutlineNode"] = field(default_factory=list)


def _branches(nodes: list[_OutlineNode], prefix: str) -> list[tuple[_OutlineNode, str, bool]]:
    """Stack entries for nodes, reversed so the first sibling pops first."""
    last = len(nodes) - 1
    return [(node, prefix, index == last) for index, node in enumerate(nodes)][::-1]


def _render_tree(roots: list[_OutlineNode]) -> list[str]:
    out: list[str] = []
    pending = _branches(roots, "")
    while pending:
        node, prefix, last = pending.pop()
        out.append(prefix + ("└── " if last else "├── ") + node.label)
        pending.extend(_branches(node.children, prefix + ("    " if last else "│   ")))
    return out


@amendment(
    name="Indented List to Tree",
    key="indent-to-tree",
    category=Category.PAPER,
    description=(
        "Renders an indented dash list as a file tree drawn with box characters. "
        "Nesting follows indentation; tabs count as four spaces."
    ),
    input_label="Indented list",
    input_example="- src\n  - main.py\n  - util\n    - io.py\n- README.md",
)
def indent_to_tree(text: str) -> str:
    roots: list[_OutlineNode] = []
    stack: list[tuple[int, _OutlineNode]] = []

    for number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        match = _OUTLINE_ITEM_RE.fullmatch(line)
        if match is None:
            return f"Invalid input: line {number} has no leading '-' | {line}"

        indent = len(match.group("indent").expandtabs(TAB_WIDTH))
        node = _OutlineNode(match.group("label"))
        while stack and stack[-1][0] >= indent:
            stack.pop()
        siblings = stack[-1][1].children if stack else roots
        siblings.append(node)
        stack.append((indent, node))

    return "\n".join(_render_tree(roots))


TRANSFORMS = (
    pandoc_markdown_to_html,
    fake_list_to_list,
    pdf_newline_remover,
    soft_wrapper,
    indent_to_tree,
)
