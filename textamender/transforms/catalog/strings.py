"""String utilities: case, trimming, literals, escaping."""

import html
import json
import re
from urllib.parse import quote, unquote

from textamender.transforms.base import Category, amendment
from textamender.transforms.catalog.values import to_json

# Characters left untouched by encodeURI, besides letters, digits and "_.-~".
_URI_SAFE = ";,/?:@&=+$!*'()#"

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    " ": "&nbsp;",
}
_HTML_ESCAPE_RE = re.compile("|".join(re.escape(ch) for ch in _HTML_ESCAPES))
_HTML_ENTITY_RE = re.compile(r"&(?:#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_SURROUNDING_QUOTES_RE = re.compile(r"\A['\"]+|['\"]+\Z")


@amendment(
    name="To Upper Case",
    key="upper",
    category=Category.STRINGS,
    description="upper(text)",
)
def to_upper(text: str) -> str:
    return text.upper()


@amendment(
    name="To Lower Case",
    key="lower",
    category=Category.STRINGS,
    description="lower(text)",
)
def to_lower(text: str) -> str:
    return text.lower()


@amendment(
    name="Strip",
    key="strip",
    category=Category.STRINGS,
    description="str.strip() (trim in Java/JS)",
)
def strip(text: str) -> str:
    return text.strip()


@amendment(
    name="Strip Leading and Trailing Spaces",
    key="strip-leading-spaces",
    category=Category.STRINGS,
    description="Runs str.strip on each line",
)
def strip_lines(text: str) -> str:
    return "\n".join(line.strip() for line in text.split("\n"))


@amendment(
    name="Strip surrounding quotes",
    key="strip-quotes",
    category=Category.STRINGS,
    description="Strips surrounding quotation marks, single or double",
    input_example='"C:\\Program Files"',
)
def strip_surrounding_quotes(text: str) -> str:
    return _SURROUNDING_QUOTES_RE.sub("", text)


@amendment(
    name="Literal to String",
    key="literal-to-string",
    category=Category.STRINGS,
    description="repr^-1(text): resolves escape sequences such as \\n and \\u00e9",
    input_example="line one\\nline two",
)
def literal_to_string(text: str) -> str:
    try:
        return json.loads('"' + text.replace('"', '\\"') + '"')
    except ValueError:
        return "Invalid string literal"


@amendment(
    name="String to Literal",
    key="string-to-literal",
    category=Category.STRINGS,
    description="repr(text)",
)
def string_to_literal(text: str) -> str:
    return to_json(text)


@amendment(
    name="String Counter",
    key="string-counter",
    category=Category.STRINGS,
    description="Lists every character with its negative and positive index, to make counting indices easier",
)
def string_counter(text: str) -> str:
    length = len(text)
    return "\n".join(
        f"-{length - index} | {index}: {to_json(ch)}" for index, ch in enumerate(text)
    )


@amendment(
    name="Remove Duplicates",
    key="dupe-remover",
    category=Category.STRINGS,
    description="Removes duplicate lines, otherwise preserving order",
)
def remove_duplicates(text: str) -> str:
    return "\n".join(dict.fromkeys(text.split("\n")))


@amendment(
    name="HTML Escape",
    key="html-escape",
    category=Category.STRINGS,
    description="Escapes & < > \" ' as HTML entities and spaces as &nbsp; so whitespace survives rendering",
)
def html_escape(text: str) -> str:
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)


def _unescape_entity(match: re.Match) -> str:
    entity = match.group(0)
    if entity == "&nbsp;":
        return " "
    return html.unescape(entity)


@amendment(
    name="HTML Unescape",
    key="html-unescape",
    category=Category.STRINGS,
    description="Replaces HTML entities with the characters they stand for; &nbsp; becomes a plain space",
)
def html_unescape(text: str) -> str:
    return _HTML_ENTITY_RE.sub(_unescape_entity, text)


@amendment(
    name="URL Encode",
    key="url-encode",
    category=Category.STRINGS,
    description="Percent-encodes text like encodeURI, leaving URL structure characters intact",
    input_example="https://example.com/a b?q=ü",
)
def url_encode(text: str) -> str:
    return quote(text, safe=_URI_SAFE)


@amendment(
    name="URL Decode",
    key="url-decode",
    category=Category.STRINGS,
    description="Decodes percent-encoded UTF-8 sequences",
)
def url_decode(text: str) -> str:
    try:
        return unquote(text, errors="strict")
    except UnicodeDecodeError as e:
        return f"Invalid URI: {e.reason} | {text}"


TRANSFORMS = (
    strip_surrounding_quotes,
    to_upper,
    to_lower,
    literal_to_string,
    string_to_literal,
    remove_duplicates,
    string_counter,
    strip_lines,
    strip,
    html_escape,
    html_unescape,
    url_encode,
    url_decode,
)
