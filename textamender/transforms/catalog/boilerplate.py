"""Line lists to and from JSON and YAML literals."""

import json

import yaml

from textamender.transforms.base import Category, amendment
from textamender.transforms.catalog.values import (
    format_cell,
    infer_scalar,
    parse_float_prefix,
    to_json,
)


@amendment(
    name="Text to List",
    key="text-to-list",
    category=Category.BOILERPLATE,
    description="print(text.split('\\n'))",
    input_label="Text",
)
def text_to_list(text: str) -> str:
    return to_json(text.strip().split("\n"))


@amendment(
    name="Numbers to List",
    key="num-to-list",
    category=Category.BOILERPLATE,
    description="print([float(n) for n in text.split('\\n')]); 0 for invalid",
    input_label="One number per line",
)
def numbers_to_list(text: str) -> str:
    return to_json([parse_float_prefix(line) for line in text.strip().split("\n")])


@amendment(
    name="JSON List to Lines",
    key="json-to-lines",
    category=Category.BOILERPLATE,
    description="print('\\n'.join(json.loads(text)))",
    input_label="JSON array",
    input_example='["a", "b", 3]',
)
def json_to_lines(text: str) -> str:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return "Invalid JSON"
    if not isinstance(data, list):
        return "Not a JSON array"
    return "\n".join(format_cell(item) for item in data)


@amendment(
    name="Text to YAML List",
    key="text-to-yaml-list",
    category=Category.BOILERPLATE,
    description="Turns each line into a YAML sequence item. Blank lines become null, TRUE/FALSE become booleans and numbers are converted where possible.",
    input_label="Text",
)
def text_to_yaml_list(text: str) -> str:
    items = [infer_scalar(line) for line in text.strip().split("\n")]
    return yaml.safe_dump(items, default_flow_style=False, allow_unicode=True)


@amendment(
    name="YAML List to Lines",
    key="yaml-to-lines",
    category=Category.BOILERPLATE,
    description="Writes each item of a YAML sequence on its own line",
    input_label="YAML sequence",
    input_example="- a\n- 2\n- true",
)
def yaml_to_lines(text: str) -> str:
    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, RecursionError):
        return "Invalid YAML"
    if not isinstance(data, list):
        return "Not a YAML sequence"
    return "\n".join(format_cell(item) for item in data)


TRANSFORMS = (
    text_to_list,
    numbers_to_list,
    json_to_lines,
    text_to_yaml_list,
    yaml_to_lines,
)
