"""Delimited-text conversions: CSV, TSV, JSON, YAML and table markup."""

import json
import re

import yaml

from textamender.transforms.base import Category, amendment
from textamender.transforms.catalog.values import (
    format_cell,
    infer_scalar,
    is_numeric,
    key_value_rows,
    parse_float_prefix,
    rows_to_csv,
    split_rows,
    to_json,
)

_FIRST_NUMBER_RE = re.compile(r"-?\d+(\.\d+)?")


@amendment(
    name="TSV to CSV",
    key="tsv-to-csv",
    category=Category.TABULAR,
    description="Converts Tab-Separated-Value text into CSV. This assumes that no cell contains commas.",
    input_label="TSV",
)
def tsv_to_csv(text: str) -> str:
    return text.replace("\t", ",")


@amendment(
    name="CSV to TSV",
    key="csv-to-tsv",
    category=Category.TABULAR,
    description="Converts Comma-Separated-Value text into TSV. This assumes that no cell contains commas.",
    input_label="CSV",
)
def csv_to_tsv(text: str) -> str:
    return text.replace(",", "\t")


def _key_value_json(text: str, delimiter: str) -> str:
    return to_json(
        {key: infer_scalar(value) for key, value in key_value_rows(text, delimiter)}
    )


_KEY_VALUE_DESCRIPTION = (
    "Converts two-column {fmt} into JSON. The first column holds the keys, "
    "which are always strings; the second holds the values. Numbers are "
    "converted where possible, TRUE/FALSE (case-insensitive) become booleans "
    "and blank values become null. Keys and values are trimmed first."
)


@amendment(
    name="CSV to JSON Blank Null",
    key="csv-to-json",
    category=Category.TABULAR,
    description=_KEY_VALUE_DESCRIPTION.format(fmt="CSV"),
    input_label="Key/value CSV",
    input_example="x,1\ny,true\nz,",
)
def csv_to_json(text: str) -> str:
    return _key_value_json(text, ",")


@amendment(
    name="TSV to JSON Blank Null",
    key="tsv-to-json",
    category=Category.TABULAR,
    description=_KEY_VALUE_DESCRIPTION.format(fmt="TSV"),
    input_label="Key/value TSV",
)
def tsv_to_json(text: str) -> str:
    return _key_value_json(text, "\t")


@amendment(
    name="CSV to JSON Strings only",
    key="csv-to-json-strings",
    category=Category.TABULAR,
    description="Converts two-column CSV into JSON. First column are the keys, second column are the values. Everything remains a string.",
    input_label="Key/value CSV",
)
def csv_to_json_strings(text: str) -> str:
    return to_json(dict(key_value_rows(text)))


@amendment(
    name="CSV to YAML",
    key="csv-to-yaml",
    category=Category.TABULAR,
    description="Converts two-column CSV into a YAML mapping, inferring numbers, booleans and nulls like CSV to JSON.",
    input_label="Key/value CSV",
)
def csv_to_yaml(text: str) -> str:
    mapping = {key: infer_scalar(value) for key, value in key_value_rows(text)}
    return yaml.safe_dump(
        mapping, default_flow_style=False, sort_keys=False, allow_unicode=True
    )


@amendment(
    name="Space to Tabs",
    key="space-to-tabs",
    category=Category.TABULAR,
    description="Any run of four or more spaces becomes one tab",
)
def space_to_tabs(text: str) -> str:
    return re.sub(r" {4,}", "\t", text)


@amendment(
    name="Extract Number From CSV",
    key="extract-number-from-csv",
    category=Category.TABULAR,
    description='Replaces every cell with the first number it contains. A cell holding "val = 333" becomes 333; cells without a number become blank.',
    input_label="CSV",
)
def extract_number_from_csv(text: str) -> str:
    def first_number(cell: str) -> str:
        match = _FIRST_NUMBER_RE.search(cell)
        return match.group(0) if match else ""

    return "\n".join(
        ",".join(first_number(cell) for cell in line.split(","))
        for line in text.split("\n")
    )


@amendment(
    name="Remove TEMP and blank columns from CSV",
    key="select-from-csv",
    category=Category.TABULAR,
    description="Removes all columns whose header is blank or starts with TEMP (case sensitive)",
    input_label="CSV with header",
)
def select_from_csv(text: str) -> str:
    rows = split_rows(text)
    header = rows[0]
    dropped = {
        index
        for index, cell in enumerate(header)
        if cell == "" or cell.startswith("TEMP")
    }
    return rows_to_csv(
        [[cell for index, cell in enumerate(row) if index not in dropped] for row in rows]
    )


def _padded_rows(text: str) -> tuple[list[list[str]], int]:
    rows = split_rows(text)
    width = max(len(row) for row in rows)
    return [row + [""] * (width - len(row)) for row in rows], width


@amendment(
    name="To Markdown Table",
    key="md-tbl",
    category=Category.TABULAR,
    description="Converts a CSV to a Markdown table; the first row is the header",
    input_label="CSV",
)
def to_markdown_table(text: str) -> str:
    rows, width = _padded_rows(text)
    table = ""
    for index, row in enumerate(rows):
        table += "| " + " | ".join(row) + " |\n"
        if index == 0:
            table += "| " + "--- |" * width + "\n"
    return table


@amendment(
    name="To LaTeX Table",
    key="tex-tbl",
    category=Category.TABULAR,
    description="Converts a CSV to a LaTeX tabular; the first row is separated by an hline",
    input_label="CSV",
)
def to_latex_table(text: str) -> str:
    rows, width = _padded_rows(text)
    table = "\\begin{tabular}{" + "c " * width + "}\n"
    for index, row in enumerate(rows):
        table += " & ".join(row) + " \\\\\n"
        if index == 0:
            table += "\\hline\n"
    table += "\\end{tabular}"
    return table


@amendment(
    name="CSV to JSON Rows",
    key="csv-to-json-real",
    category=Category.TABULAR,
    description="Converts a CSV with a header into a JSON array with one object per row. Column types are inferred from the first data row; unparseable numbers become 0.",
    input_label="CSV with header",
)
def csv_to_json_rows(text: str) -> str:
    lines = text.split("\n")
    if len(lines) < 2:
        return "Invalid input: expected a header row and at least one data row"

    headers = lines[0].split(",")
    numeric = [is_numeric(cell) for cell in lines[1].split(",")]
    records = []
    for line in lines[1:]:
        if not line.strip():
            continue
        cells = line.split(",")
        record = {}
        for index, header in enumerate(headers):
            cell = cells[index] if index < len(cells) else None
            if index < len(numeric) and numeric[index]:
                record[header] = parse_float_prefix(cell or "")
            elif cell is not None:
                record[header] = cell
        records.append(record)
    return to_json(records)


@amendment(
    name="JSON 2D list to CSV",
    key="json-2d-csv",
    category=Category.TABULAR,
    description="Converts a 2D JSON array to a CSV, padding short rows",
    input_label="JSON 2D array",
    input_example='[["a", "b"], [1, 2]]',
)
def json_2d_list_to_csv(text: str) -> str:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return "Invalid JSON"

    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        return "Not a 2D array"
    if not data:
        return ""

    width = max(len(row) for row in data)
    return "\n".join(
        ",".join(format_cell(cell) for cell in row + [""] * (width - len(row)))
        for row in data
    )


TRANSFORMS = (
    tsv_to_csv,
    csv_to_tsv,
    tsv_to_json,
    csv_to_json,
    csv_to_json_strings,
    csv_to_yaml,
    space_to_tabs,
    extract_number_from_csv,
    select_from_csv,
    to_markdown_table,
    to_latex_table,
    csv_to_json_rows,
    json_2d_list_to_csv,
)
