from __future__ import annotations

import base64
import binascii
import io
import logging

import pandas as pd

from csv_browser.core.dataset import Dataset, validate_columns
from csv_browser.core.exceptions import CsvParseError, DatasetSchemaError

logger = logging.getLogger(__name__)


def decode_upload_contents(contents: str) -> bytes:
    """
    Decode the data URL produced by dcc.Upload
    ("data:text/csv;base64,<payload>") into raw bytes.
    """
    try:
        _content_type, content_string = contents.split(",", 1)
        return base64.b64decode(content_string, validate=True)
    except (ValueError, binascii.Error) as e:
        raise CsvParseError(f"Corrupted upload data: {e}") from e


def parse_csv_text(text: str) -> Dataset:
    """
    Parse delimited text into a Dataset.

    The first non-blank line is the header, blank lines are skipped and every
    cell is kept as the literal string from the file ("NA", "null" etc. are
    not turned into missing values).
    """
    try:
        frame = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as e:
        raise CsvParseError("File is empty.") from e
    except (pd.errors.ParserError, ValueError) as e:
        raise CsvParseError(f"Malformed CSV: {e}") from e

    header = [str(v) for v in frame.iloc[0].tolist()]
    try:
        columns = validate_columns(header)
    except DatasetSchemaError as e:
        raise CsvParseError(f"Invalid header: {e}") from e

    body = frame.iloc[1:]

    # Short rows are padded with NaN by pandas; explicit empty cells stay ""
    short = body.isna().any(axis=1)
    if short.any():
        record_no = int(short.to_numpy().nonzero()[0][0]) + 1
        raise CsvParseError(f"Record {record_no} has fewer fields than the header.")

    body = body.set_axis(list(columns), axis=1)
    return Dataset.from_records(body.to_dict("records"), columns=columns)


def parse_csv_bytes(data: bytes) -> Dataset:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CsvParseError("File is not valid UTF-8 text.") from e
    return parse_csv_text(text)


def parse_upload(contents: str, filename: str, max_bytes: int) -> Dataset:
    """Full upload path: data URL -> bytes -> Dataset, with a size guard."""
    decoded = decode_upload_contents(contents)
    if len(decoded) > max_bytes:
        raise CsvParseError(f"File '{filename}' exceeds the {max_bytes} byte limit.")

    dataset = parse_csv_bytes(decoded)
    logger.info(
        "Parsed upload",
        extra={"csv_filename": filename, "rows": len(dataset), "columns": len(dataset.columns)},
    )
    return dataset
