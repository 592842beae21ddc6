"""
import_engine.file_parser - Turn an uploaded file into raw row dicts.

Responsibilities:
  • Format detection from the file name's extension (csv / xlsx)
  • BOM removal, leading blank lines and header whitespace stripping
  • Returns a lazy iterator of {column: text} dicts, one per data row

Malformed content raises ParseError from parse_file() itself, before the
caller has seen a single row.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Iterator

import openpyxl

from import_engine.errors import ParseError, UnsupportedFormat

logger = logging.getLogger(__name__)

RawRow = dict[str, str]


def parse_file(content: bytes, file_name: str) -> Iterator[RawRow]:
    """
    Detect the format from *file_name* and return an iterator of raw rows.

    Raises UnsupportedFormat for anything but .csv / .xlsx and
    ParseError when the content cannot be decoded.
    """
    ext = file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""
    if ext == "xlsx":
        return _parse_xlsx(content)
    if ext == "csv":
        _check_csv(content)
        return _iter_csv(content)
    raise UnsupportedFormat(f"Unsupported file type: {file_name!r}")


# ── CSV ────────────────────────────────────────────────────────────────

def _open_text(content: bytes) -> io.TextIOWrapper:
    # utf-8-sig strips a leading BOM; decoding happens chunk by chunk
    return io.TextIOWrapper(
        io.BytesIO(content), encoding="utf-8-sig", errors="strict", newline="",
    )


def _check_csv(content: bytes) -> None:
    """Stream through the whole file once so bad input fails up front."""
    try:
        for _ in csv.reader(_open_text(content), strict=True):
            pass
    except (csv.Error, UnicodeDecodeError) as exc:
        raise ParseError(f"Could not parse CSV: {exc}") from exc


def _iter_csv(content: bytes) -> Iterator[RawRow]:
    reader = csv.reader(_open_text(content), strict=True)
    try:
        # header is the first line with any text; blank lines before it are ignored
        header = next((r for r in reader if any(c.strip() for c in r)), None)
        if header is None:
            return
        fieldnames = [h.strip() for h in header]
        for values in reader:
            if not values:
                continue
            # zip drops surplus cells and leaves missing trailing ones absent
            yield {k: v for k, v in zip(fieldnames, values) if k}
    except (csv.Error, UnicodeDecodeError) as exc:
        raise ParseError(f"Could not parse CSV: {exc}") from exc


# ── XLSX ───────────────────────────────────────────────────────────────

def _parse_xlsx(content: bytes) -> Iterator[RawRow]:
    """Decode the whole workbook and read the first sheet only."""
    try:
        wb = openpyxl.load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except Exception as exc:
        raise ParseError(f"Could not read workbook: {exc}") from exc

    try:
        sheet = wb.worksheets[0]
        rows = list(sheet.iter_rows(values_only=True))
    except Exception as exc:
        raise ParseError(f"Could not read workbook: {exc}") from exc
    finally:
        wb.close()

    if not rows:
        return iter(())

    headers = [_cell_text(v).strip() for v in rows[0]]
    records: list[RawRow] = []
    for values in rows[1:]:
        record = {
            header: _cell_text(value)
            for header, value in zip(headers, values)
            if header and value is not None and _cell_text(value) != ""
        }
        if record:
            records.append(record)

    logger.debug("Workbook sheet %r: %d data rows", sheet.title, len(records))
    return iter(records)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
