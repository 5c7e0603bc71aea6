"""Flat delimited-text parser.

Fields are split on a fixed delimiter with no quoting or escaping, which is
how the open data export is laid out.
"""

from __future__ import annotations

from greenspace.common.constants import DEFAULT_DELIMITER
from greenspace.common.models import RawRow


def _split(line: str, delimiter: str) -> list[str]:
    return [value.strip() for value in line.split(delimiter)]


def parse_delimited(text: str | None, delimiter: str = DEFAULT_DELIMITER) -> list[RawRow]:
    if not text or not text.strip():
        return []

    lines = text.strip().splitlines()
    headers = _split(lines[0].lstrip("\ufeff"), delimiter)

    rows: list[RawRow] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        values = _split(line, delimiter)
        rows.append({header: (values[idx] if idx < len(values) else "") for idx, header in enumerate(headers)})
    return rows
