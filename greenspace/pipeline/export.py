"""CSV export of a filtered result.

Rows go through ``csv.writer``, so a field containing a comma or a double
quote is wrapped in quotes (embedded quotes doubled) and every row reads back
as exactly five columns.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable

from greenspace.common.constants import EXPORT_HEADERS
from greenspace.common.models import Park
from greenspace.pipeline.numbers import format_number


def _serialize_row(park: Park) -> list[str]:
    return [
        park.site_name,
        park.type,
        f"{format_number(park.primary_measure)} {park.unit}",
        park.location,
        format_number(park.rating),
    ]


def export_csv(parks: Iterable[Park]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADERS)
    for park in parks:
        writer.writerow(_serialize_row(park))
    return buffer.getvalue()
