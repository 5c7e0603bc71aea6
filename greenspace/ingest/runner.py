"""Ingestion orchestration with fail-soft semantics."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from greenspace.common.config_loader import ConfigBundle
from greenspace.common.constants import DEFAULT_DELIMITER, DEFAULT_LAST_UPDATED, MAX_RECORDS
from greenspace.common.errors import RetrievalError
from greenspace.common.http import HttpClient
from greenspace.common.logging import get_logger, log_event
from greenspace.common.models import Park, RawRow
from greenspace.common.time_utils import elapsed_ms
from greenspace.ingest.fetch import fetch_raw_text
from greenspace.ingest.parse import parse_delimited
from greenspace.ingest.sample import fallback_rows
from greenspace.pipeline.derive import derive_parks
from greenspace.pipeline.normalise import run_normalise


@dataclass(frozen=True)
class IngestResult:
    parks: tuple[Park, ...]
    source: str
    used_fallback: bool
    rows_in: int
    dropped_unnamed: int
    truncated: int


def _build(
    rows: list[RawRow],
    *,
    source: str,
    used_fallback: bool,
    bundle: ConfigBundle | None,
) -> IngestResult:
    if bundle is not None:
        normalised = run_normalise(
            rows,
            fields=bundle.fields,
            max_records=bundle.max_records,
            crs_config=bundle.crs,
        )
        last_updated = bundle.last_updated
        rating_profile = bundle.rating_profile()
    else:
        normalised = run_normalise(rows, max_records=MAX_RECORDS)
        last_updated = DEFAULT_LAST_UPDATED
        rating_profile = None

    parks = derive_parks(normalised.parks, last_updated=last_updated, rating_profile=rating_profile)
    return IngestResult(
        parks=tuple(parks),
        source=source,
        used_fallback=used_fallback,
        rows_in=normalised.rows_in,
        dropped_unnamed=normalised.dropped_unnamed,
        truncated=normalised.truncated,
    )


def build_fallback(bundle: ConfigBundle | None = None) -> IngestResult:
    return _build(fallback_rows(), source="builtin:fallback", used_fallback=True, bundle=bundle)


def run_ingest(
    source: str | Path | None = None,
    *,
    bundle: ConfigBundle | None = None,
    client: HttpClient | None = None,
    logger: logging.Logger | None = None,
    run_id: str | None = None,
) -> IngestResult:
    """Fetch, parse, normalise and derive one snapshot.

    Retrieval failures and empty payloads never escape: the built-in record
    set is served instead and ``used_fallback`` is set on the result.
    """
    logger = logger or get_logger()
    if source is None and bundle is not None:
        source = bundle.source
    source_label = str(source) if source is not None else "unset"
    delimiter = bundle.delimiter if bundle is not None else DEFAULT_DELIMITER
    started_at = time.monotonic()

    log_event(logger, "load start", run_id=run_id, stage="fetch", source=source_label, event="LOAD_START", status="ok")

    try:
        if source is None:
            raise RetrievalError("No dataset source configured")
        text = fetch_raw_text(source, client=client)
    except RetrievalError as exc:
        log_event(
            logger,
            f"retrieval failed: {exc}",
            run_id=run_id,
            stage="fetch",
            source=source_label,
            event="FETCH_FAIL",
            status="warn",
            error_code=exc.error_code,
        )
        text = ""

    rows = parse_delimited(text, delimiter)
    if rows:
        result = _build(rows, source=source_label, used_fallback=False, bundle=bundle)
    else:
        log_event(
            logger,
            "no usable rows, serving built-in record set",
            run_id=run_id,
            stage="parse",
            source=source_label,
            event="FALLBACK_USED",
            status="warn",
            rows_in=0,
        )
        result = build_fallback(bundle)

    if result.dropped_unnamed:
        log_event(
            logger,
            f"dropped {result.dropped_unnamed} rows without a site name",
            run_id=run_id,
            stage="normalise",
            source=result.source,
            event="ROWS_DROPPED",
            status="ok",
            rows_in=result.rows_in,
        )

    log_event(
        logger,
        "load end",
        run_id=run_id,
        stage="derive",
        source=result.source,
        event="LOAD_END",
        status="ok",
        duration_ms=elapsed_ms(started_at),
        rows_in=result.rows_in,
        rows_out=len(result.parks),
    )
    return result
