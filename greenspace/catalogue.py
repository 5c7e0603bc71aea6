"""In-memory park catalogue: snapshot ownership, query state and paging.

The catalogue holds exactly one immutable ``Snapshot`` at a time. Loads are
ticketed so that only the most recently requested load can install its
result; anything that finishes after being superseded is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from greenspace.common.config_loader import ConfigBundle
from greenspace.common.constants import ALL_FACET, PAGE_SIZE
from greenspace.common.http import HttpClient
from greenspace.common.logging import get_logger, log_event
from greenspace.common.models import FilterOption, Park, ParkStats
from greenspace.ingest.runner import IngestResult, run_ingest
from greenspace.pipeline.export import export_csv
from greenspace.pipeline.facets import build_facets
from greenspace.pipeline.pagination import PaginationCursor
from greenspace.pipeline.query import filter_parks
from greenspace.pipeline.stats import compute_stats


@dataclass(frozen=True)
class Snapshot:
    load_id: int
    parks: tuple[Park, ...]
    facets: tuple[FilterOption, ...]
    stats: ParkStats
    source: str
    used_fallback: bool

    @classmethod
    def from_ingest(cls, load_id: int, result: IngestResult) -> "Snapshot":
        parks = tuple(result.parks)
        return cls(
            load_id=load_id,
            parks=parks,
            facets=tuple(build_facets(parks)),
            stats=compute_stats(parks),
            source=result.source,
            used_fallback=result.used_fallback,
        )


@dataclass(frozen=True)
class QueryState:
    search_term: str = ""
    facet: str = ALL_FACET
    visible_count: int = 0


class ParkCatalogue:
    def __init__(
        self,
        *,
        bundle: ConfigBundle | None = None,
        client: HttpClient | None = None,
        logger: logging.Logger | None = None,
        run_id: str | None = None,
        page_size: int | None = None,
    ) -> None:
        self.bundle = bundle
        self.client = client
        self.logger = logger or get_logger()
        self.run_id = run_id
        if page_size is None:
            page_size = bundle.page_size if bundle is not None else PAGE_SIZE

        self._snapshot: Snapshot | None = None
        self._requested = 0
        self._installed = 0
        self._settled = 0
        self._search_term = ""
        self._facet = ALL_FACET
        self._filtered: tuple[Park, ...] = ()
        self._cursor = PaginationCursor(page_size)

    # Loading

    def begin_load(self) -> int:
        self._requested += 1
        return self._requested

    def complete_load(self, ticket: int, result: IngestResult) -> bool:
        if ticket != self._requested or ticket <= self._installed:
            log_event(
                self.logger,
                f"discarding superseded load {ticket}; latest is {self._requested}",
                run_id=self.run_id,
                stage="install",
                source=result.source,
                event="LOAD_SUPERSEDED",
                status="ok",
            )
            return False

        self._snapshot = Snapshot.from_ingest(ticket, result)
        self._installed = ticket
        self._settled = ticket
        self._refresh()
        return True

    def reload(self, source: str | Path | None = None) -> bool:
        ticket = self.begin_load()
        try:
            result = run_ingest(
                source,
                bundle=self.bundle,
                client=self.client,
                logger=self.logger,
                run_id=self.run_id,
            )
            return self.complete_load(ticket, result)
        finally:
            # A failed latest load still ends the loading state.
            if ticket == self._requested:
                self._settled = max(self._settled, ticket)

    @property
    def is_loading(self) -> bool:
        return self._requested != self._settled

    @property
    def snapshot(self) -> Snapshot | None:
        return self._snapshot

    # Query state

    def _refresh(self) -> None:
        parks = self._snapshot.parks if self._snapshot is not None else ()
        self._filtered = tuple(filter_parks(parks, self._search_term, self._facet))
        self._cursor.reset(len(self._filtered))

    def set_search(self, search_term: str) -> None:
        if search_term == self._search_term:
            return
        self._search_term = search_term
        self._refresh()

    def set_facet(self, facet: str) -> None:
        if facet == self._facet:
            return
        self._facet = facet
        self._refresh()

    def load_more(self) -> int:
        return self._cursor.advance()

    @property
    def query_state(self) -> QueryState:
        return QueryState(
            search_term=self._search_term,
            facet=self._facet,
            visible_count=self._cursor.visible_count,
        )

    # Outputs

    @property
    def parks(self) -> tuple[Park, ...]:
        return self._snapshot.parks if self._snapshot is not None else ()

    @property
    def facets(self) -> list[FilterOption]:
        if self._snapshot is None:
            return build_facets(())
        return list(self._snapshot.facets)

    @property
    def stats(self) -> ParkStats:
        if self._snapshot is None:
            return ParkStats.empty()
        return self._snapshot.stats

    @property
    def filtered(self) -> tuple[Park, ...]:
        return self._filtered

    @property
    def filtered_count(self) -> int:
        return len(self._filtered)

    @property
    def has_more(self) -> bool:
        return self._cursor.has_more

    def visible(self) -> list[Park]:
        return self._cursor.visible(self._filtered)

    def export_csv(self) -> str:
        return export_csv(self._filtered)
