"""Property search session.

A session owns one immutable catalog and one filter state, and tracks
whether a search has been run. Create one session per user; sessions share
nothing.

State machine::

    NOT_SEARCHED --perform_search--> SEARCHING --> SEARCHED
    SEARCHED --update_filter--> SEARCHED        (recomputed immediately)
    *        --clear_filters--> NOT_SEARCHED    (defaults, full catalog)
    SEARCHING --cancelled--> last settled state (results unchanged)

Every search and every recompute takes a new sequence number. A delayed
search only publishes its result if its number is still the latest, so a
later search or filter change always wins.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from procv.core.exceptions import InvalidParameterError
from procv.core.logging import get_logger
from procv.core.settings import get_settings
from procv.domain.models.filters import PropertyFilters
from procv.domain.models.property import Property
from procv.domain.search.filtering import filter_properties

log = get_logger(__name__)


class SearchState(Enum):
    """Lifecycle of a search session."""
    NOT_SEARCHED = "not_searched"
    SEARCHING = "searching"
    SEARCHED = "searched"


@dataclass(frozen=True)
class SearchSnapshot:
    """Point-in-time view of a session for display."""

    state: SearchState
    filters: PropertyFilters
    results: tuple[Property, ...]

    @property
    def results_count(self) -> int:
        return len(self.results)

    @property
    def search_performed(self) -> bool:
        return self.state is not SearchState.NOT_SEARCHED

    @property
    def is_loading(self) -> bool:
        return self.state is SearchState.SEARCHING


class PropertySearchSession:
    """Filter/sort state and derived results for one user."""

    def __init__(
        self,
        catalog: Iterable[Property],
        delay_seconds: float | None = None,
    ):
        """Initialize a session.

        Args:
            catalog: Listings to search, in catalog order
            delay_seconds: Simulated latency of perform_search_async.
                Defaults to the PROCV_SEARCH_DELAY_SECONDS setting.
        """
        self._catalog: tuple[Property, ...] = tuple(catalog)
        self._filters = PropertyFilters()
        self._results: tuple[Property, ...] = self._catalog
        self._state = SearchState.NOT_SEARCHED
        # Last non-transient state, restored when a pending search is cancelled
        self._settled_state = SearchState.NOT_SEARCHED
        self._sequence = 0
        if delay_seconds is None:
            delay_seconds = get_settings().search_delay_seconds
        self.delay_seconds = delay_seconds
        log.debug("search_session_created", catalog_size=len(self._catalog))

    # --- Read access ---

    @property
    def catalog(self) -> tuple[Property, ...]:
        return self._catalog

    @property
    def filters(self) -> PropertyFilters:
        """Copy of the current filter state."""
        return self._filters.model_copy()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def results(self) -> tuple[Property, ...]:
        return self._results

    @property
    def results_count(self) -> int:
        return len(self._results)

    @property
    def search_performed(self) -> bool:
        return self._state is not SearchState.NOT_SEARCHED

    @property
    def is_loading(self) -> bool:
        return self._state is SearchState.SEARCHING

    def snapshot(self) -> SearchSnapshot:
        """Freeze the current state for display collaborators."""
        return SearchSnapshot(
            state=self._state,
            filters=self._filters.model_copy(),
            results=self._results,
        )

    # --- Mutations ---

    def update_filter(self, key: str, value: Any) -> None:
        """Set a single filter field.

        Once a search has been performed the results are recomputed
        immediately; before that only the filter state changes.

        Args:
            key: Attribute name (``min_price``) or camelCase alias (``minPrice``)
            value: New value

        Raises:
            InvalidParameterError: If the key is unknown or the value does
                not validate
        """
        field = PropertyFilters.field_for(key)
        try:
            setattr(self._filters, field, value)
        except ValidationError as e:
            raise InvalidParameterError(key, value, e.errors()[0]["msg"]) from e

        if self._state is SearchState.NOT_SEARCHED:
            return

        seq = self._next_sequence()
        self._publish(seq, tuple(filter_properties(self._catalog, self._filters)))
        log.debug("filter_updated", field=field, results=len(self._results))

    def clear_filters(self) -> None:
        """Reset filters to defaults and show the full catalog unsearched."""
        self._next_sequence()
        self._filters = PropertyFilters()
        self._results = self._catalog
        self._state = SearchState.NOT_SEARCHED
        self._settled_state = SearchState.NOT_SEARCHED
        log.info("filters_cleared", catalog_size=len(self._catalog))

    def perform_search(self) -> tuple[Property, ...]:
        """Run a search synchronously.

        Returns:
            The matching listings
        """
        seq = self._next_sequence()
        self._state = SearchState.SEARCHING
        self._publish(seq, tuple(filter_properties(self._catalog, self._filters)))
        log.info("search_performed", sequence=seq, results=len(self._results))
        return self._results

    async def perform_search_async(self, delay: float | None = None) -> bool:
        """Run a search after a simulated network delay.

        The filter state is captured when the call is made. If another
        search, a filter update or a clear happens before the delay
        elapses, this search's result is discarded.

        Args:
            delay: Seconds to wait, defaults to ``delay_seconds``

        Returns:
            True if the result was published, False if it was superseded

        Raises:
            asyncio.CancelledError: If the task is cancelled while waiting.
                The session goes back to its state before the call.
        """
        seq = self._next_sequence()
        self._state = SearchState.SEARCHING
        snapshot = self._filters.model_copy()

        try:
            await asyncio.sleep(self.delay_seconds if delay is None else delay)
        except asyncio.CancelledError:
            if seq == self._sequence:
                self._state = self._settled_state
            log.debug("search_cancelled", sequence=seq, state=self._state.value)
            raise

        if seq != self._sequence:
            log.debug("search_superseded", sequence=seq, latest=self._sequence)
            return False

        self._publish(seq, tuple(filter_properties(self._catalog, snapshot)))
        log.info("search_performed", sequence=seq, results=len(self._results))
        return True

    # --- Internals ---

    def _next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def _publish(self, seq: int, results: tuple[Property, ...]) -> None:
        if seq != self._sequence:
            return
        self._results = results
        self._state = SearchState.SEARCHED
        self._settled_state = SearchState.SEARCHED
