"""
Symbol Search Pipeline - Filter catalogs off the UI thread, publish on it.

Every filter change bumps a generation counter and submits a computation
to a worker pool. Results come back through a dispatcher onto the UI
context, where anything but the latest generation is dropped. Observers
only ever see complete section lists for the most recent filter.

Usage:
    pipeline = SymbolSearchPipeline(dispatcher=GLibDispatcher())
    subscription = pipeline.subscribe(lambda sections: render(sections))
    pipeline.start()
    pipeline.set_filter("home")
    ...
    pipeline.stop()
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from loguru import logger

from symbolic.search.catalog import Catalog, default_catalogs
from symbolic.search.dispatch import Dispatcher, ImmediateDispatcher
from symbolic.search.symbols import Matcher, Symbol, SymbolSetIdentifier, filter_symbols, matches

Observer = Callable[[list["Section"]], None]


@dataclass(frozen=True)
class Section:
    """Filtered symbols from one catalog."""
    id: SymbolSetIdentifier
    symbols: tuple[Symbol, ...]

    @property
    def name(self) -> str:
        return self.id.display_name


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the current filter and its published sections."""
    filter: str = ""
    sections: tuple[Section, ...] = ()


def compute_sections(catalogs: Sequence[Catalog], text: str,
                     matcher: Matcher = matches) -> list[Section]:
    """
    Filter every catalog by text, in catalog priority order.

    Catalogs without a single match are left out.
    """
    sections = []
    for catalog in catalogs:
        symbols = filter_symbols(catalog.symbols, text, matcher)
        if symbols:
            sections.append(Section(id=catalog.identifier, symbols=symbols))
    return sections


class Subscription:
    """Handle returned by subscribe(); cancel() detaches one observer."""

    def __init__(self, pipeline: "SymbolSearchPipeline", token: int):
        self._pipeline = pipeline
        self._token = token

    def cancel(self) -> None:
        self._pipeline._observers.pop(self._token, None)

    @property
    def active(self) -> bool:
        return self._token in self._pipeline._observers


class SymbolSearchPipeline:
    """
    Keeps filtered symbol sections consistent with the latest filter.

    set_filter(), subscribe(), start() and stop() must be called from the
    context the dispatcher publishes on.
    """

    def __init__(
        self,
        catalogs: Optional[Sequence[Catalog]] = None,
        dispatcher: Optional[Dispatcher] = None,
        max_workers: int = 4,
        matcher: Matcher = matches,
    ):
        self.catalogs = list(catalogs) if catalogs is not None else default_catalogs()
        self.dispatcher = dispatcher if dispatcher is not None else ImmediateDispatcher()
        self.max_workers = max_workers
        self.matcher = matcher

        self._filter = ""
        self._sections: tuple[Section, ...] = ()
        self._observers: dict[int, Observer] = {}
        self._next_token = 0

        self._executor: Optional[ThreadPoolExecutor] = None
        self._generation = 0  # Generation counter to drop stale results
        self._publish_lock = threading.RLock()
        self.last_error: Optional[Exception] = None

    @property
    def filter(self) -> str:
        return self._filter

    @property
    def sections(self) -> list[Section]:
        return list(self._sections)

    @property
    def state(self) -> SearchState:
        return SearchState(filter=self._filter, sections=self._sections)

    @property
    def running(self) -> bool:
        return self._executor is not None

    def set_filter(self, text: str) -> None:
        """Update the filter and recompute sections in the background."""
        self._filter = text
        if self.running:
            self._schedule(text)

    def subscribe(self, observer: Observer) -> Subscription:
        """Register an observer called with the section list on every change."""
        token = self._next_token
        self._next_token += 1
        self._observers[token] = observer
        return Subscription(self, token)

    def start(self) -> None:
        """Begin reacting to filter changes, starting with the current filter."""
        if self.running:
            return
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="symbol-search",
        )
        logger.debug(f"Symbol search started with {len(self.catalogs)} catalogs")
        self._schedule(self._filter)

    def stop(self) -> None:
        """Abandon in-flight work and detach every observer."""
        self._generation += 1
        self._observers.clear()
        if self._executor is None:
            return
        executor, self._executor = self._executor, None
        executor.shutdown(wait=False, cancel_futures=True)
        logger.debug("Symbol search stopped")

    def _schedule(self, text: str) -> None:
        self._generation += 1
        gen = self._generation
        future = self._executor.submit(compute_sections, self.catalogs, text, self.matcher)
        future.add_done_callback(lambda f: self.dispatcher.dispatch(self._publish, f, gen, text))

    def _publish(self, future: Future, gen: int, text: str) -> None:
        """
        Apply a finished computation if it is still the latest.

        Publications are serialized, so a dispatcher that runs callbacks
        on worker threads still delivers each settled filter once.
        """
        with self._publish_lock:
            if gen != self._generation or not self.running:
                logger.debug(f"Dropping stale search results for '{text}'")
                return
            if future.cancelled():
                return

            try:
                sections = tuple(future.result())
            except Exception as e:
                self.last_error = e
                logger.exception(f"Symbol search failed for '{text}'")
                raise

            self._sections = sections
            for observer in list(self._observers.values()):
                # A newer filter or stop() supersedes this result mid-delivery
                if gen != self._generation:
                    logger.debug(f"Search results for '{text}' superseded during delivery")
                    return
                observer(list(sections))
