"""
In-memory todo registry.

The registry owns the ordered mapping from id to ``TodoItem`` and
implements the five service operations.  Every operation returns an
``Ok``/``Err`` result; expected failures (unknown id, full id space,
empty page) are never raised.

Ids are unsigned 16-bit integers handed out by a monotonic counter
starting at 0.  A deleted id is not handed out again until the counter
has walked the whole id space and wrapped around, at which point ids
still in use are skipped.  ``add`` fails only when every id is taken.

Items are kept in insertion order.  ``read_all`` pages through them
using a 1-based page number as the cursor; page 0 is treated as page 1.

Mutating operations hold the exclusive side of a ``ReadWriteLock``,
queries hold the shared side, so one registry instance can be used
from several worker threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Dict, List, Optional

from todo_registry_api.app.core.concurrency import ReadWriteLock
from todo_registry_api.app.core.config import ID_SPACE_SIZE, MAX_TODO_ID
from todo_registry_api.app.core.result import Err, Ok, Result


NOT_FOUND = "not found"
REGISTRY_FULL = "registry full"
DEFAULT_PAGE_SIZE = 10

logger = logging.getLogger(__name__)


@dataclass
class TodoItem:
    id: int
    text: str


@dataclass
class TodoPage:
    """One page of ``read_all`` output."""

    items: List[str] = field(default_factory=list)
    next: Optional[int] = None


def invalid_page(page: int) -> str:
    return f"Invalid Page {page}"


class TodoRegistry:
    """Process-wide collection of todo items.

    Parameters
    ----------
    capacity : int
        Number of ids available, counted from 0.  Defaults to the full
        16-bit id space (65536).
    page_size : int
        Number of items per ``read_all`` page.  It must be large enough
        that every page number, ``next`` included, fits in a nat16; a
        page size of 1 therefore needs a capacity below 65536.
    """

    def __init__(self, capacity: int = ID_SPACE_SIZE, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if not 1 <= capacity <= ID_SPACE_SIZE:
            raise ValueError(f"capacity must be between 1 and {ID_SPACE_SIZE}, got {capacity}")
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        # Page numbers travel as nat16, so the last page must fit in one.
        last_page = -(-capacity // page_size)
        if last_page > MAX_TODO_ID:
            raise ValueError(
                f"page_size {page_size} needs {last_page} pages for capacity {capacity}, "
                f"but page numbers stop at {MAX_TODO_ID}"
            )
        self._capacity = capacity
        self._page_size = page_size
        self._items: Dict[int, TodoItem] = {}
        self._next_id = 0
        self._lock = ReadWriteLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def page_size(self) -> int:
        return self._page_size

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)

    def __contains__(self, todo_id: object) -> bool:
        with self._lock.read_locked():
            return todo_id in self._items

    # ------------------------------------------------------------------
    # Update calls
    # ------------------------------------------------------------------
    def add(self, text: str) -> Result[int]:
        """Store ``text`` under a fresh id and return the id."""
        with self._lock.write_locked():
            todo_id = self._allocate_id()
            if todo_id is None:
                logger.debug("Registry full (%s items), rejecting add", self._capacity)
                return Err(REGISTRY_FULL)
            self._items[todo_id] = TodoItem(id=todo_id, text=text)
        logger.info("Created todo %s", todo_id)
        return Ok(todo_id)

    def update(self, todo_id: int, text: str) -> Result[None]:
        """Replace the text of an existing todo, keeping its position."""
        with self._lock.write_locked():
            item = self._items.get(todo_id)
            if item is None:
                logger.debug("Update of unknown todo %s", todo_id)
                return Err(NOT_FOUND)
            item.text = text
        logger.info("Updated todo %s", todo_id)
        return Ok()

    def delete(self, todo_id: int) -> Result[None]:
        with self._lock.write_locked():
            if self._items.pop(todo_id, None) is None:
                logger.debug("Delete of unknown todo %s", todo_id)
                return Err(NOT_FOUND)
        logger.info("Deleted todo %s", todo_id)
        return Ok()

    # ------------------------------------------------------------------
    # Query calls
    # ------------------------------------------------------------------
    def read(self, todo_id: int) -> Result[str]:
        with self._lock.read_locked():
            item = self._items.get(todo_id)
            if item is None:
                logger.debug("Read of unknown todo %s", todo_id)
                return Err(NOT_FOUND)
            return Ok(item.text)

    def read_all(self, page: int) -> Result[TodoPage]:
        """Return the texts on ``page`` plus the next page number, if any.

        Pages are 1-based and hold ``page_size`` items in insertion
        order.  ``next`` is ``None`` on the last page.  Asking for a
        page past the end, or any page of an empty registry, yields
        ``Err("Invalid Page <page>")``.
        """
        page = max(page, 1)
        start = (page - 1) * self._page_size
        with self._lock.read_locked():
            texts = [
                item.text
                for item in islice(self._items.values(), start, start + self._page_size)
            ]
            total = len(self._items)
        if not texts:
            logger.debug("Read of empty page %s (%s todos)", page, total)
            return Err(invalid_page(page))
        next_page = page + 1 if total > start + self._page_size else None
        return Ok(TodoPage(items=texts, next=next_page))

    def _allocate_id(self) -> Optional[int]:
        # Caller holds the write lock.
        if len(self._items) >= self._capacity:
            return None
        candidate = self._next_id
        while candidate in self._items:
            candidate = (candidate + 1) % self._capacity
        self._next_id = (candidate + 1) % self._capacity
        return candidate
