"""Linear undo/redo history of address book modifications.

- commit records a mutation that already happened and clears redo
- undo replays the inverse through the store; redo replays the original
- with max_size set, the oldest entry is dropped past max_size and can no
  longer be undone; the default keeps every entry
"""

import logging
from collections import deque

from contactbook.application.dto import (
    InvalidArgument,
    NoRedoAvailable,
    NoUndoAvailable,
    ReplayBatch,
    StoreError,
)
from contactbook.application.ports import AddressBookStore
from contactbook.domain import (
    AddPerson,
    DeletePerson,
    Modification,
    ReplaceAll,
    ReplacePerson,
)

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = None


class ModificationHistory:
    """Owns the undo and redo stacks for one store."""

    def __init__(
        self, store: AddressBookStore, max_size: int | None = DEFAULT_HISTORY_LIMIT
    ) -> None:
        if max_size is not None and max_size < 1:
            raise ValueError("History max_size must be >= 1 or None.")
        self._store = store
        self._undo: deque[Modification] = deque(maxlen=max_size)
        self._redo: list[Modification] = []

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def commit(self, modification: Modification) -> InvalidArgument | None:
        """Record an applied modification. Pending redos are discarded."""
        if modification is None:
            return InvalidArgument("modification is required")
        self._undo.append(modification)
        if self._redo:
            logger.debug("Commit discarded %d redo entries", len(self._redo))
        self._redo.clear()
        return None

    def undo(self) -> Modification | NoUndoAvailable | StoreError:
        """Revert the latest modification and return it."""
        if not self._undo:
            return NoUndoAvailable()
        modification = self._undo[-1]
        result = self._store.apply(modification.inverse())
        if not _applied(result):
            logger.warning("Undo of %s rejected by store: %s", modification, result)
            return result
        self._undo.pop()
        self._redo.append(modification)
        logger.info("Undid %s", modification.describe())
        return modification

    def redo(self) -> Modification | NoRedoAvailable | StoreError:
        """Re-apply the latest undone modification and return it."""
        if not self._redo:
            return NoRedoAvailable()
        modification = self._redo[-1]
        result = self._store.apply(modification)
        if not _applied(result):
            logger.warning("Redo of %s rejected by store: %s", modification, result)
            return result
        self._redo.pop()
        self._undo.append(modification)
        logger.info("Redid %s", modification.describe())
        return modification

    def undo_multiple(self, n: int) -> list[Modification] | InvalidArgument:
        """Undo up to n times; stops early when nothing is left. Never fails on depth."""
        batch = self.undo_batch(n)
        if isinstance(batch, InvalidArgument):
            return batch
        return list(batch.modifications)

    def redo_multiple(self, n: int) -> list[Modification] | InvalidArgument:
        """Redo up to n times; stops early when nothing is left. Never fails on depth."""
        batch = self.redo_batch(n)
        if isinstance(batch, InvalidArgument):
            return batch
        return list(batch.modifications)

    def undo_batch(self, n: int) -> ReplayBatch | InvalidArgument:
        """Like undo_multiple, but also reports a store failure that cut the batch short."""
        return self._repeat(self.undo, NoUndoAvailable, n)

    def redo_batch(self, n: int) -> ReplayBatch | InvalidArgument:
        """Like redo_multiple, but also reports a store failure that cut the batch short."""
        return self._repeat(self.redo, NoRedoAvailable, n)

    def _repeat(self, step, exhausted, n: int) -> ReplayBatch | InvalidArgument:
        if n is None or n < 0:
            return InvalidArgument("count must be >= 0")
        done: list[Modification] = []
        for _ in range(n):
            result = step()
            if isinstance(result, exhausted):
                break
            if not _applied(result):
                return ReplayBatch(modifications=tuple(done), stopped_by=result)
            done.append(result)
        return ReplayBatch(modifications=tuple(done))


def _applied(result) -> bool:
    return isinstance(result, (AddPerson, DeletePerson, ReplacePerson, ReplaceAll))
