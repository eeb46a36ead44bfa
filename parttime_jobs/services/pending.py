"""
Pending Operations - asyncio tasks for the mocked slow calls.

Each operation runs under a key (one in flight per key) and a scope, the
view that started it. Dismissing the view cancels everything in its scope;
a cancelled operation raises OperationCancelled to its caller and never
returns a result, so the caller cannot apply a stale effect.
"""

import asyncio
from typing import Awaitable, Dict, List, Tuple, TypeVar

from parttime_jobs.core.errors import OperationCancelled, OperationPending
from parttime_jobs.core.log import get_logger

log = get_logger(__name__)

T = TypeVar("T")


class PendingOperations:

    def __init__(self):
        self._tasks: Dict[str, Tuple[str, asyncio.Task]] = {}

    def is_pending(self, key: str) -> bool:
        entry = self._tasks.get(key)
        return entry is not None and not entry[1].done()

    def pending_keys(self) -> List[str]:
        return sorted(key for key in self._tasks if self.is_pending(key))

    async def run(self, key: str, scope: str, operation: Awaitable[T]) -> T:
        """
        Run operation as a task tracked under key.

        Raises:
            OperationPending: key already has an operation in flight
            OperationCancelled: cancelled through cancel()/cancel_scope()
        """
        if self.is_pending(key):
            if asyncio.iscoroutine(operation):
                operation.close()
            raise OperationPending("This action is already in progress.")

        task = asyncio.ensure_future(operation)
        self._tasks[key] = (scope, task)
        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            # The caller itself went away; take the operation with it
            task.cancel()
            raise
        finally:
            if self._tasks.get(key, (None, None))[1] is task:
                del self._tasks[key]

        if task.cancelled():
            log.info("Operation %s cancelled (%s dismissed)", key, scope)
            raise OperationCancelled("The action was cancelled.")
        return task.result()

    def cancel(self, key: str) -> bool:
        entry = self._tasks.get(key)
        if entry is None or entry[1].done():
            return False
        entry[1].cancel()
        return True

    def cancel_scope(self, scope: str) -> int:
        """Cancel every operation started from scope. Returns how many."""
        count = 0
        for key, (task_scope, _) in list(self._tasks.items()):
            if task_scope == scope and self.cancel(key):
                count += 1
        return count

    def cancel_all(self) -> int:
        return sum(1 for key in list(self._tasks) if self.cancel(key))
