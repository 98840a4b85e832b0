"""Ledger of closeable resources released in reverse order of addition."""

import logging
from typing import Iterable, List, Optional, TypeVar

from .closeable_interface import SupportsClose

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=SupportsClose)


def _close_silently(resource: SupportsClose) -> Optional[BaseException]:
    """Close a resource, discarding any Exception.

    Returns:
        A raised BaseException that is not an Exception (KeyboardInterrupt,
        SystemExit, GeneratorExit), or None
    """
    try:
        resource.close()
    except Exception:
        pass
    except BaseException as e:
        return e
    return None


def _close_all(resources: Iterable[SupportsClose]) -> None:
    # Every resource is closed before the first interrupt-like exception is re-raised.
    pending: Optional[BaseException] = None
    for resource in resources:
        interrupt = _close_silently(resource)
        if pending is None:
            pending = interrupt
    if pending is not None:
        raise pending


def close_quietly(*resources: Optional[SupportsClose]) -> None:
    """Close each resource in the given order, ignoring errors.

    None entries are skipped. No ledger is consulted, so a resource that is
    also tracked by a ResourceLedger will be closed again when that ledger
    is drained. A KeyboardInterrupt or SystemExit raised by close() is
    re-raised once every resource has been closed.

    Args:
        resources: Resources to close
    """
    _close_all(r for r in resources if r is not None)


class ResourceLedger:
    """Track closeable resources and close them in reverse order.

    Not thread-safe. Errors raised while closing a resource are discarded so
    that every remaining resource still gets closed. KeyboardInterrupt,
    SystemExit and GeneratorExit are held back until the rest are closed,
    then re-raised.

    Example:
        with ResourceLedger() as ledger:
            conn = ledger.add(connect())
            cursor = ledger.add(conn.cursor())
            ...

    On exit the cursor is closed first, then the connection.
    """

    close_quietly = staticmethod(close_quietly)

    def __init__(self, *resources: Optional[SupportsClose]):
        """Initialize the ledger.

        Args:
            resources: Resources to track from the start, in order. None
                entries are skipped.
        """
        self._closeables: List[SupportsClose] = [r for r in resources if r is not None]

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit. Exceptions from the block propagate."""
        self.close()

    def __len__(self) -> int:
        """Number of tracked entries, duplicates included."""
        return len(self._closeables)

    def __contains__(self, resource: object) -> bool:
        """Whether this exact object is tracked (identity, not equality)."""
        return any(el is resource for el in self._closeables)

    def add(self, resource: Optional[R]) -> Optional[R]:
        """Add a resource to the close list.

        Adding the same resource twice creates two entries.

        Args:
            resource: Resource to track. None is ignored.

        Returns:
            The resource passed in, for chaining
        """
        if resource is not None:
            self._closeables.append(resource)
        return resource

    def remove(self, resource: Optional[SupportsClose], close: bool = False) -> None:
        """Stop tracking a resource, optionally closing it.

        Every entry that is the given object is removed. When close is True the
        resource is closed even if it was never tracked; errors are ignored.

        Args:
            resource: Resource to forget. None is ignored.
            close: Close the resource after removing it
        """
        if resource is None:
            return

        removed = 0
        for i in range(len(self._closeables) - 1, -1, -1):
            if self._closeables[i] is resource:
                del self._closeables[i]
                removed += 1

        logger.debug("Removed %d ledger entries", removed)

        if close:
            _close_all([resource])

    def close_and_forget(self, resource: Optional[SupportsClose]) -> None:
        """Remove a resource from the close list and close it now."""
        self.remove(resource, close=True)

    def close(self) -> None:
        """Close all tracked resources, last added first.

        The ledger is empty afterwards, so calling close() again does nothing.
        """
        if self._closeables:
            logger.debug(f"Closing {len(self._closeables)} tracked resources")

        _close_all(self._pop_all())

    def _pop_all(self):
        while self._closeables:
            yield self._closeables.pop()
