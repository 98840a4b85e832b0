"""Abstract interface for closeable resources."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class Closeable(ABC):
    """Abstract base class for resources released with close()."""

    @abstractmethod
    def close(self) -> None:
        """Release the resource.

        Implementations may raise; ResourceLedger and close_quietly()
        discard whatever is raised here.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


@runtime_checkable
class SupportsClose(Protocol):
    """Protocol for anything with a close() method (files, sockets, generators)."""

    def close(self) -> None:
        """Release the resource."""
        ...
