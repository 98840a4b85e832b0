"""Closeable Ledger - close many resources in reverse order, ignoring close errors."""

__version__ = "0.1.0"

from .closeable_interface import Closeable, SupportsClose
from .ledger import ResourceLedger, close_quietly

__all__ = [
    "Closeable",
    "SupportsClose",
    "ResourceLedger",
    "close_quietly",
]
