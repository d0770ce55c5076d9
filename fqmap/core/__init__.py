"""Core containers and errors."""

from .errors import QubitIndexError
from .sumrepr import SumRepr

__all__ = ["QubitIndexError", "SumRepr"]
