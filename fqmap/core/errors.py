"""Error types shared across fqmap."""

from __future__ import annotations

from typing import Optional


class QubitIndexError(ValueError):
    """
    A qubit or orbital index lies outside the supported register width.

    This is the only error the encoding core raises on its own; invalid
    operator orderings are rejected when terms are constructed.

    Attributes
    ----------
    index:
        The offending index.
    width:
        Register width the index was checked against.
    """

    def __init__(self, index: int, width: int, msg: Optional[str] = None) -> None:
        self.index = index
        self.width = width
        if msg is None:
            msg = f"index {index} out of range [0, {width})"
        super().__init__(msg)


__all__ = ["QubitIndexError"]
