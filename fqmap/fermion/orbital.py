"""Spin-orbitals.

A spin-orbital is a spatial orbital ``n`` combined with a spin; it is
addressed by the single index ``2 * n + spin`` with ``DOWN = 0`` and
``UP = 1``. Under the Jordan-Wigner mapping that index is also the qubit
index.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

# Indices are unsigned 32-bit
ORBITAL_INDEX_MAX = 2**32 - 1


class Spin(IntEnum):
    """Electron spin projection."""

    DOWN = 0
    UP = 1


@dataclass(frozen=True, order=True)
class Orbital:
    """
    Spin-orbital addressed by its index.

    Attributes
    ----------
    index:
        Spin-orbital index, 0 <= index <= ORBITAL_INDEX_MAX.

    Example
    -------
    >>> Orbital.from_spatial(3, Spin.DOWN).index
    6
    >>> Orbital.from_spatial(8, Spin.UP).index
    17
    """

    index: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(
                f"orbital index must be an integer, got {type(self.index).__name__}"
            )
        if not 0 <= self.index <= ORBITAL_INDEX_MAX:
            raise ValueError(f"orbital index out of bound: {self.index}")

    @classmethod
    def from_index(cls, index: int) -> "Orbital":
        return cls(operator.index(index))

    @classmethod
    def from_spatial(cls, n: int, spin: Spin = Spin.DOWN) -> "Orbital":
        """
        Spin-orbital for spatial orbital `n` with the given spin.

        Raises
        ------
        ValueError:
            If ``2 * n + spin`` does not fit the index width.
        """
        if n < 0:
            raise ValueError(f"spatial orbital index must be >= 0, got {n}")
        return cls(2 * int(n) + int(Spin(spin)))

    @property
    def spatial(self) -> int:
        """Spatial orbital index."""
        return self.index >> 1

    @property
    def spin(self) -> Spin:
        return Spin(self.index & 1)

    @classmethod
    def gen_range(cls, start: int = 0, stop: Optional[int] = None) -> Iterator["Orbital"]:
        """
        Yield orbitals with indices in ``[start, stop)``.

        With `stop` omitted the range runs through ORBITAL_INDEX_MAX.
        Reversed ranges yield nothing.
        """
        if stop is None:
            stop = ORBITAL_INDEX_MAX + 1
        for index in range(max(start, 0), min(stop, ORBITAL_INDEX_MAX + 1)):
            yield cls(index)

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index


__all__ = ["ORBITAL_INDEX_MAX", "Spin", "Orbital"]
