"""Packed Pauli strings.

A Pauli string on up to 64 qubits is stored in a single integer register,
two bits per qubit (``I=0, X=1, Y=2, Z=3``). The symbol for qubit ``i``
occupies bits ``2i`` and ``2i + 1``, so qubit 0 sits in the least
significant bits.

This is the only module that does raw bit arithmetic on the register;
everything else goes through :meth:`PauliCode.pauli` and
:meth:`PauliCode.set`.

Example:
    >>> code = PauliCode.from_paulis([Pauli.X, Pauli.Z, Pauli.Y])
    >>> str(code)
    'XZY'
    >>> code.pauli(1)
    <Pauli.Z: 3>
    >>> code.pauli(64) is None
    True
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import Callable, Iterable, Iterator, Optional, Tuple

from fqmap.core.errors import QubitIndexError

PAULI_MASK = 0b11

REGISTER_WIDTH = 64


class Pauli(IntEnum):
    """Single-qubit Pauli operator with its 2-bit register encoding."""

    I = 0
    X = 1
    Y = 2
    Z = 3

    @classmethod
    def from_int(cls, value: int) -> "Pauli":
        """
        Decode a 2-bit value.

        Raises:
            ValueError: If value is not in 0..3.
        """
        if not isinstance(value, int) or not 0 <= value <= 3:
            raise ValueError(
                f"Pauli code must be an integer between 0 and 3, got {value!r}"
            )
        return _PAULIS[value]

    @classmethod
    def from_label(cls, label: str) -> "Pauli":
        """
        Parse a one-character label: "I", "X", "Y" or "Z".

        Raises:
            ValueError: If the label is not a Pauli symbol.
        """
        try:
            return cls[label]
        except KeyError:
            raise ValueError(
                f"Invalid Pauli label {label!r}. Must be one of I, X, Y, Z"
            ) from None

    def __str__(self) -> str:
        return self.name


_PAULIS = (Pauli.I, Pauli.X, Pauli.Y, Pauli.Z)


@total_ordering
class PauliCode:
    """
    Pauli string packed into a fixed-width integer register.

    Codes compare equal iff their packed registers are identical, trailing
    identities included. Ordering follows the packed integer, so the upper
    half of the register dominates.

    The public accessors (:meth:`pauli`, :meth:`set`, :meth:`pauli_mut`) are
    bounds-checked. :meth:`pauli_unchecked` and :meth:`set_unchecked` skip the
    check and are meant for callers that have already validated the index.

    A code is mutable, but once it is used as a key in a
    :class:`~fqmap.core.sumrepr.SumRepr` it must not be modified; take a
    :meth:`copy` first.

    Args:
        pack: Raw register value. Not validated.
    """

    width: int = REGISTER_WIDTH

    __slots__ = ("_pack",)

    def __init__(self, pack: int = 0) -> None:
        self._pack = int(pack)

    @classmethod
    def identity(cls) -> "PauliCode":
        """Return the all-identity code."""
        return cls(0)

    @classmethod
    def from_halves(cls, low: int, high: int) -> "PauliCode":
        """
        Build a code from its two register words.

        Each word is `width` bits wide. For the 64-qubit code, `low` holds
        qubits 0..31 and `high` holds qubits 32..63.
        """
        mask = (1 << cls.width) - 1
        return cls((int(low) & mask) | ((int(high) & mask) << cls.width))

    @classmethod
    def from_paulis(cls, paulis: Iterable[Pauli]) -> "PauliCode":
        """
        Build a code from a sequence of symbols, qubit 0 first.

        Only the first `width` symbols are consumed, so the iterable may be
        infinite. Positions not supplied are identity.
        """
        pack = 0
        for index, pauli in zip(range(cls.width), paulis):
            pack |= int(Pauli.from_int(pauli)) << (2 * index)
        return cls(pack)

    @property
    def pack(self) -> int:
        """The raw packed register."""
        return self._pack

    def halves(self) -> Tuple[int, int]:
        """Return the register as its `(low, high)` words."""
        mask = (1 << self.width) - 1
        return self._pack & mask, (self._pack >> self.width) & mask

    def copy(self) -> "PauliCode":
        return type(self)(self._pack)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self.width

    def pauli_unchecked(self, index: int) -> Pauli:
        """
        Decode the symbol at `index` without a bounds check.

        The caller guarantees ``0 <= index < width``. Indices past the width
        decode whatever bits happen to be there (normally identity); negative
        indices raise from the shift itself.
        """
        return _PAULIS[(self._pack >> (2 * index)) & PAULI_MASK]

    def pauli(self, index: int) -> Optional[Pauli]:
        """Return the symbol at `index`, or None if `index` is out of range."""
        if not self._in_range(index):
            return None
        return self.pauli_unchecked(index)

    def set_unchecked(self, index: int, pauli: Pauli) -> None:
        """
        Store `pauli` at `index` without a bounds check.

        The caller guarantees ``0 <= index < width``.
        """
        shift = 2 * index
        self._pack &= ~(PAULI_MASK << shift)
        self._pack |= int(pauli) << shift

    def set(self, index: int, pauli: Pauli) -> None:
        """
        Store `pauli` at `index`.

        Raises:
            QubitIndexError: If `index` is outside 0..width-1.
        """
        if not self._in_range(index):
            raise QubitIndexError(
                index, self.width, f"index should be within 0..{self.width}, got {index}"
            )
        self.set_unchecked(index, pauli)

    def pauli_mut(
        self,
        index: int,
        f: Callable[[Optional[Pauli]], Optional[Pauli]],
    ) -> None:
        """
        Update the symbol at `index` through a callback.

        If `index` is in range, `f` receives the current symbol and its
        return value (when not None) is stored. Otherwise `f` receives None
        and the code is left unchanged.
        """
        if not self._in_range(index):
            f(None)
            return
        new = f(self.pauli_unchecked(index))
        if new is not None:
            self.set_unchecked(index, new)

    def __iter__(self) -> Iterator[Pauli]:
        for index in range(self.width):
            yield self.pauli_unchecked(index)

    def num_nontrivial(self) -> int:
        """Number of qubits carrying a non-identity symbol."""
        count = 0
        pack = self._pack
        while pack:
            if pack & PAULI_MASK:
                count += 1
            pack >>= 2
        return count

    def min_register_size(self) -> int:
        """Smallest register able to hold this code (0 for the identity)."""
        return (self._pack.bit_length() + 1) // 2

    def is_identity(self) -> bool:
        return self._pack == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PauliCode):
            return NotImplemented
        return type(self) is type(other) and self._pack == other._pack

    def __lt__(self, other: "PauliCode") -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._pack < other._pack

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._pack))

    def __str__(self) -> str:
        size = min(max(self.min_register_size(), 1), self.width)
        return "".join(self.pauli_unchecked(i).name for i in range(size))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class WidePauliCode(PauliCode):
    """Pauli string on up to 128 qubits (two 128-bit register words)."""

    width: int = 2 * REGISTER_WIDTH

    __slots__ = ()


__all__ = [
    "PAULI_MASK",
    "REGISTER_WIDTH",
    "Pauli",
    "PauliCode",
    "WidePauliCode",
]
