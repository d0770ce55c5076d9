"""Weighted operator sums.

:class:`SumRepr` maps an operator code (a fermionic term or a Pauli code) to
its accumulated real coefficient. Both the fermionic Hamiltonian and its
qubit image are held in one.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from fqmap.operators.pauli import PauliCode


class SumRepr:
    """
    Sum of operator codes with real coefficients.

    At most one entry is kept per distinct code: :meth:`add_term` adds into
    an existing coefficient instead of replacing it. Entries are never
    removed, not even when their coefficient sums to zero. Iteration order
    is unspecified; compare sums by key lookup or through a sorted snapshot.

    Codes used as keys must not be mutated afterwards.

    Args:
        dtype: Optional numpy scalar type (e.g. ``np.float32``) every
            coefficient is cast through. Without it coefficients are stored
            as given.
        capacity: Expected number of entries. Accepted for symmetry with
            :meth:`with_capacity`; Python dicts size themselves.

    Example:
        >>> s = SumRepr()
        >>> s.add_term(PauliCode(), 0.5)
        >>> s.add_term(PauliCode(), 0.25)
        >>> s.coeff(PauliCode())
        0.75
    """

    def __init__(self, dtype: Optional[type] = None, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._dtype = dtype
        self._capacity = capacity
        self._terms: Dict[Hashable, Any] = {}

    @classmethod
    def with_capacity(cls, capacity: int, dtype: Optional[type] = None) -> "SumRepr":
        return cls(dtype=dtype, capacity=capacity)

    @property
    def dtype(self) -> Optional[type]:
        return self._dtype

    def zero(self) -> Any:
        """Additive identity in the coefficient type."""
        if self._dtype is None:
            return 0.0
        return self._dtype(0)

    def _cast(self, value: Any) -> Any:
        if self._dtype is None:
            return value
        return self._dtype(value)

    def add_term(self, code: Hashable, delta: Any) -> None:
        """
        Add `delta` to the coefficient of `code`, inserting it if absent.

        A zero `delta` still creates the entry.
        """
        if code in self._terms:
            self._terms[code] = self._cast(self._terms[code] + delta)
        else:
            self._terms[code] = self._cast(delta)

    def update(self, code: Hashable, value: Any) -> None:
        """Set the coefficient of `code` to `value`, discarding the old one."""
        self._terms[code] = self._cast(value)

    def coeff(self, code: Hashable) -> Any:
        """Coefficient of `code`, or zero if it is not stored."""
        if code in self._terms:
            return self._terms[code]
        return self.zero()

    def add_to(self, other: "SumRepr") -> None:
        """Add every entry of this sum into `other`."""
        for code, value in self._terms.items():
            other.add_term(code, value)

    def codes(self) -> List[Hashable]:
        return list(self._terms)

    def items(self) -> List[Tuple[Hashable, Any]]:
        return list(self._terms.items())

    def as_dict(self) -> Dict[Hashable, Any]:
        """Shallow copy of the underlying mapping."""
        return dict(self._terms)

    @property
    def encoding(self) -> Optional[str]:
        """
        ``"fermions"`` or ``"qubits"`` according to the stored codes.

        None if the sum is empty or holds both kinds.
        """
        from fqmap.fermion.terms import FermionTerm

        if not self._terms:
            return None
        if all(isinstance(code, FermionTerm) for code in self._terms):
            return "fermions"
        if all(isinstance(code, PauliCode) for code in self._terms):
            return "qubits"
        return None

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, code: object) -> bool:
        return code in self._terms

    def __iter__(self) -> Iterator[Tuple[Hashable, Any]]:
        return iter(self._terms.items())

    def __repr__(self) -> str:
        return f"SumRepr(len={len(self._terms)}, dtype={getattr(self._dtype, '__name__', None)})"


__all__ = ["SumRepr"]
