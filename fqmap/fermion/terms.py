"""Fermionic Hamiltonian terms.

A molecular Hamiltonian in second quantization is a weighted sum of three
kinds of term:

- :class:`Offset`: the constant (identity) term,
- :class:`OneElectron`: ``a†_p a_q`` with ``p <= q``,
- :class:`TwoElectron`: ``a†_p a†_q a_r a_s`` with ``p < q`` and ``r > s``.

The ordering constraints are part of each term's identity: they fold the
Hermitian conjugate (and the antisymmetric partners of two-electron terms)
onto a single stored key, and they fix the Z-string spans used by the
Jordan-Wigner mapping. Terms that are not self-adjoint stand for
``c * (op + op†)`` when weighted by ``c``.

Use :func:`one_electron` and :func:`two_electron` to build terms from
arbitrary orbitals; they return None for orderings that do not name a
canonical term.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .orbital import Orbital

OrbitalLike = Union[Orbital, int]


def _as_orbital(value: OrbitalLike) -> Orbital:
    if isinstance(value, Orbital):
        return value
    return Orbital.from_index(value)


class FermionTerm:
    """Base class of the fermionic term variants."""

    __slots__ = ()

    def indices(self) -> Tuple[int, ...]:
        """Orbital indices, creation operators first."""
        raise NotImplementedError

    def max_index(self) -> Optional[int]:
        """Largest orbital index, or None for the offset term."""
        indices = self.indices()
        return max(indices) if indices else None

    def is_self_adjoint(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Offset(FermionTerm):
    """Constant term of the Hamiltonian."""

    def indices(self) -> Tuple[int, ...]:
        return ()

    def is_self_adjoint(self) -> bool:
        return True

    def __str__(self) -> str:
        return "[]"


@dataclass(frozen=True)
class OneElectron(FermionTerm):
    """
    One-electron integral term ``a†_cr a_an``.

    Attributes
    ----------
    cr:
        Creation orbital.
    an:
        Annihilation orbital; ``cr.index <= an.index``.
    """

    cr: Orbital
    an: Orbital

    def __post_init__(self) -> None:
        object.__setattr__(self, "cr", _as_orbital(self.cr))
        object.__setattr__(self, "an", _as_orbital(self.an))
        if self.cr.index > self.an.index:
            raise ValueError(
                f"one-electron term requires cr <= an, got "
                f"cr={self.cr.index}, an={self.an.index}"
            )

    def indices(self) -> Tuple[int, ...]:
        return (self.cr.index, self.an.index)

    def is_self_adjoint(self) -> bool:
        return self.cr == self.an

    def __str__(self) -> str:
        return f"[{self.cr.index}, {self.an.index}]"


@dataclass(frozen=True)
class TwoElectron(FermionTerm):
    """
    Two-electron integral term ``a†_p a†_q a_r a_s``.

    Attributes
    ----------
    cr:
        Creation orbitals ``(p, q)`` with ``p < q``.
    an:
        Annihilation orbitals ``(r, s)`` with ``r > s``.
    """

    cr: Tuple[Orbital, Orbital]
    an: Tuple[Orbital, Orbital]

    def __post_init__(self) -> None:
        cr = tuple(_as_orbital(o) for o in self.cr)
        an = tuple(_as_orbital(o) for o in self.an)
        if len(cr) != 2 or len(an) != 2:
            raise ValueError(
                f"two-electron term needs two creation and two annihilation "
                f"orbitals, got {len(cr)} and {len(an)}"
            )
        object.__setattr__(self, "cr", cr)
        object.__setattr__(self, "an", an)
        if not cr[0].index < cr[1].index:
            raise ValueError(
                f"two-electron term requires cr[0] < cr[1], got "
                f"{cr[0].index}, {cr[1].index}"
            )
        if not an[0].index > an[1].index:
            raise ValueError(
                f"two-electron term requires an[0] > an[1], got "
                f"{an[0].index}, {an[1].index}"
            )

    def indices(self) -> Tuple[int, ...]:
        return (self.cr[0].index, self.cr[1].index, self.an[0].index, self.an[1].index)

    def is_self_adjoint(self) -> bool:
        p, q, r, s = self.indices()
        return p == s and q == r

    def __str__(self) -> str:
        return "[{}, {}, {}, {}]".format(*self.indices())


def offset() -> Offset:
    return Offset()


def one_electron(cr: OrbitalLike, an: OrbitalLike) -> Optional[OneElectron]:
    """
    One-electron term ``a†_cr a_an``, or None unless ``cr <= an``.
    """
    cr, an = _as_orbital(cr), _as_orbital(an)
    if cr.index > an.index:
        return None
    return OneElectron(cr, an)


def two_electron(
    cr: Tuple[OrbitalLike, OrbitalLike],
    an: Tuple[OrbitalLike, OrbitalLike],
) -> Optional[TwoElectron]:
    """
    Two-electron term ``a†_p a†_q a_r a_s``, or None unless ``p < q`` and
    ``r > s``.
    """
    p, q = (_as_orbital(o) for o in cr)
    r, s = (_as_orbital(o) for o in an)
    if not (p.index < q.index and r.index > s.index):
        return None
    return TwoElectron((p, q), (r, s))


__all__ = [
    "FermionTerm",
    "Offset",
    "OneElectron",
    "TwoElectron",
    "offset",
    "one_electron",
    "two_electron",
]
