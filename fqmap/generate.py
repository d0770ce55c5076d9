"""Random and exhaustive Hamiltonians.

Used by the command line, the benchmarks and the tests to populate sums
without reading integrals from a file. Coefficients are arbitrary and drawn
uniformly from ``[-1, 1)``.
"""

from __future__ import annotations

from itertools import product
from typing import Iterator, Optional, Sequence, Tuple, Type, TypeVar

import numpy as np

from fqmap.core.sumrepr import SumRepr
from fqmap.fermion.orbital import Orbital
from fqmap.fermion.terms import Offset, one_electron, two_electron
from fqmap.logging import get_logger
from fqmap.operators.pauli import PauliCode

logger = get_logger(__name__)

T = TypeVar("T")


def pairs(items: Sequence[T]) -> Iterator[Tuple[T, T]]:
    """
    All ordered pairs of `items`, diagonal included.

    Example:
        >>> list(pairs([0, 1]))
        [(0, 0), (0, 1), (1, 0), (1, 1)]
    """
    return product(items, repeat=2)


def _coefficient(rng: np.random.Generator) -> float:
    return float(rng.uniform(-1.0, 1.0))


def random_fermi_sum(
    num_terms: int,
    max_orbital_index: int,
    rng: Optional[np.random.Generator] = None,
    dtype: Optional[type] = None,
) -> SumRepr:
    """
    Draw a random fermionic Hamiltonian.

    Each draw picks the offset, a one-electron term ``a†_p a_q`` with
    ``p < q``, or a two-electron term ``a†_p a†_q a_r a_s`` with ``p < q``,
    ``s >= p`` and ``r > s``; all indices lie in ``0..max_orbital_index``.
    Draws that hit a term already present add to its coefficient, so the
    result can hold fewer than `num_terms` entries.

    Args:
        num_terms: Number of draws (>= 0).
        max_orbital_index: Largest orbital index used (>= 3).
        rng: Numpy generator. Defaults to a fresh unseeded one.
        dtype: Coefficient type of the returned sum.

    Returns:
        SumRepr keyed by fermion terms.

    Raises:
        ValueError: If num_terms < 0 or max_orbital_index < 3.
    """
    if num_terms < 0:
        raise ValueError(f"num_terms must be >= 0, got {num_terms}")
    if max_orbital_index < 3:
        raise ValueError(f"max_orbital_index must be >= 3, got {max_orbital_index}")
    if rng is None:
        rng = np.random.default_rng()

    top = max_orbital_index
    fermi_sum = SumRepr.with_capacity(num_terms, dtype=dtype)
    for _ in range(num_terms):
        category = int(rng.integers(0, 3))
        if category == 0:
            fermi_sum.add_term(Offset(), _coefficient(rng))
        elif category == 1:
            p = int(rng.integers(0, top - 1))
            q = int(rng.integers(p + 1, top, endpoint=True))
            fermi_sum.add_term(one_electron(p, q), _coefficient(rng))
        else:
            p = int(rng.integers(0, top - 2))
            q = int(rng.integers(p + 1, top, endpoint=True))
            s = int(rng.integers(p, top - 1))
            r = int(rng.integers(s + 1, top, endpoint=True))
            fermi_sum.add_term(two_electron((p, q), (r, s)), _coefficient(rng))

    logger.debug("drew %d fermionic terms, %d distinct", num_terms, len(fermi_sum))
    return fermi_sum


def random_pauli_sum(
    num_terms: int,
    rng: Optional[np.random.Generator] = None,
    dtype: Optional[type] = None,
    code_type: Type[PauliCode] = PauliCode,
) -> SumRepr:
    """
    Draw a random qubit Hamiltonian of uniformly random Pauli strings.

    Args:
        num_terms: Number of draws (>= 0).
        rng: Numpy generator. Defaults to a fresh unseeded one.
        dtype: Coefficient type of the returned sum.
        code_type: PauliCode subclass of the drawn codes.

    Returns:
        SumRepr keyed by Pauli codes.
    """
    if num_terms < 0:
        raise ValueError(f"num_terms must be >= 0, got {num_terms}")
    if rng is None:
        rng = np.random.default_rng()

    # two bits per qubit
    n_bytes = code_type.width // 4
    pauli_sum = SumRepr.with_capacity(num_terms, dtype=dtype)
    for _ in range(num_terms):
        code = code_type(int.from_bytes(rng.bytes(n_bytes), "little"))
        pauli_sum.add_term(code, _coefficient(rng))
    return pauli_sum


def full_fermi_sum(
    n_orbitals: int,
    rng: Optional[np.random.Generator] = None,
    dtype: Optional[type] = None,
) -> SumRepr:
    """
    Every canonical term over `n_orbitals` spin-orbitals, random weights.

    The offset has weight 1.0. The number of two-electron terms grows as
    ``n_orbitals**4 / 4``, so keep `n_orbitals` modest.

    Args:
        n_orbitals: Number of spin-orbitals (>= 0).
        rng: Numpy generator. Defaults to a fresh unseeded one.
        dtype: Coefficient type of the returned sum.
    """
    if n_orbitals < 0:
        raise ValueError(f"n_orbitals must be >= 0, got {n_orbitals}")
    if rng is None:
        rng = np.random.default_rng()

    orbitals = list(Orbital.gen_range(0, n_orbitals))
    orbital_pairs = list(pairs(orbitals))

    fermi_sum = SumRepr(dtype=dtype)
    fermi_sum.add_term(Offset(), 1.0)
    for p, q in orbital_pairs:
        term = one_electron(p, q)
        if term is not None:
            fermi_sum.add_term(term, _coefficient(rng))
    for (p, q), (r, s) in pairs(orbital_pairs):
        term = two_electron((p, q), (r, s))
        if term is not None:
            fermi_sum.add_term(term, _coefficient(rng))

    logger.debug("generated %d terms over %d orbitals", len(fermi_sum), n_orbitals)
    return fermi_sum


__all__ = ["pairs", "random_fermi_sum", "random_pauli_sum", "full_fermi_sum"]
