"""Fermion-to-qubit mapping: Jordan-Wigner transform.

Each ladder operator maps as

    a_p        -> (1/2)(X_p + i Y_p) Z-string(0..p-1)
    a_p^\\dagger -> (1/2)(X_p - i Y_p) Z-string(0..p-1)

Substituted into the canonical one- and two-electron terms (together with
their Hermitian conjugates) every imaginary part cancels, leaving a short
list of Pauli strings with real weights per term. The expansions below are
written out per term shape instead of multiplying operators at run time.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple, Type

from fqmap.config import is_debug_enabled
from fqmap.core.errors import QubitIndexError
from fqmap.core.sumrepr import SumRepr
from fqmap.fermion.terms import FermionTerm, Offset, OneElectron, TwoElectron
from fqmap.logging import get_logger
from fqmap.operators.pauli import Pauli, PauliCode

logger = get_logger(__name__)

Contribution = Tuple[PauliCode, Any]

# Letters on (p, q, r, s) and sign for the four-index expansion
_PQRS_PATTERNS: Tuple[Tuple[Tuple[Pauli, Pauli, Pauli, Pauli], int], ...] = (
    ((Pauli.X, Pauli.X, Pauli.X, Pauli.X), 1),
    ((Pauli.X, Pauli.X, Pauli.Y, Pauli.Y), -1),
    ((Pauli.X, Pauli.Y, Pauli.X, Pauli.Y), 1),
    ((Pauli.Y, Pauli.X, Pauli.X, Pauli.Y), 1),
    ((Pauli.Y, Pauli.X, Pauli.Y, Pauli.X), 1),
    ((Pauli.Y, Pauli.Y, Pauli.X, Pauli.X), -1),
    ((Pauli.X, Pauli.Y, Pauli.Y, Pauli.X), 1),
    ((Pauli.Y, Pauli.Y, Pauli.Y, Pauli.Y), 1),
)


def _check_indices(names: str, indices: Sequence[int], width: int) -> None:
    for name, index in zip(names, indices):
        if not 0 <= index < width:
            raise QubitIndexError(
                index, width, f"{name} index out of bound: {index} (register width {width})"
            )


def _z_string(code_type: Type[PauliCode], *spans: Tuple[int, int]) -> PauliCode:
    # spans are half-open; indices already validated by the caller
    code = code_type()
    for start, stop in spans:
        for i in range(start, stop):
            code.set_unchecked(i, Pauli.Z)
    return code


def _with_letters(base: PauliCode, letters: Iterable[Tuple[int, Pauli]]) -> PauliCode:
    code = base.copy()
    for index, pauli in letters:
        code.set_unchecked(index, pauli)
    return code


def _offset_terms(coeff: Any, code_type: Type[PauliCode]) -> List[Contribution]:
    return [(code_type(), coeff)]


def _one_electron_pp(p: int, coeff: Any, code_type: Type[PauliCode]) -> List[Contribution]:
    _check_indices("p", (p,), code_type.width)
    term = coeff * 0.5
    return [
        (code_type(), term),
        (_with_letters(code_type(), [(p, Pauli.Z)]), -term),
    ]


def _one_electron_pq(
    p: int, q: int, coeff: Any, code_type: Type[PauliCode]
) -> List[Contribution]:
    _check_indices("pq", (p, q), code_type.width)
    term = coeff * 0.5
    base = _z_string(code_type, (p + 1, q))
    return [
        (_with_letters(base, [(p, Pauli.X), (q, Pauli.X)]), term),
        (_with_letters(base, [(p, Pauli.Y), (q, Pauli.Y)]), term),
    ]


def _two_electron_pq(
    p: int, q: int, coeff: Any, code_type: Type[PauliCode]
) -> List[Contribution]:
    """Number-number term ``n_p n_q``."""
    _check_indices("pq", (p, q), code_type.width)
    term = coeff * 0.25
    identity = code_type()
    return [
        (identity, term),
        (_with_letters(identity, [(p, Pauli.Z)]), -term),
        (_with_letters(identity, [(q, Pauli.Z)]), -term),
        (_with_letters(identity, [(p, Pauli.Z), (q, Pauli.Z)]), term),
    ]


def _two_electron_pqs(
    p: int, q: int, s: int, coeff: Any, code_type: Type[PauliCode]
) -> List[Contribution]:
    """
    Three-index term ``a†_p a†_q a_q a_s = a†_p a_s n_q``.

    The hopping part carries a Z-string over ``p+1..s-1``; the number
    operator on `q` contributes the ``(I - Z_q) / 2`` factor. The letter on
    `q` is written after the string.
    """
    _check_indices("pqs", (p, q, s), code_type.width)
    term = coeff * 0.25
    base = _z_string(code_type, (p + 1, s))
    xx = _with_letters(base, [(p, Pauli.X), (s, Pauli.X)])
    xxz = _with_letters(xx, [(q, Pauli.Z)])
    yyz = _with_letters(xxz, [(p, Pauli.Y), (s, Pauli.Y)])
    yy = _with_letters(yyz, [(q, Pauli.I)])
    return [
        (xx, term),
        (xxz, -term),
        (yyz, -term),
        (yy, term),
    ]


def _two_electron_pqrs(
    p: int, q: int, r: int, s: int, coeff: Any, code_type: Type[PauliCode]
) -> List[Contribution]:
    _check_indices("pqrs", (p, q, r, s), code_type.width)
    term = coeff * 0.125
    base = _z_string(code_type, (p + 1, q), (s + 1, r))
    contributions = []
    for letters, sign in _PQRS_PATTERNS:
        code = _with_letters(base, zip((p, q, r, s), letters))
        contributions.append((code, term if sign > 0 else -term))
    return contributions


def term_contributions(
    term: FermionTerm,
    coeff: Any,
    code_type: Type[PauliCode] = PauliCode,
) -> List[Contribution]:
    """
    Pauli strings and weights making up one weighted fermionic term.

    Nothing is accumulated here; the returned list is complete before any
    caller commits it.

    Parameters
    ----------
    term:
        Canonical fermionic term.
    coeff:
        Real coefficient of `term`.
    code_type:
        PauliCode subclass fixing the register width.

    Returns
    -------
    list of (PauliCode, weight)
        One to eight contributions. Codes may repeat within a list.

    Raises
    ------
    QubitIndexError:
        If an orbital index does not fit the register of `code_type`.
    TypeError:
        If `term` is not a FermionTerm.
    """
    if isinstance(term, Offset):
        return _offset_terms(coeff, code_type)
    if isinstance(term, OneElectron):
        p, q = term.indices()
        if p == q:
            return _one_electron_pp(p, coeff, code_type)
        return _one_electron_pq(p, q, coeff, code_type)
    if isinstance(term, TwoElectron):
        p, q, r, s = term.indices()
        if p == s and q == r:
            return _two_electron_pq(p, q, coeff, code_type)
        if q == r:
            return _two_electron_pqs(p, q, s, coeff, code_type)
        return _two_electron_pqrs(p, q, r, s, coeff, code_type)
    raise TypeError(f"expected a FermionTerm, got {type(term).__name__}")


class JordanWigner:
    """
    Jordan-Wigner image of a fermionic sum.

    The mapping borrows `fermi_sum` and writes its qubit image into any
    :class:`SumRepr` passed to :meth:`add_to`.

    Parameters
    ----------
    fermi_sum:
        Sum of :class:`FermionTerm` codes with real coefficients.
    code_type:
        PauliCode subclass for the output codes. Orbital indices must be
        below ``code_type.width``.

    Example
    -------
    >>> from fqmap.fermion.terms import one_electron
    >>> fermi_sum = SumRepr()
    >>> fermi_sum.add_term(one_electron(11, 11), 1.0)
    >>> pauli_sum = SumRepr()
    >>> JordanWigner(fermi_sum).add_to(pauli_sum)
    >>> z11 = PauliCode()
    >>> z11.set(11, Pauli.Z)
    >>> pauli_sum.coeff(PauliCode()), pauli_sum.coeff(z11)
    (0.5, -0.5)
    """

    def __init__(self, fermi_sum: SumRepr, code_type: Type[PauliCode] = PauliCode) -> None:
        if not (isinstance(code_type, type) and issubclass(code_type, PauliCode)):
            raise TypeError(f"code_type must be a PauliCode subclass, got {code_type!r}")
        self.fermi_sum = fermi_sum
        self.code_type = code_type

    def add_to(self, pauli_sum: SumRepr) -> None:
        """
        Add the image of every term into `pauli_sum`.

        Terms are processed one at a time. A term whose indices do not fit
        the register raises before any of its contributions are added; terms
        processed earlier stay in `pauli_sum`.

        Raises
        ------
        QubitIndexError:
            If a term references an orbital index >= ``code_type.width``.
        TypeError:
            In debug mode, if the input holds codes that are not
            FermionTerm instances.
        """
        debug = is_debug_enabled()
        size_before = len(pauli_sum)
        for term, coeff in self.fermi_sum:
            if debug:
                if not isinstance(term, FermionTerm):
                    raise TypeError(
                        f"fermionic sum holds a {type(term).__name__} code: {term!r}"
                    )
                logger.debug("mapping term %s with coefficient %r", term, coeff)
            for code, weight in term_contributions(term, coeff, self.code_type):
                pauli_sum.add_term(code, weight)

        logger.debug(
            "Jordan-Wigner mapped %d fermionic terms, output grew from %d to %d codes",
            len(self.fermi_sum),
            size_before,
            len(pauli_sum),
        )


def jordan_wigner(
    fermi_sum: SumRepr,
    dtype: Optional[type] = None,
    code_type: Type[PauliCode] = PauliCode,
) -> SumRepr:
    """
    Map a fermionic sum to a fresh sum of Pauli codes.

    Parameters
    ----------
    fermi_sum:
        Sum of :class:`FermionTerm` codes.
    dtype:
        Coefficient type of the result (e.g. ``np.float32``). Defaults to
        the input's dtype.
    code_type:
        PauliCode subclass for the output codes.

    Returns
    -------
    SumRepr
        Qubit Hamiltonian.

    Raises
    ------
    QubitIndexError:
        If any orbital index does not fit the register.
    """
    if dtype is None:
        dtype = fermi_sum.dtype
    pauli_sum = SumRepr.with_capacity(8 * len(fermi_sum), dtype=dtype)
    JordanWigner(fermi_sum, code_type=code_type).add_to(pauli_sum)
    return pauli_sum


__all__ = ["JordanWigner", "jordan_wigner", "term_contributions"]
