"""Text encodings of operator codes.

- A :class:`~fqmap.operators.pauli.PauliCode` is a string of ``I/X/Y/Z``
  characters, qubit 0 first, with trailing identities truncated (at least
  one character is kept, so the identity is ``"I"``).
- A :class:`~fqmap.fermion.terms.FermionTerm` is the list of its orbital
  indices: ``[]``, ``[p, q]`` or ``[p, q, r, s]``.
"""

from __future__ import annotations

from typing import List, Sequence, Type

from fqmap.fermion.terms import FermionTerm, Offset, OneElectron, TwoElectron
from fqmap.operators.pauli import Pauli, PauliCode


def encode_pauli_code(code: PauliCode) -> str:
    return str(code)


def decode_pauli_code(text: str, code_type: Type[PauliCode] = PauliCode) -> PauliCode:
    """
    Parse a Pauli string such as ``"XZZY"``.

    Raises
    ------
    ValueError:
        If the string is empty, longer than the register width, or contains
        a character other than I, X, Y, Z.
    """
    if not isinstance(text, str):
        raise ValueError(f"Pauli code must be a string, got {type(text).__name__}")
    if not 1 <= len(text) <= code_type.width:
        raise ValueError(
            f"Pauli code length out of range 1..{code_type.width}: {len(text)}"
        )
    return code_type.from_paulis(Pauli.from_label(ch) for ch in text)


def encode_fermion_term(term: FermionTerm) -> List[int]:
    return list(term.indices())


def decode_fermion_term(indices: Sequence[int]) -> FermionTerm:
    """
    Build a term from its list of orbital indices.

    Raises
    ------
    ValueError:
        If the list length is not 0, 2 or 4, an entry is not a non-negative
        integer, or the indices are not in canonical order.
    """
    if not isinstance(indices, (list, tuple)):
        raise ValueError(
            f"fermion term must be a list of orbital indices, got {type(indices).__name__}"
        )
    for i, index in enumerate(indices):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(
                f"orbital index [{i}] must be an integer, got {type(index).__name__}"
            )
        if index < 0:
            raise ValueError(f"orbital index [{i}] must be >= 0, got {index}")

    if len(indices) == 0:
        return Offset()
    if len(indices) == 2:
        return OneElectron(indices[0], indices[1])
    if len(indices) == 4:
        return TwoElectron((indices[0], indices[1]), (indices[2], indices[3]))
    raise ValueError(
        f"fermion term must list 0, 2 or 4 orbital indices, got {len(indices)}"
    )


__all__ = [
    "encode_pauli_code",
    "decode_pauli_code",
    "encode_fermion_term",
    "decode_fermion_term",
]
