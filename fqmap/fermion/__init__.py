"""Fermionic terms and the Jordan-Wigner mapping."""

from .mappings import JordanWigner, jordan_wigner, term_contributions
from .orbital import ORBITAL_INDEX_MAX, Orbital, Spin
from .terms import (
    FermionTerm,
    Offset,
    OneElectron,
    TwoElectron,
    offset,
    one_electron,
    two_electron,
)

__all__ = [
    "ORBITAL_INDEX_MAX",
    "Spin",
    "Orbital",
    "FermionTerm",
    "Offset",
    "OneElectron",
    "TwoElectron",
    "offset",
    "one_electron",
    "two_electron",
    "JordanWigner",
    "jordan_wigner",
    "term_contributions",
]
