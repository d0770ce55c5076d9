"""Pauli strings and the Pauli group."""

from .group import PauliGroup, Root4
from .pauli import PAULI_MASK, REGISTER_WIDTH, Pauli, PauliCode, WidePauliCode

__all__ = [
    "PAULI_MASK",
    "REGISTER_WIDTH",
    "Pauli",
    "PauliCode",
    "WidePauliCode",
    "Root4",
    "PauliGroup",
]
