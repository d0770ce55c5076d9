"""Dense matrices and spectra of small operator sums."""

from .dense import (
    MAX_DENSE_QUBITS,
    annihilation_matrix,
    exact_spectrum,
    fermion_sum_to_dense,
    fermion_term_to_dense,
    pauli_code_to_dense,
    pauli_sum_to_dense,
)

__all__ = [
    "MAX_DENSE_QUBITS",
    "pauli_code_to_dense",
    "pauli_sum_to_dense",
    "annihilation_matrix",
    "fermion_term_to_dense",
    "fermion_sum_to_dense",
    "exact_spectrum",
]
