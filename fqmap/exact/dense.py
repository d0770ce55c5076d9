"""Dense matrices of small operator sums.

Both builders use the little-endian convention: qubit (mode) 0 is the least
significant bit of the basis index, so a product ``P_{n-1} ... P_0`` is
expanded as ``P_{n-1} ⊗ ... ⊗ P_0``. An occupied mode is the state ``|1>``.
"""

from __future__ import annotations

from typing import Optional

import torch

from fqmap.core.errors import QubitIndexError
from fqmap.core.sumrepr import SumRepr
from fqmap.fermion.terms import FermionTerm
from fqmap.operators.pauli import Pauli, PauliCode

MAX_DENSE_QUBITS = 10


def _check_size(name: str, n: int) -> None:
    if not 1 <= n <= MAX_DENSE_QUBITS:
        raise ValueError(f"{name} must be between 1 and {MAX_DENSE_QUBITS}, got {n}")


def _pauli_matrix(pauli: Pauli, dtype: torch.dtype, device: torch.device) -> torch.Tensor:
    """
    2x2 matrix of a single-qubit Pauli operator.
    """
    if pauli == Pauli.I:
        data = [[1, 0], [0, 1]]
    elif pauli == Pauli.X:
        data = [[0, 1], [1, 0]]
    elif pauli == Pauli.Y:
        data = [[0, -1j], [1j, 0]]
    else:
        data = [[1, 0], [0, -1]]
    return torch.tensor(data, dtype=dtype, device=device)


def pauli_code_to_dense(
    code: PauliCode,
    n_qubits: int,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.complex128,
) -> torch.Tensor:
    """
    Dense matrix of a single Pauli string on `n_qubits` qubits.

    Raises
    ------
    ValueError:
        If n_qubits is not in 1..MAX_DENSE_QUBITS.
    QubitIndexError:
        If the code acts on a qubit >= n_qubits.
    """
    _check_size("n_qubits", n_qubits)
    if device is None:
        device = torch.device("cpu")
    size = code.min_register_size()
    if size > n_qubits:
        raise QubitIndexError(
            size - 1, n_qubits, f"code {code} acts on qubit {size - 1}, beyond n_qubits={n_qubits}"
        )

    matrix = _pauli_matrix(code.pauli_unchecked(n_qubits - 1), dtype, device)
    for i in range(n_qubits - 2, -1, -1):
        matrix = torch.kron(matrix, _pauli_matrix(code.pauli_unchecked(i), dtype, device))
    return matrix


def pauli_sum_to_dense(
    pauli_sum: SumRepr,
    n_qubits: int,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.complex128,
) -> torch.Tensor:
    """
    Convert a sum of Pauli codes into a dense matrix of shape
    (2**n_qubits, 2**n_qubits).

    Parameters
    ----------
    pauli_sum:
        SumRepr keyed by PauliCode.
    n_qubits:
        Number of qubits, 1..MAX_DENSE_QUBITS.
    device:
        Optional torch device (default: CPU).
    dtype:
        Complex dtype for the matrix (default: complex128).

    Returns
    -------
    torch.Tensor
        Dense matrix of the sum. Hermitian, since coefficients are real.

    Raises
    ------
    ValueError:
        If n_qubits is out of range.
    QubitIndexError:
        If a code acts on a qubit >= n_qubits.
    """
    _check_size("n_qubits", n_qubits)
    if device is None:
        device = torch.device("cpu")

    dim = 1 << n_qubits
    H = torch.zeros((dim, dim), dtype=dtype, device=device)
    for code, coeff in pauli_sum:
        H = H + float(coeff) * pauli_code_to_dense(code, n_qubits, device=device, dtype=dtype)
    return H


def annihilation_matrix(
    mode: int,
    n_modes: int,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.complex128,
) -> torch.Tensor:
    """
    Matrix of ``a_mode`` in the occupation-number basis.

    ``a_p |..., n_p = 1, ...> = (-1)^(n_0 + ... + n_{p-1}) |..., n_p = 0, ...>``.

    Raises
    ------
    QubitIndexError:
        If mode is not in 0..n_modes-1.
    """
    _check_size("n_modes", n_modes)
    if not 0 <= mode < n_modes:
        raise QubitIndexError(mode, n_modes)
    if device is None:
        device = torch.device("cpu")

    dim = 1 << n_modes
    matrix = torch.zeros((dim, dim), dtype=dtype, device=device)
    below = (1 << mode) - 1
    for state in range(dim):
        if state >> mode & 1:
            sign = -1.0 if bin(state & below).count("1") % 2 else 1.0
            matrix[state ^ (1 << mode), state] = sign
    return matrix


def fermion_term_to_dense(
    term: FermionTerm,
    n_modes: int,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.complex128,
) -> torch.Tensor:
    """
    Matrix of the bare operator product of `term`, without its conjugate.

    Creation operators act on the indices listed first.
    """
    _check_size("n_modes", n_modes)
    if device is None:
        device = torch.device("cpu")

    indices = term.indices()
    n_cr = len(indices) // 2
    matrix = torch.eye(1 << n_modes, dtype=dtype, device=device)
    for k, mode in enumerate(indices):
        a = annihilation_matrix(mode, n_modes, device=device, dtype=dtype)
        ladder = a.conj().T if k < n_cr else a
        matrix = matrix @ ladder
    return matrix


def fermion_sum_to_dense(
    fermi_sum: SumRepr,
    n_modes: int,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.complex128,
) -> torch.Tensor:
    """
    Dense matrix of a fermionic sum on `n_modes` spin-orbitals.

    A term that is not self-adjoint contributes ``c * (op + op†)``; a
    self-adjoint one contributes ``c * op``.

    Raises
    ------
    ValueError:
        If n_modes is out of range.
    QubitIndexError:
        If a term references a mode >= n_modes.
    """
    _check_size("n_modes", n_modes)
    if device is None:
        device = torch.device("cpu")

    dim = 1 << n_modes
    H = torch.zeros((dim, dim), dtype=dtype, device=device)
    for term, coeff in fermi_sum:
        op = fermion_term_to_dense(term, n_modes, device=device, dtype=dtype)
        if not term.is_self_adjoint():
            op = op + op.conj().T
        H = H + float(coeff) * op
    return H


def exact_spectrum(matrix: torch.Tensor) -> torch.Tensor:
    """
    Eigenvalues of a Hermitian matrix in ascending order.

    Raises
    ------
    ValueError:
        If matrix is not square.
    """
    if matrix.dim() != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {tuple(matrix.shape)}")
    return torch.linalg.eigvalsh(matrix)


__all__ = [
    "MAX_DENSE_QUBITS",
    "pauli_code_to_dense",
    "pauli_sum_to_dense",
    "annihilation_matrix",
    "fermion_term_to_dense",
    "fermion_sum_to_dense",
    "exact_spectrum",
]
