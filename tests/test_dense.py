"""Dense-matrix cross-checks of the Jordan-Wigner mapping."""

from __future__ import annotations

import pytest
import torch

from fqmap.core.errors import QubitIndexError
from fqmap.core.sumrepr import SumRepr
from fqmap.exact import (
    annihilation_matrix,
    exact_spectrum,
    fermion_sum_to_dense,
    pauli_code_to_dense,
    pauli_sum_to_dense,
)
from fqmap.fermion.mappings import jordan_wigner
from fqmap.fermion.terms import Offset, one_electron, two_electron
from fqmap.operators.pauli import Pauli, PauliCode

I2 = torch.eye(2, dtype=torch.complex128)
X2 = torch.tensor([[0, 1], [1, 0]], dtype=torch.complex128)
Z2 = torch.tensor([[1, 0], [0, -1]], dtype=torch.complex128)

N_MODES = 4


def _assert_same_operator(fermi_sum: SumRepr, n_modes: int = N_MODES) -> None:
    expected = fermion_sum_to_dense(fermi_sum, n_modes)
    actual = pauli_sum_to_dense(jordan_wigner(fermi_sum), n_modes)
    assert torch.allclose(actual, expected, atol=1e-12)


class TestPauliDense:
    """Tests for dense Pauli strings and sums."""

    def test_little_endian(self):
        code = PauliCode.from_paulis([Pauli.X])
        assert torch.allclose(pauli_code_to_dense(code, 2), torch.kron(I2, X2))

        code = PauliCode.from_paulis([Pauli.I, Pauli.Z])
        assert torch.allclose(pauli_code_to_dense(code, 2), torch.kron(Z2, I2))

    def test_sum(self):
        pauli_sum = SumRepr()
        pauli_sum.add_term(PauliCode(), 2.0)
        pauli_sum.add_term(PauliCode.from_paulis([Pauli.Z]), -1.0)
        H = pauli_sum_to_dense(pauli_sum, 1)
        assert torch.allclose(H, torch.diag(torch.tensor([1.0, 3.0], dtype=torch.complex128)))

    def test_empty_sum_is_zero(self):
        H = pauli_sum_to_dense(SumRepr(), 3)
        assert H.shape == (8, 8)
        assert torch.count_nonzero(H) == 0

    def test_code_beyond_register(self):
        code = PauliCode.from_paulis([Pauli.I, Pauli.I, Pauli.X])
        with pytest.raises(QubitIndexError):
            pauli_code_to_dense(code, 2)

    @pytest.mark.parametrize("n", [0, 11])
    def test_size_limits(self, n):
        with pytest.raises(ValueError, match="n_qubits"):
            pauli_sum_to_dense(SumRepr(), n)


class TestFermionDense:
    """Tests for the occupation-basis builders."""

    def test_annihilation_on_mode_zero(self):
        a0 = annihilation_matrix(0, 1)
        expected = torch.tensor([[0, 1], [0, 0]], dtype=torch.complex128)
        assert torch.allclose(a0, expected)

    def test_annihilation_parity_sign(self):
        a1 = annihilation_matrix(1, 2)
        # |11> (index 3) -> -|01> (index 1)
        assert a1[1, 3] == -1
        # |10> (index 2) -> |00>
        assert a1[0, 2] == 1

    def test_anticommutation(self):
        a = [annihilation_matrix(p, 3) for p in range(3)]
        eye = torch.eye(8, dtype=torch.complex128)
        for p in range(3):
            for q in range(3):
                anti = a[p] @ a[q].conj().T + a[q].conj().T @ a[p]
                assert torch.allclose(anti, eye if p == q else torch.zeros_like(eye))

    def test_number_operator(self):
        fermi_sum = SumRepr()
        fermi_sum.add_term(one_electron(1, 1), 1.0)
        H = fermion_sum_to_dense(fermi_sum, 2)
        expected = torch.diag(torch.tensor([0, 0, 1, 1], dtype=torch.complex128))
        assert torch.allclose(H, expected)

    def test_hopping_term_is_hermitian(self):
        fermi_sum = SumRepr()
        fermi_sum.add_term(one_electron(0, 2), 0.7)
        H = fermion_sum_to_dense(fermi_sum, 3)
        assert torch.allclose(H, H.conj().T)

    def test_mode_beyond_register(self):
        fermi_sum = SumRepr()
        fermi_sum.add_term(one_electron(0, 3), 1.0)
        with pytest.raises(QubitIndexError):
            fermion_sum_to_dense(fermi_sum, 3)


@pytest.mark.parametrize(
    "term",
    [
        Offset(),
        one_electron(0, 0),
        one_electron(3, 3),
        one_electron(0, 1),
        one_electron(0, 3),
        one_electron(1, 3),
        two_electron((0, 2), (2, 0)),
        two_electron((1, 3), (3, 1)),
        two_electron((0, 2), (2, 1)),
        two_electron((0, 3), (3, 1)),
        two_electron((0, 3), (3, 2)),
        two_electron((0, 1), (3, 2)),
    ],
)
def test_jordan_wigner_matches_fermion_operator(term):
    fermi_sum = SumRepr()
    fermi_sum.add_term(term, 0.37)
    _assert_same_operator(fermi_sum)


def test_jordan_wigner_matches_weighted_sum(rng):
    terms = [
        Offset(),
        one_electron(0, 0),
        one_electron(1, 1),
        one_electron(2, 2),
        one_electron(0, 2),
        one_electron(1, 3),
        two_electron((0, 1), (1, 0)),
        two_electron((2, 3), (3, 2)),
        two_electron((0, 3), (3, 1)),
        two_electron((0, 1), (3, 2)),
    ]
    fermi_sum = SumRepr()
    for term in terms:
        fermi_sum.add_term(term, float(rng.uniform(-1.0, 1.0)))
    _assert_same_operator(fermi_sum)

    spectrum_f = exact_spectrum(fermion_sum_to_dense(fermi_sum, N_MODES))
    spectrum_q = exact_spectrum(pauli_sum_to_dense(jordan_wigner(fermi_sum), N_MODES))
    assert torch.allclose(spectrum_f, spectrum_q, atol=1e-10)


def test_exact_spectrum_sorted():
    pauli_sum = SumRepr()
    pauli_sum.add_term(PauliCode.from_paulis([Pauli.Z]), 1.0)
    pauli_sum.add_term(PauliCode.from_paulis([Pauli.X]), 1.0)
    evals = exact_spectrum(pauli_sum_to_dense(pauli_sum, 1))
    expected = torch.tensor([-(2**0.5), 2**0.5], dtype=evals.dtype)
    assert torch.allclose(evals, expected)


def test_exact_spectrum_requires_square():
    with pytest.raises(ValueError, match="square"):
        exact_spectrum(torch.zeros(2, 3))
