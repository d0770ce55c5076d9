"""Jordan-Wigner example: map a dense fermionic Hamiltonian to qubits.

Builds every canonical one- and two-electron term over a small set of
spin-orbitals, maps the sum to Pauli strings, and checks on a small register
that the qubit Hamiltonian has the same spectrum as the fermionic one.
"""

from __future__ import annotations

import time

import numpy as np
import torch

from fqmap import jordan_wigner
from fqmap.core.sumrepr import SumRepr
from fqmap.exact import exact_spectrum, fermion_sum_to_dense, pauli_sum_to_dense
from fqmap.fermion.terms import Offset, OneElectron, TwoElectron, one_electron, two_electron
from fqmap.generate import full_fermi_sum


def main() -> None:
    """Map a full Hamiltonian and cross-check a small one."""
    rng = np.random.default_rng(0)

    # Configuration
    n_orbitals = 16

    start = time.perf_counter()
    fermi_sum = full_fermi_sum(n_orbitals, rng=rng)
    print(f"Generated {len(fermi_sum)} fermionic terms over {n_orbitals} orbitals "
          f"in {time.perf_counter() - start:.3f} s")

    start = time.perf_counter()
    pauli_sum = jordan_wigner(fermi_sum)
    print(f"Mapped to {len(pauli_sum)} Pauli strings "
          f"in {time.perf_counter() - start:.3f} s")

    # Small system: number operators, hopping and a density-density term
    n_modes = 4
    small = SumRepr()
    small.add_term(Offset(), 0.5)
    for p in range(n_modes):
        small.add_term(one_electron(p, p), float(rng.uniform(-1.0, 1.0)))
    small.add_term(one_electron(0, 2), 0.3)
    small.add_term(one_electron(1, 3), -0.2)
    small.add_term(two_electron((0, 1), (1, 0)), 0.7)
    small.add_term(two_electron((0, 1), (3, 2)), 0.1)

    kinds = {OneElectron: 0, TwoElectron: 0}
    for term in small.codes():
        if type(term) in kinds:
            kinds[type(term)] += 1
    print(f"Small system: {kinds[OneElectron]} one-electron, "
          f"{kinds[TwoElectron]} two-electron terms on {n_modes} modes")

    fermion_levels = exact_spectrum(fermion_sum_to_dense(small, n_modes))
    qubit_levels = exact_spectrum(pauli_sum_to_dense(jordan_wigner(small), n_modes))
    max_diff = torch.max(torch.abs(fermion_levels - qubit_levels)).item()

    print(f"Lowest level (fermions): {fermion_levels[0].item():.6f}")
    print(f"Lowest level (qubits):   {qubit_levels[0].item():.6f}")
    print(f"\nSpectra agree to {max_diff:.2e}")


if __name__ == "__main__":
    main()
