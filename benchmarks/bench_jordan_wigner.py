"""Benchmark the Jordan-Wigner mapping."""

import time
from typing import Dict

import numpy as np

from fqmap.fermion.mappings import jordan_wigner
from fqmap.generate import full_fermi_sum, random_fermi_sum


def benchmark_random_sum(
    num_terms: int,
    max_orbital_index: int = 63,
    repeats: int = 5,
) -> Dict[str, float]:
    """Benchmark mapping a random fermionic sum.

    Args:
        num_terms: Number of random draws.
        max_orbital_index: Largest orbital index.
        repeats: Number of timed mappings.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    fermi_sum = random_fermi_sum(num_terms, max_orbital_index, rng=rng)

    # Warmup
    pauli_sum = jordan_wigner(fermi_sum)

    start = time.perf_counter()
    for _ in range(repeats):
        jordan_wigner(fermi_sum)
    total_time = time.perf_counter() - start

    return {
        "n_fermion_terms": len(fermi_sum),
        "n_pauli_terms": len(pauli_sum),
        "time_per_map_sec": total_time / repeats,
        "terms_per_sec": repeats * len(fermi_sum) / total_time,
    }


def benchmark_full_sum(n_orbitals: int) -> Dict[str, float]:
    """Benchmark mapping every canonical term over `n_orbitals` orbitals."""
    rng = np.random.default_rng(0)

    start = time.perf_counter()
    fermi_sum = full_fermi_sum(n_orbitals, rng=rng)
    generate_time = time.perf_counter() - start

    start = time.perf_counter()
    pauli_sum = jordan_wigner(fermi_sum)
    map_time = time.perf_counter() - start

    return {
        "n_orbitals": n_orbitals,
        "n_fermion_terms": len(fermi_sum),
        "n_pauli_terms": len(pauli_sum),
        "generate_time_sec": generate_time,
        "map_time_sec": map_time,
    }


if __name__ == "__main__":
    print("Benchmarking Jordan-Wigner mapping...")

    for n in [1_000, 10_000, 100_000]:
        results = benchmark_random_sum(num_terms=n)
        print(f"Random sum ({n} draws, 64 orbitals):")
        print(f"  Time per mapping: {results['time_per_map_sec']*1e3:.2f} ms")
        print(f"  Terms per second: {results['terms_per_sec']:.0f}")

    for n in [8, 16, 24]:
        results = benchmark_full_sum(n)
        print(f"Full sum ({n} orbitals, {results['n_fermion_terms']} terms):")
        print(f"  Generation: {results['generate_time_sec']:.3f} s")
        print(f"  Mapping: {results['map_time_sec']:.3f} s -> {results['n_pauli_terms']} Pauli strings")
