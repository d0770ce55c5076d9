"""Performance benchmarks for fqmap.

This package contains microbenchmarks for the Jordan-Wigner mapping on
random and exhaustive fermionic Hamiltonians.
"""
