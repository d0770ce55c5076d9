"""fqmap - fermionic Hamiltonians mapped to sums of Pauli strings."""

__version__ = "0.1.0"

# Core containers and errors
from .config import debug_context, is_debug_enabled, set_debug_enabled
from .core import QubitIndexError, SumRepr

# Exact (dense) verification
from .exact import exact_spectrum, fermion_sum_to_dense, pauli_sum_to_dense

# Fermionic terms and mappings
from .fermion import (
    ORBITAL_INDEX_MAX,
    FermionTerm,
    JordanWigner,
    Offset,
    OneElectron,
    Orbital,
    Spin,
    TwoElectron,
    jordan_wigner,
    offset,
    one_electron,
    two_electron,
)

# Random and exhaustive Hamiltonians
from .generate import full_fermi_sum, random_fermi_sum, random_pauli_sum

# I/O
from .io import dump_json_sumrepr, json_to_sumrepr, load_json_sumrepr, sumrepr_to_json

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Pauli strings
from .operators import Pauli, PauliCode, PauliGroup, Root4, WidePauliCode

__all__ = [
    "__version__",
    # Config
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Core
    "QubitIndexError",
    "SumRepr",
    # Pauli strings
    "Pauli",
    "PauliCode",
    "WidePauliCode",
    "Root4",
    "PauliGroup",
    # Fermions
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
    # Exact
    "pauli_sum_to_dense",
    "fermion_sum_to_dense",
    "exact_spectrum",
    # Generators
    "random_fermi_sum",
    "random_pauli_sum",
    "full_fermi_sum",
    # I/O
    "sumrepr_to_json",
    "json_to_sumrepr",
    "dump_json_sumrepr",
    "load_json_sumrepr",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
