"""JSON import/export of operator sums."""

from .codes import (
    decode_fermion_term,
    decode_pauli_code,
    encode_fermion_term,
    encode_pauli_code,
)
from .json_sumrepr import (
    dump_json_sumrepr,
    json_to_sumrepr,
    load_json_sumrepr,
    sumrepr_to_json,
)
from .schema import sumrepr_schema, validate_json_sumrepr

__all__ = [
    "encode_pauli_code",
    "decode_pauli_code",
    "encode_fermion_term",
    "decode_fermion_term",
    "sumrepr_to_json",
    "json_to_sumrepr",
    "dump_json_sumrepr",
    "load_json_sumrepr",
    "sumrepr_schema",
    "validate_json_sumrepr",
]
