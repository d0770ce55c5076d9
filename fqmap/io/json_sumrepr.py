"""JSON import and export for operator sums.

See schema.py for the document format.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Type

from fqmap.core.sumrepr import SumRepr
from fqmap.logging import get_logger
from fqmap.operators.pauli import PauliCode

from .codes import (
    decode_fermion_term,
    decode_pauli_code,
    encode_fermion_term,
    encode_pauli_code,
)
from .schema import ENCODINGS, validate_json_sumrepr

logger = get_logger(__name__)


def sumrepr_to_json(repr: SumRepr, encoding: Optional[str] = None) -> dict:
    """
    Convert a SumRepr to its JSON document.

    Parameters
    ----------
    repr : SumRepr
        Sum of FermionTerm or PauliCode codes.
    encoding : str, optional
        "fermions" or "qubits". Inferred from the codes when omitted; it
        must be given for an empty sum.

    Returns
    -------
    dict
        JSON object following the schema defined in schema.py. Terms are
        sorted by code so equal sums serialize identically.

    Raises
    ------
    ValueError
        If the encoding cannot be inferred or does not match the codes, or
        a coefficient is NaN or infinite.
    """
    inferred = repr.encoding
    if encoding is None:
        if inferred is None:
            raise ValueError(
                "Cannot infer the encoding of an empty or mixed sum; pass encoding="
                f"one of {list(ENCODINGS)}."
            )
        encoding = inferred
    if encoding not in ENCODINGS:
        raise ValueError(f"encoding must be one of {list(ENCODINGS)}, got {encoding!r}")
    if len(repr) > 0 and inferred != encoding:
        raise ValueError(f"Sum holds {inferred or 'mixed'} codes, not {encoding}.")

    for code, value in repr:
        if not math.isfinite(float(value)):
            raise ValueError(f"Coefficient of {code} is not finite: {value!r}")

    terms: List[Dict[str, Any]] = []
    if encoding == "qubits":
        for code, value in sorted(repr, key=lambda item: item[0]):
            terms.append({"code": encode_pauli_code(code), "value": float(value)})
    else:
        for code, value in sorted(
            repr, key=lambda item: (len(item[0].indices()), item[0].indices())
        ):
            terms.append({"code": encode_fermion_term(code), "value": float(value)})

    return {"type": "sumrepr", "encoding": encoding, "terms": terms}


def json_to_sumrepr(
    obj: dict,
    dtype: Optional[type] = None,
    code_type: Type[PauliCode] = PauliCode,
) -> SumRepr:
    """
    Convert a JSON document to a SumRepr.

    Repeated codes accumulate.

    Parameters
    ----------
    obj : dict
        JSON object following the schema defined in schema.py.
    dtype : type, optional
        Coefficient type of the result.
    code_type : type, optional
        PauliCode subclass for "qubits" documents.

    Returns
    -------
    SumRepr
        Reconstructed sum.

    Raises
    ------
    ValueError
        If the object is invalid or a code cannot be decoded.
    """
    validate_json_sumrepr(obj)

    repr = SumRepr.with_capacity(len(obj["terms"]), dtype=dtype)
    for i, item in enumerate(obj["terms"]):
        try:
            if obj["encoding"] == "qubits":
                code = decode_pauli_code(item["code"], code_type)
            else:
                code = decode_fermion_term(item["code"])
        except ValueError as e:
            raise ValueError(f"Term at index {i}: {e}") from e
        repr.add_term(code, item["value"])

    logger.debug(
        "decoded %d %s terms into %d codes", len(obj["terms"]), obj["encoding"], len(repr)
    )
    return repr


def dump_json_sumrepr(
    repr: SumRepr,
    path: str,
    indent: Optional[int] = 2,
    encoding: Optional[str] = None,
) -> None:
    """
    Write a SumRepr to a JSON file.

    Parameters
    ----------
    repr : SumRepr
        Sum to write.
    path : str
        Path to output JSON file.
    indent : int, optional
        Indentation passed to json.dump; None writes a single line.
    encoding : str, optional
        Forwarded to :func:`sumrepr_to_json`.
    """
    obj = sumrepr_to_json(repr, encoding=encoding)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=indent, ensure_ascii=False, allow_nan=False)


def load_json_sumrepr(
    path: str,
    dtype: Optional[type] = None,
    code_type: Type[PauliCode] = PauliCode,
) -> SumRepr:
    """
    Load a SumRepr from a JSON file.

    Parameters
    ----------
    path : str
        Path to input JSON file.

    Returns
    -------
    SumRepr
        Loaded sum.

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not follow the schema.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON sum file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return json_to_sumrepr(obj, dtype=dtype, code_type=code_type)


__all__ = [
    "sumrepr_to_json",
    "json_to_sumrepr",
    "dump_json_sumrepr",
    "load_json_sumrepr",
]
