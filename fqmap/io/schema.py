"""JSON schema definition and validation for operator sums.

Schema Structure:
    {
        "type": "sumrepr",
        "encoding": "fermions" | "qubits",
        "terms": [
            {
                "code": <code>,
                "value": <number>,
            },
            ...
        ]
    }

Code encodings:
    - "qubits": string of I/X/Y/Z, qubit 0 first, trailing identities
      truncated, 1..64 characters.
    - "fermions": list of orbital indices, [], [p, q] or [p, q, r, s].
"""

from __future__ import annotations

ENCODINGS = ("fermions", "qubits")


def sumrepr_schema() -> dict:
    """
    Return the structural schema (as a Python dict) for serialized sums.

    This is a field description, not a full JSON Schema validator.

    Returns
    -------
    dict
        Schema description with field definitions and constraints.
    """
    return {
        "type": {
            "type": "string",
            "description": "Document type, always 'sumrepr'",
            "required": True,
        },
        "encoding": {
            "type": "string",
            "description": "Code encoding: 'fermions' or 'qubits'",
            "required": True,
            "enum": list(ENCODINGS),
        },
        "terms": {
            "type": "list",
            "description": "Weighted codes; repeated codes accumulate on load",
            "required": True,
            "items": {
                "code": {
                    "type": "string | list",
                    "description": "Pauli string (qubits) or orbital index list (fermions)",
                    "required": True,
                },
                "value": {
                    "type": "number",
                    "description": "Real coefficient",
                    "required": True,
                },
            },
        },
    }


def validate_json_sumrepr(obj: dict) -> None:
    """
    Validate a serialized sum against the schema.

    Performs structural validation only: required fields, types and the
    shape of each code. Decoding a code can still fail afterwards, e.g. on
    a fermion term in non-canonical order.

    Parameters
    ----------
    obj : dict
        JSON object to validate.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON sum must be a dictionary object.")

    if "type" not in obj:
        raise ValueError("JSON sum missing required field 'type'.")
    if obj["type"] != "sumrepr":
        raise ValueError(f"Field 'type' must be 'sumrepr', got {obj['type']!r}.")

    if "encoding" not in obj:
        raise ValueError("JSON sum missing required field 'encoding'.")
    if obj["encoding"] not in ENCODINGS:
        raise ValueError(
            f"Field 'encoding' must be one of {list(ENCODINGS)}, got {obj['encoding']!r}."
        )

    if "terms" not in obj:
        raise ValueError("JSON sum missing required field 'terms'.")
    if not isinstance(obj["terms"], list):
        raise ValueError("Field 'terms' must be a list.")

    for i, item in enumerate(obj["terms"]):
        if not isinstance(item, dict):
            raise ValueError(f"Term at index {i} must be a dictionary object.")

        if "code" not in item:
            raise ValueError(f"Term at index {i} missing required field 'code'.")
        code = item["code"]
        if obj["encoding"] == "qubits":
            if not isinstance(code, str):
                raise ValueError(
                    f"Term at index {i}: field 'code' must be a string, "
                    f"got {type(code).__name__}."
                )
        else:
            if not isinstance(code, list):
                raise ValueError(
                    f"Term at index {i}: field 'code' must be a list, "
                    f"got {type(code).__name__}."
                )
            if len(code) not in (0, 2, 4):
                raise ValueError(
                    f"Term at index {i}: field 'code' must list 0, 2 or 4 "
                    f"orbital indices, got {len(code)}."
                )

        if "value" not in item:
            raise ValueError(f"Term at index {i} missing required field 'value'.")
        value = item["value"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(
                f"Term at index {i}: field 'value' must be a number, "
                f"got {type(value).__name__}."
            )


__all__ = ["ENCODINGS", "sumrepr_schema", "validate_json_sumrepr"]
