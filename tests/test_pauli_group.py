"""Tests for the Pauli group and fourth roots of unity."""

from __future__ import annotations

import pytest

from fqmap.operators.group import PauliGroup, Root4
from fqmap.operators.pauli import Pauli, PauliCode, WidePauliCode

I, X, Y, Z = Pauli.I, Pauli.X, Pauli.Y, Pauli.Z
R0, R1, R2, R3 = Root4.R0, Root4.R1, Root4.R2, Root4.R3


def test_root4_identity():
    assert Root4.identity() is R0


def test_root4_inverse():
    assert R0.inverse() is R0
    assert R1.inverse() is R1
    assert R2.inverse() is R3
    assert R3.inverse() is R2


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (R0, R0, R0),
        (R0, R1, R1),
        (R0, R2, R2),
        (R0, R3, R3),
        (R1, R1, R0),
        (R1, R2, R3),
        (R1, R3, R2),
        (R2, R1, R3),
        (R2, R2, R1),
        (R2, R3, R0),
        (R3, R1, R2),
        (R3, R2, R0),
        (R3, R3, R1),
    ],
)
def test_root4_mul(a, b, expected):
    assert a * b is expected


def test_root4_neg_and_conj():
    assert -R0 is R1
    assert -R2 is R3
    assert R2.conj() is R3
    assert R1.conj() is R1


def test_root4_complex_roundtrip():
    for root in Root4:
        assert Root4.from_complex(root.to_complex()) is root
    with pytest.raises(ValueError, match="not a fourth root of unity"):
        Root4.from_complex(2.0)


def test_group_identity():
    e = PauliGroup.identity()
    for halves in [(0, 0), (1, 2), (12345, 67890)]:
        g = PauliGroup.from_code(PauliCode.from_halves(*halves))
        assert e * g == g
        assert g * e == g


def test_group_roots():
    e = PauliGroup.identity()
    for root in Root4:
        assert e * PauliGroup.from_root(root) == PauliGroup.from_root(root)
        assert PauliGroup.from_root(root) * e == PauliGroup.from_root(root)


def test_group_self_inverse():
    g = PauliGroup(R0, PauliCode.from_paulis([X, Y, Z]))
    assert g * g == PauliGroup.identity()


def test_group_commuting_product():
    g = PauliGroup(R0, PauliCode.from_paulis([X, Y, Z]))
    h = PauliGroup(R0, PauliCode.from_paulis([X]))
    assert g * h == PauliGroup(R0, PauliCode.from_paulis([I, Y, Z]))
    assert h * g == PauliGroup(R0, PauliCode.from_paulis([I, Y, Z]))


def test_group_anticommuting_product():
    g = PauliGroup(R0, PauliCode.from_paulis([X, Y, Z]))
    h = PauliGroup(R0, PauliCode.from_paulis([Y]))
    assert g * h == PauliGroup(R2, PauliCode.from_paulis([Z, Y, Z]))
    assert h * g == PauliGroup(R3, PauliCode.from_paulis([Z, Y, Z]))


def test_group_inverse():
    g = PauliGroup(R2, PauliCode.from_paulis([X, Z]))
    assert g * g.inverse() == PauliGroup.identity()
    assert -g == PauliGroup(R3, PauliCode.from_paulis([X, Z]))


def test_group_wide_codes():
    g = PauliGroup.from_code(WidePauliCode.from_paulis([I] * 100 + [X]))
    h = PauliGroup.from_code(WidePauliCode.from_paulis([I] * 100 + [Z]))
    product = g * h
    assert product.root is R3
    assert product.code.pauli(100) is Y
    assert isinstance(product.code, WidePauliCode)


def test_group_mixed_widths_rejected():
    with pytest.raises(ValueError, match="Cannot multiply"):
        PauliGroup.from_code(PauliCode()) * PauliGroup.from_code(WidePauliCode())


def test_group_is_hashable():
    g = PauliGroup(R1, PauliCode.from_paulis([Y]))
    assert {g: 1}[PauliGroup(R1, PauliCode.from_paulis([Y]))] == 1
