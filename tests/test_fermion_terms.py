"""Tests for fermionic terms and their constructors."""

from __future__ import annotations

import pytest

from fqmap.fermion.orbital import Orbital
from fqmap.fermion.terms import (
    FermionTerm,
    Offset,
    OneElectron,
    TwoElectron,
    offset,
    one_electron,
    two_electron,
)


class TestOneElectron:
    """Tests for one-electron terms."""

    def test_valid_orderings(self):
        assert one_electron(Orbital(1), Orbital(1)) == OneElectron(Orbital(1), Orbital(1))
        assert one_electron(1, 3) == OneElectron(Orbital(1), Orbital(3))

    def test_invalid_ordering_is_none(self):
        assert one_electron(3, 1) is None
        assert one_electron(Orbital(5), Orbital(0)) is None

    def test_direct_construction_validates(self):
        with pytest.raises(ValueError, match="cr <= an"):
            OneElectron(Orbital(3), Orbital(1))

    def test_accepts_plain_indices(self):
        term = OneElectron(2, 4)
        assert term.cr == Orbital(2)
        assert term.an == Orbital(4)

    def test_indices(self):
        term = one_electron(2, 7)
        assert term.indices() == (2, 7)
        assert term.max_index() == 7

    def test_self_adjoint(self):
        assert one_electron(4, 4).is_self_adjoint()
        assert not one_electron(4, 5).is_self_adjoint()

    def test_str(self):
        assert str(one_electron(0, 1)) == "[0, 1]"


class TestTwoElectron:
    """Tests for two-electron terms."""

    def test_valid_orderings(self):
        term = two_electron((0, 1), (1, 0))
        assert term == TwoElectron((Orbital(0), Orbital(1)), (Orbital(1), Orbital(0)))

    @pytest.mark.parametrize(
        "cr, an",
        [
            ((1, 0), (1, 0)),
            ((0, 0), (1, 0)),
            ((0, 1), (0, 1)),
            ((0, 1), (1, 1)),
            ((2, 1), (0, 1)),
        ],
    )
    def test_invalid_ordering_is_none(self, cr, an):
        assert two_electron(cr, an) is None

    def test_direct_construction_validates(self):
        with pytest.raises(ValueError, match=r"cr\[0\] < cr\[1\]"):
            TwoElectron((1, 0), (1, 0))
        with pytest.raises(ValueError, match=r"an\[0\] > an\[1\]"):
            TwoElectron((0, 1), (0, 1))

    def test_wrong_arity(self):
        with pytest.raises(ValueError, match="two creation and two annihilation"):
            TwoElectron((0, 1, 2), (1, 0))

    def test_pairs_need_not_be_disjoint(self):
        assert two_electron((0, 2), (2, 1)) is not None
        assert two_electron((0, 1), (2, 0)) is not None

    def test_indices(self):
        term = two_electron((11, 32), (31, 19))
        assert term.indices() == (11, 32, 31, 19)
        assert term.max_index() == 32

    def test_self_adjoint(self):
        assert two_electron((0, 1), (1, 0)).is_self_adjoint()
        assert not two_electron((0, 1), (2, 0)).is_self_adjoint()
        assert not two_electron((0, 2), (2, 1)).is_self_adjoint()

    def test_str(self):
        assert str(two_electron((0, 1), (3, 2))) == "[0, 1, 3, 2]"


class TestOffset:
    """Tests for the constant term."""

    def test_offset(self):
        assert offset() == Offset()
        assert Offset().indices() == ()
        assert Offset().max_index() is None
        assert Offset().is_self_adjoint()
        assert str(Offset()) == "[]"


def test_structural_equality_and_hashing():
    table = {
        Offset(): 1.0,
        one_electron(0, 1): 2.0,
        two_electron((0, 1), (1, 0)): 3.0,
    }
    assert table[Offset()] == 1.0
    assert table[one_electron(Orbital(0), Orbital(1))] == 2.0
    assert table[two_electron((Orbital(0), 1), (1, Orbital(0)))] == 3.0


def test_variants_are_distinct():
    assert one_electron(0, 0) != Offset()
    assert one_electron(0, 1) != two_electron((0, 1), (1, 0))


def test_all_variants_are_fermion_terms():
    for term in [Offset(), one_electron(0, 1), two_electron((0, 1), (1, 0))]:
        assert isinstance(term, FermionTerm)


def test_terms_are_frozen():
    term = one_electron(0, 1)
    with pytest.raises(Exception):
        term.cr = Orbital(2)


@pytest.mark.parametrize(
    "build",
    [
        lambda: one_electron(1.5, 2),
        lambda: one_electron(1.9, 2),
        lambda: two_electron((0.5, 1), (2, 0)),
        lambda: OneElectron(0, 2.0),
        lambda: TwoElectron((0, 1), (2.0, 0)),
    ],
)
def test_non_integer_indices_rejected(build):
    with pytest.raises(TypeError):
        build()
