"""Tests for spins and spin-orbitals."""

from __future__ import annotations

import numpy as np
import pytest

from fqmap.fermion.orbital import ORBITAL_INDEX_MAX, Orbital, Spin


def test_spin_values():
    assert int(Spin.DOWN) == 0
    assert int(Spin.UP) == 1


def test_orbital_default():
    assert Orbital().index == 0


def test_orbital_from_spatial():
    assert Orbital.from_spatial(3, Spin.DOWN).index == 6
    assert Orbital.from_spatial(8, Spin.UP).index == 17
    assert Orbital.from_spatial(5).spin is Spin.DOWN


def test_orbital_from_spatial_overflow():
    with pytest.raises(ValueError, match="orbital index out of bound"):
        Orbital.from_spatial(2**31, Spin.DOWN)


def test_orbital_from_spatial_negative():
    with pytest.raises(ValueError):
        Orbital.from_spatial(-1, Spin.UP)


def test_orbital_from_index():
    for index in [1, 2, 19]:
        assert Orbital.from_index(index).index == index


def test_orbital_largest_index():
    assert Orbital(ORBITAL_INDEX_MAX).index == 2**32 - 1
    with pytest.raises(ValueError, match="orbital index out of bound"):
        Orbital(ORBITAL_INDEX_MAX + 1)


def test_orbital_rejects_non_integers():
    with pytest.raises(TypeError):
        Orbital(1.5)
    with pytest.raises(TypeError):
        Orbital(True)


def test_from_index_rejects_non_integers():
    with pytest.raises(TypeError):
        Orbital.from_index(1.9)
    with pytest.raises(TypeError):
        Orbital.from_index("3")
    assert Orbital.from_index(np.int64(3)) == Orbital(3)


def test_orbital_spatial_and_spin():
    orb = Orbital(17)
    assert orb.spatial == 8
    assert orb.spin is Spin.UP


def test_orbital_is_immutable_value():
    a = Orbital(4)
    assert a == Orbital.from_index(4)
    assert hash(a) == hash(Orbital(4))
    assert Orbital(3) < Orbital(4)
    with pytest.raises(Exception):
        a.index = 5


def test_orbital_as_int():
    assert int(Orbital(9)) == 9
    assert list(range(3))[Orbital(2)] == 2


def _indices(start, stop=None):
    return [orb.index for orb in Orbital.gen_range(start, stop)]


def test_gen_range_empty():
    assert _indices(0, 0) == []
    assert _indices(ORBITAL_INDEX_MAX, ORBITAL_INDEX_MAX) == []


def test_gen_range_reversed_is_empty():
    assert _indices(2, 0) == []
    assert _indices(3, 1) == []


def test_gen_range_values():
    assert _indices(0, 1) == [0]
    assert _indices(0, 3) == [0, 1, 2]
    assert _indices(11, 15) == [11, 12, 13, 14]


def test_gen_range_open_end():
    assert _indices(ORBITAL_INDEX_MAX) == [ORBITAL_INDEX_MAX]
