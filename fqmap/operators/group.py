"""Pauli group: Pauli strings with a phase from the fourth roots of unity."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .pauli import Pauli, PauliCode


class Root4(Enum):
    """
    Fourth roots of unity.

    R0 = 1, R1 = -1, R2 = i, R3 = -i.
    """

    R0 = 0
    R1 = 1
    R2 = 2
    R3 = 3

    @classmethod
    def identity(cls) -> "Root4":
        return cls.R0

    def to_complex(self) -> complex:
        return _ROOT_VALUES[self]

    @classmethod
    def from_complex(cls, value: complex) -> "Root4":
        """
        Return the root equal to `value`.

        Raises:
            ValueError: If `value` is not one of 1, -1, i, -i.
        """
        for root, root_value in _ROOT_VALUES.items():
            if value == root_value:
                return root
        raise ValueError(f"{value!r} is not a fourth root of unity")

    def __mul__(self, other: "Root4") -> "Root4":
        if not isinstance(other, Root4):
            return NotImplemented
        return Root4.from_complex(self.to_complex() * other.to_complex())

    def __neg__(self) -> "Root4":
        return Root4.from_complex(-self.to_complex())

    def conj(self) -> "Root4":
        return Root4.from_complex(self.to_complex().conjugate())

    def inverse(self) -> "Root4":
        # unit modulus: inverse is the conjugate
        return self.conj()


_ROOT_VALUES: Dict[Root4, complex] = {
    Root4.R0: 1 + 0j,
    Root4.R1: -1 + 0j,
    Root4.R2: 1j,
    Root4.R3: -1j,
}

# Single-qubit products: (left, right) -> (result, phase)
_PAULI_PRODUCT: Dict[Tuple[Pauli, Pauli], Tuple[Pauli, Root4]] = {
    (Pauli.I, Pauli.I): (Pauli.I, Root4.R0),
    (Pauli.I, Pauli.X): (Pauli.X, Root4.R0),
    (Pauli.I, Pauli.Y): (Pauli.Y, Root4.R0),
    (Pauli.I, Pauli.Z): (Pauli.Z, Root4.R0),
    (Pauli.X, Pauli.I): (Pauli.X, Root4.R0),
    (Pauli.X, Pauli.X): (Pauli.I, Root4.R0),
    (Pauli.X, Pauli.Y): (Pauli.Z, Root4.R2),
    (Pauli.X, Pauli.Z): (Pauli.Y, Root4.R3),
    (Pauli.Y, Pauli.I): (Pauli.Y, Root4.R0),
    (Pauli.Y, Pauli.X): (Pauli.Z, Root4.R3),
    (Pauli.Y, Pauli.Y): (Pauli.I, Root4.R0),
    (Pauli.Y, Pauli.Z): (Pauli.X, Root4.R2),
    (Pauli.Z, Pauli.I): (Pauli.Z, Root4.R0),
    (Pauli.Z, Pauli.X): (Pauli.Y, Root4.R2),
    (Pauli.Z, Pauli.Y): (Pauli.X, Root4.R3),
    (Pauli.Z, Pauli.Z): (Pauli.I, Root4.R0),
}


@dataclass(frozen=True)
class PauliGroup:
    """
    Element ``root * code`` of the Pauli group.

    Multiplication is taken qubit by qubit, accumulating the phase:

        >>> g = PauliGroup(Root4.R0, PauliCode.from_paulis([Pauli.X]))
        >>> h = PauliGroup(Root4.R0, PauliCode.from_paulis([Pauli.Y]))
        >>> (g * h).root
        <Root4.R2: 2>
    """

    root: Root4 = Root4.R0
    code: PauliCode = field(default_factory=PauliCode)

    @classmethod
    def identity(cls) -> "PauliGroup":
        return cls(Root4.R0, PauliCode())

    @classmethod
    def from_code(cls, code: PauliCode) -> "PauliGroup":
        return cls(Root4.R0, code.copy())

    @classmethod
    def from_root(cls, root: Root4) -> "PauliGroup":
        return cls(root, PauliCode())

    def __mul__(self, other: "PauliGroup") -> "PauliGroup":
        if not isinstance(other, PauliGroup):
            return NotImplemented
        if type(self.code) is not type(other.code):
            raise ValueError(
                f"Cannot multiply {type(self.code).__name__} by "
                f"{type(other.code).__name__}"
            )

        root = self.root * other.root
        product = type(self.code)()
        width = self.code.width
        size = min(
            max(self.code.min_register_size(), other.code.min_register_size()), width
        )
        for index in range(size):
            pauli, phase = _PAULI_PRODUCT[
                (self.code.pauli_unchecked(index), other.code.pauli_unchecked(index))
            ]
            product.set_unchecked(index, pauli)
            root = root * phase
        return PauliGroup(root, product)

    def inverse(self) -> "PauliGroup":
        # Pauli strings are self-inverse
        return PauliGroup(self.root.inverse(), self.code.copy())

    def __neg__(self) -> "PauliGroup":
        return PauliGroup(-self.root, self.code.copy())


__all__ = ["Root4", "PauliGroup"]
