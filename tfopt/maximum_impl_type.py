"""Names of the available maximum formulations."""

from __future__ import annotations

from enum import Enum


class MaximumImplementationType(Enum):
    """A formulation of the maximum of several values, valued by its name."""

    BIG_M = "big_m"
    EXTENDED = "extended"
    TIGHTENED_BIG_M = "tightened_big_m"
    OPTIMAL_BIG_M = "optimal_big_m"
    LOGARITHMIC_BIG_M = "logarithmic_big_m"
    EPIGRAPH = "epigraph"

    @classmethod
    def from_string(cls, name: str) -> MaximumImplementationType:
        """Look up a formulation by name; raise ValueError if unknown."""
        for member in cls:
            if member.value == name:
                return member
        raise ValueError(f"Unrecognized formulation name for maximum: {name}")

    def __str__(self) -> str:
        return self.value


DEFAULT_MAXIMUM = MaximumImplementationType.TIGHTENED_BIG_M


def all_maximum_implementations() -> list[MaximumImplementationType]:
    """Every maximum formulation, in declaration order."""
    return list(MaximumImplementationType)


def all_exact_maximum_implementations() -> list[MaximumImplementationType]:
    """Every formulation that models the maximum exactly (no epigraph)."""
    return [
        impl
        for impl in all_maximum_implementations()
        if impl is not MaximumImplementationType.EPIGRAPH
    ]