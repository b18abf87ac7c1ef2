"""Names of the available ReLU formulations."""

from __future__ import annotations

from enum import Enum


class ReluImplementationType(Enum):
    """A ReLU formulation, valued by its textual name."""

    BIG_M = "big_m"
    MULTIPLE_CHOICE = "multiple_choice"
    MULTIPLE_CHOICE_SIMPLIFIED = "multiple_choice_simplified"
    IDEAL_EXPONENTIAL = "ideal_exponential"
    BIG_M_RELAXATION = "big_m_relaxation"

    @classmethod
    def from_string(cls, name: str) -> ReluImplementationType:
        """Look up a formulation by name; raise ValueError if unknown."""
        for member in cls:
            if member.value == name:
                return member
        raise ValueError(f"Unrecognized formulation name for relu: {name}")

    def __str__(self) -> str:
        return self.value


DEFAULT_RELU = ReluImplementationType.BIG_M