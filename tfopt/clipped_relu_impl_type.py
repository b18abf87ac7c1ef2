"""Names of the available clipped ReLU formulations."""

from __future__ import annotations

from enum import Enum


class ClippedReluImplementationType(Enum):
    """A clipped ReLU formulation, valued by its textual name."""

    COMPOSITE_DIRECT = "composite_direct"
    COMPOSITE_EXTENDED = "composite_extended"
    EXTENDED_Y_EXCLUSION = "extended_y_exclusion"
    EXTENDED_X_EXCLUSION = "extended_x_exclusion"
    UNARY_BIG_M = "unary_big_m"
    INCREMENTAL_BIG_M = "incremental_big_m"

    @classmethod
    def from_string(cls, name: str) -> ClippedReluImplementationType:
        """Look up a formulation by name; raise ValueError if unknown."""
        for member in cls:
            if member.value == name:
                return member
        raise ValueError(f"Unrecognized formulation name for clipped relu: {name}")

    def __str__(self) -> str:
        return self.value


DEFAULT_CLIPPED_RELU = ClippedReluImplementationType.UNARY_BIG_M