"""The clipped ReLU operation: ``min(max(x, 0), cap)`` applied elementwise."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tfopt.clipped_relu_impl_type import (
    DEFAULT_CLIPPED_RELU,
    ClippedReluImplementationType,
)
from tfopt.operation import Operation, Options
from tfopt.operation_validator import OperationValidator

_TYPE_NAME = "ClippedReluOperation"


class ClippedReluOperation(Operation):
    """Clips its single input to the range ``[0, cap]`` componentwise.

    The formulation used to model it may be chosen through the string option
    ``"formulation"``; ``"default"``, an empty value or a missing key select
    the default formulation. The cap comes from the double option ``"cap"``.
    """

    OPTIONS_CAP_KEY = "cap"
    OPTIONS_FORMULATION_KEY = "formulation"
    OPTIONS_FORMULATION_DEFAULT = "default"
    OPTIONS_FORMULATION_COMPOSITE_DIRECT = str(
        ClippedReluImplementationType.COMPOSITE_DIRECT
    )
    OPTIONS_FORMULATION_COMPOSITE_EXTENDED = str(
        ClippedReluImplementationType.COMPOSITE_EXTENDED
    )
    OPTIONS_FORMULATION_EXTENDED_X_EXCLUSION = str(
        ClippedReluImplementationType.EXTENDED_X_EXCLUSION
    )
    OPTIONS_FORMULATION_EXTENDED_Y_EXCLUSION = str(
        ClippedReluImplementationType.EXTENDED_Y_EXCLUSION
    )
    OPTIONS_FORMULATION_UNARY_BIG_M = str(ClippedReluImplementationType.UNARY_BIG_M)
    OPTIONS_FORMULATION_INCREMENTAL_BIG_M = str(
        ClippedReluImplementationType.INCREMENTAL_BIG_M
    )

    def __init__(
        self,
        name: str,
        input_shape: Iterable[int],
        cap: float,
        formulation: ClippedReluImplementationType = DEFAULT_CLIPPED_RELU,
    ) -> None:
        shape = tuple(int(dim) for dim in input_shape)
        super().__init__(name, [shape], shape)
        self._cap = float(cap)
        self._formulation = formulation

    @property
    def input(self) -> tuple[int, ...]:
        """Shape of the single input."""
        return self.input_shape(0)

    @property
    def cap(self) -> float:
        """Upper clipping value."""
        return self._cap

    @property
    def formulation(self) -> ClippedReluImplementationType:
        """Formulation chosen to model the operation."""
        return self._formulation

    @classmethod
    def create(
        cls,
        name: str,
        input_shape: Iterable[int],
        cap: float,
        formulation: ClippedReluImplementationType = DEFAULT_CLIPPED_RELU,
    ) -> ClippedReluOperation:
        """Build the operation; raise InvalidArgumentError if ``cap`` is negative."""
        if cap < 0:
            raise OperationValidator(_TYPE_NAME, name).error(
                "Option cap must be nonnegative."
            )
        return cls(name, input_shape, cap, formulation)

    @classmethod
    def generic_create(
        cls,
        name: str,
        input_shapes: Sequence[Iterable[int]],
        output_shape: Iterable[int],
        options: Options,
    ) -> ClippedReluOperation:
        """Build the operation from generic shapes and options.

        Expects exactly one input shape, an output shape equal to it, a double
        option ``cap`` and at most one further option, ``formulation``.
        """
        validator = OperationValidator(_TYPE_NAME, name)
        shapes = list(input_shapes)
        validator.expect_input_size_equals(len(shapes), 1)
        validator.expect_options_size_at_most(len(options), 2)
        validator.expect_output_shape_equals(output_shape, shapes[0])
        cap = validator.double_option(options, cls.OPTIONS_CAP_KEY)

        formulation = DEFAULT_CLIPPED_RELU
        formulation_name = options.string_options.get(
            cls.OPTIONS_FORMULATION_KEY, cls.OPTIONS_FORMULATION_DEFAULT
        )
        if formulation_name and formulation_name != cls.OPTIONS_FORMULATION_DEFAULT:
            try:
                formulation = ClippedReluImplementationType.from_string(
                    formulation_name
                )
            except ValueError:
                raise validator.error(
                    "Unrecognized formulation name for clipped relu: "
                    f"{formulation_name}"
                ) from None
        return cls.create(name, shapes[0], cap, formulation)