"""Base operation of a neural network and its option container."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

Shape = tuple[int, ...]


class InvalidArgumentError(ValueError):
    """Raised when an operation is given arguments it cannot accept."""


def _as_shape(shape: Iterable[int]) -> Shape:
    return tuple(int(dim) for dim in shape)


def format_shape(shape: Iterable[int]) -> str:
    """Render a shape as its dimensions joined by commas, e.g. ``1,2``."""
    return ",".join(str(int(dim)) for dim in shape)


def _format_shapes(shapes: Iterable[Iterable[int]]) -> str:
    return "[" + ", ".join(format_shape(s) for s in shapes) + "]"


@dataclass
class Options:
    """Extra named parameters of an operation, grouped by value type."""

    double_options: dict[str, float] = field(default_factory=dict)
    integer_options: dict[str, int] = field(default_factory=dict)
    string_options: dict[str, str] = field(default_factory=dict)
    integer_list_options: dict[str, list[int]] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """True if no option of any kind is set."""
        return len(self) == 0

    def __len__(self) -> int:
        return (
            len(self.double_options)
            + len(self.integer_options)
            + len(self.string_options)
            + len(self.integer_list_options)
        )


class Operation:
    """An operation in a neural network with named, shaped inputs and output."""

    def __init__(
        self,
        name: str,
        input_shapes: Iterable[Iterable[int]],
        output_shape: Iterable[int],
    ) -> None:
        self.name = name
        self.input_shapes: tuple[Shape, ...] = tuple(
            _as_shape(s) for s in input_shapes
        )
        self.output_shape: Shape = _as_shape(output_shape)

    def input_shape(self, index: int) -> Shape:
        """Shape of the input at ``index``; raise IndexError if out of range."""
        if not 0 <= index < len(self.input_shapes):
            raise IndexError(
                f"input index {index} out of range for operation {self.name} "
                f"with {len(self.input_shapes)} inputs"
            )
        return self.input_shapes[index]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"input_shapes={self.input_shapes!r}, "
            f"output_shape={self.output_shape!r})"
        )


def check_input_shapes(
    operation: Operation, input_shapes: Sequence[Iterable[int]]
) -> None:
    """Raise InvalidArgumentError unless ``input_shapes`` match the operation."""
    actual = [_as_shape(s) for s in input_shapes]
    expected = operation.input_shapes
    if len(expected) != len(actual):
        raise InvalidArgumentError(
            f"Node: {operation.name} expected: {len(expected)} inputs, "
            f"but found: {len(actual)}"
        )
    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            raise InvalidArgumentError(
                f"Node: {operation.name} input {index} expected shape: "
                f"{format_shape(want)} inputs, but found: {format_shape(got)}"
            )


def operation_args_mismatch(
    operation: Operation,
    name: str,
    input_shapes: Iterable[Iterable[int]],
    output_shape: Iterable[int],
) -> str | None:
    """Describe how an operation differs from the given arguments, or None."""
    wanted_inputs = tuple(_as_shape(s) for s in input_shapes)
    wanted_output = _as_shape(output_shape)
    if operation.name != name:
        return f"expected name: {name}, but found: {operation.name}"
    if operation.input_shapes != wanted_inputs:
        return (
            f"expected input shapes: {_format_shapes(wanted_inputs)}, "
            f"but found: {_format_shapes(operation.input_shapes)}"
        )
    if operation.output_shape != wanted_output:
        return (
            f"expected output shape: {format_shape(wanted_output)}, "
            f"but found: {format_shape(operation.output_shape)}"
        )
    return None