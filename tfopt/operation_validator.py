"""Helpers that validate the arguments given to an operation."""

from __future__ import annotations

from collections.abc import Iterable

from tfopt.operation import InvalidArgumentError, Options, format_shape


def _as_shape(shape: Iterable[int]) -> tuple[int, ...]:
    return tuple(int(dim) for dim in shape)


class OperationValidator:
    """Checks options, input counts and shapes of a named operation.

    Every failure is an InvalidArgumentError whose message starts with a
    prefix naming the operation and its type.
    """

    def __init__(self, operation_type_name: str, operation_name: str) -> None:
        self._base_error_message = (
            f"Failed to validate operation {operation_name} "
            f"of type {operation_type_name}: "
        )

    @property
    def base_error_message(self) -> str:
        """The prefix put in front of every error message."""
        return self._base_error_message

    def error(self, message: str) -> InvalidArgumentError:
        """Build (not raise) an error carrying the operation prefix."""
        return InvalidArgumentError(self._base_error_message + message)

    def double_option(self, options: Options, option_name: str) -> float:
        """Value of a required double option."""
        try:
            return options.double_options[option_name]
        except KeyError:
            raise self.error(
                f"Required double option not found: {option_name}"
            ) from None

    def integer_option(self, options: Options, option_name: str) -> int:
        """Value of a required integer option."""
        try:
            return options.integer_options[option_name]
        except KeyError:
            raise self.error(
                f"Required integer option not found: {option_name}"
            ) from None

    def string_option(self, options: Options, option_name: str) -> str:
        """Value of a required string option."""
        try:
            return options.string_options[option_name]
        except KeyError:
            raise self.error(
                f"Required string option not found: {option_name}"
            ) from None

    def integer_list_option(self, options: Options, option_name: str) -> list[int]:
        """Value of a required integer list option."""
        try:
            return list(options.integer_list_options[option_name])
        except KeyError:
            raise self.error(
                f"Required integer list option not found: {option_name}"
            ) from None

    def expect_options_size_at_most(self, options_size: int, value: int) -> None:
        """Raise if there are more than ``value`` options."""
        if options_size > value:
            raise self.error(
                f"Expected number of options at most {value}, found: {options_size}"
            )

    def expect_options_empty(self, options_size: int) -> None:
        """Raise unless there are no options."""
        self.expect_options_size_at_most(options_size, 0)

    def expect_input_size_at_most(self, input_size: int, value: int) -> None:
        """Raise if there are more than ``value`` inputs."""
        if input_size > value:
            raise self.error(
                f"Expected number of inputs at most {value}, found: {input_size}"
            )

    def expect_input_size_at_least(self, input_size: int, value: int) -> None:
        """Raise if there are fewer than ``value`` inputs."""
        if input_size < value:
            raise self.error(
                f"Expected number of inputs at least {value}, found: {input_size}"
            )

    def expect_input_size_equals(self, input_size: int, value: int) -> None:
        """Raise unless there are exactly ``value`` inputs."""
        if input_size != value:
            raise self.error(
                f"Expected number of inputs equals to {value}, found: {input_size}"
            )

    def expect_output_shape_equals(
        self, output_shape: Iterable[int], expected_shape: Iterable[int]
    ) -> None:
        """Raise unless the output shape equals the expected one."""
        actual = _as_shape(output_shape)
        expected = _as_shape(expected_shape)
        if actual != expected:
            raise self.error(
                f"Expected output shape: {format_shape(expected)}, "
                f"found: {format_shape(actual)}"
            )