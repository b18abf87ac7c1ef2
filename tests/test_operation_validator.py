import pytest

from tfopt.operation import InvalidArgumentError, Options
from tfopt.operation_validator import OperationValidator


@pytest.fixture
def validator():
    return OperationValidator("OpType", "TestOp")


def test_operation_validation_error(validator):
    err = validator.error("Message")
    assert isinstance(err, InvalidArgumentError)
    assert str(err) == "Failed to validate operation TestOp of type OpType: Message"


def test_base_error_message(validator):
    assert (
        validator.base_error_message
        == "Failed to validate operation TestOp of type OpType: "
    )


def test_double_option(validator):
    options = Options()
    options.double_options["OptionName"] = 10.0
    assert validator.double_option(options, "OptionName") == 10.0
    with pytest.raises(
        InvalidArgumentError,
        match="Required double option not found: InvalidOption",
    ):
        validator.double_option(options, "InvalidOption")


def test_integer_option(validator):
    options = Options()
    options.integer_options["OptionName"] = 8
    assert validator.integer_option(options, "OptionName") == 8
    with pytest.raises(
        InvalidArgumentError,
        match="Required integer option not found: InvalidOption",
    ):
        validator.integer_option(options, "InvalidOption")


def test_string_option(validator):
    options = Options()
    options.string_options["OptionName"] = "Value"
    assert validator.string_option(options, "OptionName") == "Value"
    with pytest.raises(
        InvalidArgumentError,
        match="Required string option not found: InvalidOption",
    ):
        validator.string_option(options, "InvalidOption")


def test_integer_list_option(validator):
    options = Options()
    options.integer_list_options["OptionName"] = [1, 2, 3]
    assert validator.integer_list_option(options, "OptionName") == [1, 2, 3]
    with pytest.raises(
        InvalidArgumentError,
        match="Required integer list option not found: InvalidOption",
    ):
        validator.integer_list_option(options, "InvalidOption")


def test_error_messages_carry_prefix(validator):
    with pytest.raises(InvalidArgumentError) as info:
        validator.double_option(Options(), "x")
    assert str(info.value).startswith(
        "Failed to validate operation TestOp of type OpType: "
    )


def test_expect_options_size_at_most(validator):
    assert validator.expect_options_size_at_most(1, 2) is None
    with pytest.raises(
        InvalidArgumentError,
        match="Expected number of options at most 1, found: 2",
    ):
        validator.expect_options_size_at_most(2, 1)


def test_expect_options_empty(validator):
    assert validator.expect_options_empty(0) is None
    with pytest.raises(
        InvalidArgumentError,
        match="Expected number of options at most 0, found: 1",
    ):
        validator.expect_options_empty(1)


def test_expect_input_size_at_most(validator):
    assert validator.expect_input_size_at_most(1, 2) is None
    with pytest.raises(
        InvalidArgumentError,
        match="Expected number of inputs at most 1, found: 2",
    ):
        validator.expect_input_size_at_most(2, 1)


def test_expect_input_size_at_least(validator):
    assert validator.expect_input_size_at_least(2, 1) is None
    with pytest.raises(
        InvalidArgumentError,
        match="Expected number of inputs at least 2, found: 1",
    ):
        validator.expect_input_size_at_least(1, 2)


def test_expect_input_size_equals(validator):
    assert validator.expect_input_size_equals(2, 2) is None
    with pytest.raises(
        InvalidArgumentError,
        match="Expected number of inputs equals to 2, found: 1",
    ):
        validator.expect_input_size_equals(1, 2)


def test_expect_output_shape_equals(validator):
    assert validator.expect_output_shape_equals((1, 2, 3), [1, 2, 3]) is None
    with pytest.raises(
        InvalidArgumentError,
        match="Expected output shape: 1,2, found: 1",
    ):
        validator.expect_output_shape_equals((1,), (1, 2))