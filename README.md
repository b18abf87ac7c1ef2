# tfopt

Building blocks for describing trained neural networks as optimization
models: the names of the MIP formulations available for ReLU, clipped ReLU
and maximum neurons, a base class for network operations with their options,
a validator for operation arguments, and the clipped ReLU operation.

## Installation

```
pip install tfopt
```

## Formulation names

Each neuron family has an enum whose members are valued by the formulation
name, and whose `str()` is that name:

- `tfopt.relu_impl_type.ReluImplementationType` (`big_m`, `multiple_choice`,
  `multiple_choice_simplified`, `ideal_exponential`, `big_m_relaxation`);
  the default is `DEFAULT_RELU`, `BIG_M`.
- `tfopt.clipped_relu_impl_type.ClippedReluImplementationType`
  (`composite_direct`, `composite_extended`, `extended_y_exclusion`,
  `extended_x_exclusion`, `unary_big_m`, `incremental_big_m`); the default is
  `DEFAULT_CLIPPED_RELU`, `UNARY_BIG_M`.
- `tfopt.maximum_impl_type.MaximumImplementationType` (`big_m`, `extended`,
  `tightened_big_m`, `optimal_big_m`, `logarithmic_big_m`, `epigraph`); the
  default is `DEFAULT_MAXIMUM`, `TIGHTENED_BIG_M`.

```python
from tfopt.relu_impl_type import ReluImplementationType
from tfopt.maximum_impl_type import (
    all_maximum_implementations,
    all_exact_maximum_implementations,
)

ReluImplementationType.from_string("big_m")          # ReluImplementationType.BIG_M
str(ReluImplementationType.MULTIPLE_CHOICE)          # "multiple_choice"
all_maximum_implementations()          # every maximum formulation, in order
all_exact_maximum_implementations()    # the same without EPIGRAPH
```

`from_string` raises `ValueError` for an unknown name.

## Operations

`tfopt.operation` holds:

- `Options`, a dataclass of four dictionaries: `double_options`,
  `integer_options`, `string_options` and `integer_list_options`. `len()`
  counts all of them together; `is_empty()` is true when none is set.
- `Operation`, a network node with a `name`, `input_shapes` (a tuple of shape
  tuples) and an `output_shape`. `input_shape(i)` returns one input shape and
  raises `IndexError` when `i` is out of range.
- `InvalidArgumentError`, a `ValueError` raised for arguments an operation
  cannot accept.
- `format_shape(shape)`, which renders a shape as `1,2`.
- `check_input_shapes(operation, shapes)`, which raises
  `InvalidArgumentError` unless the number and shapes of the inputs match.
- `operation_args_mismatch(operation, name, input_shapes, output_shape)`,
  which returns a message describing the first difference, or `None`.

## Validation

`tfopt.operation_validator.OperationValidator(type_name, op_name)` checks
option presence, option and input counts and output shapes. Every failure
raises `InvalidArgumentError` with a message starting
`Failed to validate operation <op_name> of type <type_name>: `. `error(msg)`
builds such an error without raising it.

```python
from tfopt.operation import Options
from tfopt.operation_validator import OperationValidator

validator = OperationValidator("OpType", "TestOp")
validator.double_option(Options(double_options={"x": 10.0}), "x")   # 10.0
validator.expect_input_size_equals(1, 2)
# InvalidArgumentError: Failed to validate operation TestOp of type OpType:
#   Expected number of inputs equals to 2, found: 1
```

## Clipped ReLU

`tfopt.clipped_relu_operation.ClippedReluOperation` clips its single input to
`[0, cap]`; its output shape equals its input shape. `create` raises
`InvalidArgumentError` for a negative cap. `generic_create` takes a list of
input shapes, an output shape and `Options`: it needs exactly one input, an
output shape equal to it, the double option `cap`, at most two options in all,
and optionally the string option `formulation` (a formulation name, or
`default` or empty for the default).

```python
from tfopt.operation import Options
from tfopt.clipped_relu_operation import ClippedReluOperation

options = Options(double_options={"cap": 6.0},
                  string_options={"formulation": "incremental_big_m"})
op = ClippedReluOperation.generic_create("cr1", [(2, 4)], (2, 4), options)
op.cap            # 6.0
op.formulation    # ClippedReluImplementationType.INCREMENTAL_BIG_M
op.output_shape   # (2, 4)
```

## What this package does not do

It describes and validates operations but does not evaluate them, build
optimization models from them, or load or save networks. Clipped ReLU is the
only concrete operation it provides, and it has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```