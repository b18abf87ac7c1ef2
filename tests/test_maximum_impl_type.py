import pytest

from tfopt.maximum_impl_type import (
    DEFAULT_MAXIMUM,
    MaximumImplementationType,
    all_exact_maximum_implementations,
    all_maximum_implementations,
)


def test_bad_name_raises():
    with pytest.raises(ValueError, match="bad_name"):
        MaximumImplementationType.from_string("bad_name")


@pytest.mark.parametrize("impl", all_maximum_implementations())
def test_string_methods_round_trip(impl):
    name = str(impl)
    assert MaximumImplementationType.from_string(name) is impl
    assert f"{impl}" == name


def test_all_implementations_cover_enum():
    impls = all_maximum_implementations()
    assert len(impls) == 6
    assert set(impls) == set(MaximumImplementationType)


def test_exact_implementations_exclude_epigraph():
    exact = all_exact_maximum_implementations()
    assert MaximumImplementationType.EPIGRAPH not in exact
    assert exact == [
        impl for impl in all_maximum_implementations()
        if impl is not MaximumImplementationType.EPIGRAPH
    ]
    assert len(exact) == len(all_maximum_implementations()) - 1


@pytest.mark.parametrize(
    "name, impl",
    [
        ("big_m", MaximumImplementationType.BIG_M),
        ("extended", MaximumImplementationType.EXTENDED),
        ("tightened_big_m", MaximumImplementationType.TIGHTENED_BIG_M),
        ("optimal_big_m", MaximumImplementationType.OPTIMAL_BIG_M),
        ("logarithmic_big_m", MaximumImplementationType.LOGARITHMIC_BIG_M),
        ("epigraph", MaximumImplementationType.EPIGRAPH),
    ],
)
def test_names_fixed_by_source(name, impl):
    assert MaximumImplementationType.from_string(name) is impl


def test_default_is_tightened_big_m():
    assert DEFAULT_MAXIMUM is MaximumImplementationType.from_string("tightened_big_m")