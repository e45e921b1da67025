"""Unsigned Integer Type Tests."""

from typing import Any

import pytest
from pydantic import ValidationError, create_model

from checkpoint_registry.types import Uint64


def test_pydantic_validation_accepts_valid_int() -> None:
    """Pydantic validation wraps plain integers in Uint64."""
    model = create_model("Model", value=(Uint64, ...))

    instance: Any = model(value=10)

    assert isinstance(instance.value, Uint64)
    assert instance.value == Uint64(10)


@pytest.mark.parametrize("invalid_value", [1.0, "1", True, False, b"1", -1, 2**64])
def test_pydantic_rejects_invalid_values(invalid_value: Any) -> None:
    """Floats, strings, booleans, bytes and out-of-range integers are validation errors."""
    model = create_model("Model", value=(Uint64, ...))

    with pytest.raises(ValidationError):
        model(value=invalid_value)


def test_serializes_as_plain_int() -> None:
    """Dumping a model turns Uint64 back into an int."""
    model = create_model("Model", value=(Uint64, ...))

    assert model(value=5).model_dump() == {"value": 5}
    assert model(value=5).model_dump_json() == '{"value":5}'


@pytest.mark.parametrize(
    "invalid_value, expected_type_name",
    [(1.0, "float"), ("1", "str"), (True, "bool"), (b"1", "bytes")],
)
def test_constructor_rejects_non_integers(invalid_value: Any, expected_type_name: str) -> None:
    """The constructor refuses values that only look like integers."""
    with pytest.raises(TypeError, match=expected_type_name):
        Uint64(invalid_value)


@pytest.mark.parametrize("value", [-1, 2**64])
def test_constructor_rejects_out_of_range(value: int) -> None:
    """Values outside [0, 2**64 - 1] overflow."""
    with pytest.raises(OverflowError):
        Uint64(value)


def test_bounds_accepted() -> None:
    """Both ends of the range are valid."""
    assert int(Uint64(0)) == 0
    assert int(Uint64(2**64 - 1)) == 2**64 - 1


class TestStrictComparisons:
    """Comparisons only accept operands of the same type."""

    @pytest.mark.parametrize(
        "op",
        [
            lambda a: a == 1,
            lambda a: a != 1,
            lambda a: a < 1,
            lambda a: a <= 1,
            lambda a: a > 1,
            lambda a: a >= 1,
        ],
    )
    def test_mixed_operands_rejected(self, op: Any) -> None:
        """Mixing with a plain int raises TypeError."""
        with pytest.raises(TypeError, match="Unsupported operand"):
            op(Uint64(1))

    def test_ordering(self) -> None:
        """Comparisons between Uint64 values behave like integers."""
        assert Uint64(1) < Uint64(2) <= Uint64(2)
        assert Uint64(3) > Uint64(2) >= Uint64(2)
        assert sorted([Uint64(3), Uint64(1)]) == [Uint64(1), Uint64(3)]


def test_repr_and_str() -> None:
    """repr names the type, str is the bare number."""
    assert repr(Uint64(7)) == "Uint64(7)"
    assert str(Uint64(7)) == "7"
    assert f"{Uint64(7)}" == "7"


def test_hash_distinct_from_int() -> None:
    """Uint64 values hash apart from the plain int."""
    assert hash(Uint64(7)) == hash(Uint64(7))
    assert hash(Uint64(7)) != hash(7)
