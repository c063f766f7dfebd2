"""Unit tests for the goat counter and the tripler."""

import pytest

from goat_interop.core import (
    UINT32_MAX,
    Goat,
    UInt32RangeError,
    compute_triple,
    do_math,
)


class TestGoat:
    """Test horn counting and description."""

    def test_new_goat_has_no_horns(self) -> None:
        """A fresh goat starts with zero horns."""
        goat = Goat.new()
        assert goat.horns == 0
        assert goat.describe() == "This goat has 0 horns."

    def test_single_horn_is_singular(self) -> None:
        """One horn drops the plural suffix."""
        goat = Goat()
        goat.increment()
        assert goat.describe() == "This goat has 1 horn."

    def test_two_horns_are_plural(self) -> None:
        """Two horns use the plural suffix."""
        goat = Goat()
        goat.increment()
        goat.increment()
        assert goat.horns == 2
        assert goat.describe() == "This goat has 2 horns."

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 10, 57])
    def test_pluralization_after_n_increments(self, count: int) -> None:
        """The suffix is omitted only for exactly one horn."""
        goat = Goat()
        for _ in range(count):
            goat.increment()
        suffix = "" if count == 1 else "s"
        assert goat.describe() == f"This goat has {count} horn{suffix}."

    def test_describe_does_not_mutate(self) -> None:
        """Repeated describes return the same sentence."""
        goat = Goat()
        goat.increment()
        first = goat.describe()
        assert goat.describe() == first
        assert goat.describe() == first
        assert goat.horns == 1

    def test_instances_are_independent(self) -> None:
        """Incrementing one goat leaves another untouched."""
        first, second = Goat(), Goat()
        first.increment()
        assert second.horns == 0

    def test_horn_count_wraps_at_uint32_boundary(self) -> None:
        """The counter wraps to zero past the 32-bit maximum."""
        goat = Goat(horns=UINT32_MAX)
        goat.increment()
        assert goat.horns == 0
        assert goat.describe() == "This goat has 0 horns."

    def test_negative_initial_count_is_rejected(self) -> None:
        """Horn counts must be unsigned."""
        with pytest.raises(UInt32RangeError):
            Goat(horns=-1)


class TestDoMath:
    """Test the 32-bit tripler."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, 0),
            (1, 3),
            (1_431_655_765, 4_294_967_295),
            (1_431_655_766, 2),
        ],
    )
    def test_triples_with_wraparound(self, value: int, expected: int) -> None:
        """Results match three times the input modulo 2**32."""
        assert do_math(value) == expected
        assert do_math(value) == (value * 3) % 2**32

    def test_compute_triple_is_alias(self) -> None:
        """Both names refer to the same function."""
        assert compute_triple is do_math

    def test_max_input_wraps(self) -> None:
        """The largest u32 input wraps rather than failing."""
        assert do_math(UINT32_MAX) == (UINT32_MAX * 3) % 2**32

    @pytest.mark.parametrize("value", [-1, 2**32])
    def test_out_of_range_input_raises(self, value: int) -> None:
        """Values outside the u32 domain are rejected."""
        with pytest.raises(UInt32RangeError) as exc_info:
            do_math(value)
        assert exc_info.value.value == value
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize("value", [True, 1.5, "3"])
    def test_non_integer_input_raises_type_error(self, value: object) -> None:
        """Only plain integers are accepted."""
        with pytest.raises(TypeError):
            do_math(value)  # type: ignore[arg-type]
