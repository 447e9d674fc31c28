# ─────────────────────────────────────────────────────────────────────────────
# Validation Engine Tests — field checks, coercion, dotted paths
# ─────────────────────────────────────────────────────────────────────────────

import math

import pytest

from soundgarden.validation import (
    HSB_CHANNELS,
    RGB_CHANNELS,
    ColorList,
    NumberList,
    Span,
    ValidationResult,
    coerce_integer,
    validate,
    validate_field,
)
from soundgarden.validation.engine import (
    array,
    boolean,
    enum,
    integer,
    is_integral,
    is_number,
    number,
    string,
)


class TestCoerceInteger:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("25", 25),
            (" 25 ", 25),
            ("25.0", 25),
            ("25.7", 25),
            ("12 petals", 12),
            ("-3 degrees", -3),
            (24.4, 24),
            (24.5, 25),
            (-1.5, -1),
            (7, 7),
        ],
    )
    def test_coerces_numeric_forms(self, raw, expected):
        assert coerce_integer(raw) == expected

    @pytest.mark.parametrize("raw", ["lots", "", None, [1], {"a": 1}])
    def test_non_numeric_values_pass_through(self, raw):
        assert coerce_integer(raw) == raw

    def test_bool_is_not_converted(self):
        assert coerce_integer(True) is True

    def test_non_finite_values_pass_through(self):
        assert math.isnan(coerce_integer(float("nan")))
        assert coerce_integer("inf") == "inf"


class TestNumberPredicates:
    def test_bool_is_not_a_number(self):
        assert not is_number(True)
        assert not is_integral(False)

    def test_integral_float_counts_as_integer(self):
        assert is_integral(60.0)
        assert not is_integral(60.5)


class TestValidateField:
    def test_missing_value(self):
        check = validate_field(None, string("name"))
        assert check.error == "name is missing"

    def test_empty_string_rejected(self):
        check = validate_field("", string("name"))
        assert check.error == "Invalid name: expected non-empty string, got '' (string)"

    def test_whitespace_string_accepted(self):
        assert validate_field("   ", string("name")).ok

    def test_integer_field_keeps_leading_digits(self):
        check = validate_field("12 petals", integer("petals", 1, 40))
        assert check.ok
        assert check.value == 12

    def test_integer_field_coerces_string(self):
        check = validate_field("25", integer("petals", 1, 40))
        assert check.ok
        assert check.value == 25

    def test_integer_field_rounds_then_range_checks(self):
        check = validate_field(40.6, integer("petals", 1, 40))
        assert check.value == 41
        assert check.error == "Invalid petals: 41 is above the maximum 40"

    def test_float_field_accepts_fraction(self):
        assert validate_field(0.75, number("intensity", 0.5, 1.0)).ok

    def test_float_field_does_not_coerce_strings(self):
        check = validate_field("0.75", number("intensity", 0.5, 1.0))
        assert check.error == "Invalid intensity: expected number, got '0.75' (string)"

    def test_float_field_rejects_nan(self):
        check = validate_field(float("nan"), number("intensity", 0.5, 1.0))
        assert check.error is not None
        assert "finite" in check.error

    def test_boolean_rejected_for_number(self):
        check = validate_field(True, integer("petals", 1, 40))
        assert check.error == "Invalid petals: expected number, got True (boolean)"

    def test_enum_membership(self):
        spec = enum("oscillator", ("sine", "square", "triangle", "sawtooth"))
        assert validate_field("sine", spec).ok
        assert validate_field("bell", spec).error == (
            "Invalid oscillator: 'bell' is not one of [sine, square, triangle, sawtooth]"
        )

    def test_boolean_field(self):
        assert validate_field(False, boolean("pollinatorAttractant")).ok
        assert not validate_field("yes", boolean("pollinatorAttractant")).ok

    def test_array_type_checked_before_shape(self):
        check = validate_field("[1, 2]", array("size", Span(1, 150)))
        assert check.error == "Invalid size: expected array, got string"


class TestShapes:
    def test_span_order(self):
        assert Span(1, 150).problem([120, 40]) == "min 120 exceeds max 40"

    def test_span_bounds(self):
        assert Span(1, 150).problem([40, 500]) == "range [40, 500] must lie within 1-150"

    def test_span_arity(self):
        assert Span(1, 150).problem([40]) is not None

    def test_hsb_colors_allow_fractions(self):
        assert ColorList(1, 5, HSB_CHANNELS).problem([[200.5, 50.25, 80]]) is None

    def test_rgb_colors_require_integers(self):
        problem = ColorList(3, 7, RGB_CHANNELS, integer_channels=True).problem(
            [[255, 0, 0], [0, 70.5, 0], [0, 0, 255]]
        )
        assert problem == "color 1 green must be an integer, got 70.5"

    def test_rgb_integral_floats_accepted(self):
        shape = ColorList(3, 7, RGB_CHANNELS, integer_channels=True)
        assert shape.problem([[255.0, 0, 0], [0, 128, 0], [0, 0, 255]]) is None

    def test_color_count(self):
        problem = ColorList(3, 7, RGB_CHANNELS, integer_channels=True).problem([[1, 2, 3]])
        assert problem == "expected at least 3 colors, got 1"

    def test_color_arity(self):
        problem = ColorList(1, 5, HSB_CHANNELS).problem([[10, 20]])
        assert problem is not None
        assert "exactly 3 numbers" in problem

    def test_number_list(self):
        shape = NumberList(2, 12, 0, 127)
        assert shape.problem([60, 64, 67]) is None
        assert shape.problem([60, 64.5]) == "item 1 must be an integer, got 64.5"
        assert shape.problem([60, 200]) == "item 1 must be within 0-127, got 200"
        assert shape.problem([60]) == "expected at least 2 values, got 1"


class TestValidate:
    fields = (
        string("name"),
        integer("petals", 1, 40),
        number("sound.reverb", 0.0, 0.9),
        enum("sound.wave", ("sine", "square")),
    )

    def test_accepts_and_coerces_into_copy(self):
        candidate = {"name": "Fern", "petals": "12", "sound": {"reverb": 0.3, "wave": "sine"}}
        result = validate(self.fields, candidate)

        assert result.ok
        assert result.spec is not None
        assert result.spec["petals"] == 12
        assert candidate["petals"] == "12"

    def test_reports_every_violated_field_once(self):
        candidate = {"petals": 99, "sound": {"reverb": 2, "wave": "bell"}}
        result = validate(self.fields, candidate)

        assert not result.ok
        assert result.errors == (
            "name is missing",
            "Invalid petals: 99 is above the maximum 40",
            "Invalid sound.reverb: 2 is above the maximum 0.9",
            "Invalid sound.wave: 'bell' is not one of [sine, square]",
        )

    def test_missing_parent_object_reports_each_leaf(self):
        result = validate(self.fields, {"name": "Fern", "petals": 3})
        assert result.errors == ("sound.reverb is missing", "sound.wave is missing")

    def test_non_object_candidate(self):
        result = validate(self.fields, ["not", "an", "object"])
        assert result.errors == ("expected a JSON object, got array",)

    def test_nested_source_not_mutated(self):
        candidate = {"name": "Fern", "petals": 3.6, "sound": {"reverb": 0.3, "wave": "sine"}}
        result = validate(self.fields, candidate)
        assert result.spec is not None
        assert result.spec["petals"] == 4
        assert candidate["petals"] == 3.6


class TestValidationResult:
    def test_requires_exactly_one_outcome(self):
        with pytest.raises(ValueError):
            ValidationResult()
        with pytest.raises(ValueError):
            ValidationResult(spec={}, errors=("boom",))

    def test_constructors(self):
        assert ValidationResult.accepted({"a": 1}).ok
        assert not ValidationResult.rejected(["bad"]).ok
