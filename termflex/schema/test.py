"""Unit tests for the Schema module."""

import pytest

from termflex.schema import (
    ALIGN_LOOKUP,
    DIRECTION_LOOKUP,
    JUSTIFY_LOOKUP,
    WRAP_LOOKUP,
    FlexAlign,
    FlexDirection,
    FlexJustify,
    FlexWrap,
    VerticalAlign,
    parse_align,
    parse_bool,
    parse_direction,
    parse_enum,
    parse_int,
    parse_justify,
    parse_non_negative_int,
    parse_positive_int,
    parse_wrap,
)


class TestLookupTables:
    """Every member must be reachable from its table."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "lookup,enum_cls",
        [
            (DIRECTION_LOOKUP, FlexDirection),
            (JUSTIFY_LOOKUP, FlexJustify),
            (ALIGN_LOOKUP, FlexAlign),
            (WRAP_LOOKUP, FlexWrap),
        ],
    )
    def test_all_members_covered(self, lookup, enum_cls):
        assert set(lookup.values()) == set(enum_cls)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "lookup,enum_cls",
        [
            (DIRECTION_LOOKUP, FlexDirection),
            (JUSTIFY_LOOKUP, FlexJustify),
            (ALIGN_LOOKUP, FlexAlign),
            (WRAP_LOOKUP, FlexWrap),
        ],
    )
    def test_member_names_resolve(self, lookup, enum_cls):
        """Member names without separators resolve (e.g. 'SpaceBetween')."""
        for member in enum_cls:
            key = member.name.replace("_", "").lower()
            assert lookup[key] is member

    @pytest.mark.unit
    def test_keys_are_lower_case(self):
        for lookup in (DIRECTION_LOOKUP, JUSTIFY_LOOKUP, ALIGN_LOOKUP, WRAP_LOOKUP):
            assert all(key == key.lower() for key in lookup)


class TestParseEnums:
    """Tests for lenient enum parsing."""

    @pytest.mark.unit
    def test_case_insensitive(self):
        assert parse_direction("Column") is FlexDirection.COLUMN
        assert parse_justify("SpaceBetween") is FlexJustify.SPACE_BETWEEN
        assert parse_justify("SPACEEVENLY") is FlexJustify.SPACE_EVENLY
        assert parse_align("Center") is FlexAlign.CENTER
        assert parse_wrap("WRAP") is FlexWrap.WRAP

    @pytest.mark.unit
    def test_css_spellings(self):
        assert parse_justify("space-around") is FlexJustify.SPACE_AROUND
        assert parse_justify("flex-end") is FlexJustify.END
        assert parse_wrap("no-wrap") is FlexWrap.NO_WRAP

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "   ", "diagonal", "123"])
    def test_defaults_on_bad_input(self, value):
        assert parse_direction(value) is FlexDirection.ROW
        assert parse_justify(value) is FlexJustify.START
        assert parse_align(value) is FlexAlign.START
        assert parse_wrap(value) is FlexWrap.NO_WRAP

    @pytest.mark.unit
    def test_parse_enum_custom_default(self):
        lookup = {"top": VerticalAlign.TOP}
        assert parse_enum(lookup, "sideways", VerticalAlign.BOTTOM) is VerticalAlign.BOTTOM
        assert parse_enum(lookup, " TOP ", VerticalAlign.BOTTOM) is VerticalAlign.TOP


class TestParseIntegers:
    """Tests for integer attribute parsing."""

    @pytest.mark.unit
    def test_parse_int(self):
        assert parse_int("12") == 12
        assert parse_int(" -3 ") == -3
        assert parse_int("x") is None
        assert parse_int(None, 7) == 7

    @pytest.mark.unit
    def test_non_negative(self):
        assert parse_non_negative_int("4") == 4
        assert parse_non_negative_int("-4") == 0
        assert parse_non_negative_int("four") == 0
        assert parse_non_negative_int(None) == 0

    @pytest.mark.unit
    def test_positive(self):
        assert parse_positive_int("10") == 10
        assert parse_positive_int("0") is None
        assert parse_positive_int("-2") is None
        assert parse_positive_int("1.5") is None
        assert parse_positive_int(None) is None


class TestParseBool:
    """Tests for boolean attribute parsing."""

    @pytest.mark.unit
    def test_values(self):
        assert parse_bool("true") is True
        assert parse_bool("") is True
        assert parse_bool("No") is False
        assert parse_bool(None) is False
        assert parse_bool("perhaps", default=True) is True
