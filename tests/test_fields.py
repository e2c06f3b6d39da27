"""Tests for field kinds and their configuration."""

import pytest
from crontext.exceptions import InvalidFieldError
from crontext.fields import FIELD_SPECS, FieldKind, FieldSpec, get_field_kind, ordinal


class TestOrdinal:
    """Tests for ordinal suffixes."""

    @pytest.mark.parametrize(
        "n, expected",
        [
            (0, "0th"),
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (31, "31st"),
            (101, "101st"),
            (111, "111th"),
            (112, "112th"),
            (113, "113th"),
        ],
    )
    def test_ordinal(self, n, expected):
        """Test English ordinal suffixes."""
        assert ordinal(n) == expected


class TestGetFieldKind:
    """Tests for positional field lookup."""

    def test_positions(self):
        """Test fields are ordered minute to day of week."""
        assert [get_field_kind(i) for i in range(5)] == [
            FieldKind.MINUTE,
            FieldKind.HOUR,
            FieldKind.DAY_OF_MONTH,
            FieldKind.MONTH,
            FieldKind.DAY_OF_WEEK,
        ]

    @pytest.mark.parametrize("index", [-1, 5, 10])
    def test_out_of_bounds(self, index):
        """Test indexes outside 0-4 raise."""
        with pytest.raises(InvalidFieldError, match=f"Invalid field index: {index}"):
            get_field_kind(index)


class TestFieldSpec:
    """Tests for the per-kind configuration records."""

    def test_every_kind_configured(self):
        """Test a spec exists for each kind."""
        assert set(FIELD_SPECS) == set(FieldKind)
        for kind, spec in FIELD_SPECS.items():
            assert spec.kind is kind

    def test_bounds(self):
        """Test configured ranges."""
        bounds = {kind: (spec.minimum, spec.maximum) for kind, spec in FIELD_SPECS.items()}
        assert bounds == {
            FieldKind.MINUTE: (0, 59),
            FieldKind.HOUR: (0, 23),
            FieldKind.DAY_OF_MONTH: (1, 31),
            FieldKind.MONTH: (1, 12),
            FieldKind.DAY_OF_WEEK: (0, 7),
        }

    def test_max_display(self):
        """Test how each maximum reads in a sentence."""
        displays = [FIELD_SPECS[kind].max_display for kind in FieldKind]
        assert displays == ["59", "23", "31st", "December", "Saturday"]

    def test_resolve_name_offsets_by_minimum(self):
        """Test names resolve to index plus field minimum."""
        month = FIELD_SPECS[FieldKind.MONTH]
        weekday = FIELD_SPECS[FieldKind.DAY_OF_WEEK]

        assert month.resolve_name("jan") == 1
        assert month.resolve_name("Dec") == 12
        assert weekday.resolve_name("sun") == 0
        assert weekday.resolve_name("SAT") == 6
        assert month.resolve_name("sun") is None
        assert FIELD_SPECS[FieldKind.MINUTE].resolve_name("jan") is None

    def test_display(self):
        """Test tokens render per field kind."""
        assert FIELD_SPECS[FieldKind.MINUTE].display("7") == "7"
        assert FIELD_SPECS[FieldKind.DAY_OF_MONTH].display("3") == "3rd"
        assert FIELD_SPECS[FieldKind.MONTH].display("3") == "March"
        assert FIELD_SPECS[FieldKind.MONTH].display("mar") == "March"
        assert FIELD_SPECS[FieldKind.DAY_OF_WEEK].display("wed") == "Wednesday"

    def test_display_falls_back_to_digits(self):
        """Test numbers outside the name table render as digits."""
        assert FIELD_SPECS[FieldKind.MONTH].format_number(13) == "13"
        assert FIELD_SPECS[FieldKind.DAY_OF_WEEK].format_number(9) == "9"
        assert FIELD_SPECS[FieldKind.DAY_OF_WEEK].format_number(7) == "7"

    def test_invalid_bounds(self):
        """Test minimum above maximum is rejected."""
        with pytest.raises(ValueError, match="minimum must not exceed maximum"):
            FieldSpec(
                kind=FieldKind.MINUTE,
                label="minute",
                minimum=10,
                maximum=5,
                format_number=str,
                max_display="5",
            )

    def test_names_must_fit_range(self):
        """Test a name table larger than the range is rejected."""
        with pytest.raises(ValueError, match="do not fit its range"):
            FieldSpec(
                kind=FieldKind.MONTH,
                label="month",
                minimum=1,
                maximum=2,
                format_number=str,
                max_display="2",
                names=("JAN", "FEB", "MAR"),
                full_names={"JAN": "January", "FEB": "February", "MAR": "March"},
            )

    def test_names_need_full_names(self):
        """Test every name needs a display name."""
        with pytest.raises(ValueError, match="full names missing for FEB"):
            FieldSpec(
                kind=FieldKind.MONTH,
                label="month",
                minimum=1,
                maximum=12,
                format_number=str,
                max_display="12",
                names=("JAN", "FEB"),
                full_names={"JAN": "January"},
            )
