import pytest

from champions.exceptions import InvalidArgumentError, ValidationError
from champions.services.validators import (
    STATISTICS_RANGE_MESSAGE,
    require_text,
    validate_id,
    validate_overall_bound,
    validate_statistics,
)


@pytest.mark.parametrize("value, expected", [(1, 1), ("7", 7), (" 42 ", 42)])
def test_validate_id_accepts_positive_integers(value, expected):
    assert validate_id(value) == expected


@pytest.mark.parametrize("value", [None, True, 0, -3, "0", "-1", "--5", "abc", "1.5", "", 2.0])
def test_validate_id_rejects_everything_else(value):
    with pytest.raises(InvalidArgumentError) as exc:
        validate_id(value, "club ID")
    assert exc.value.message == "Invalid club ID"


def test_invalid_argument_is_a_validation_error():
    with pytest.raises(ValidationError):
        validate_id("x")


def test_require_text_trims():
    assert require_text("  Real Madrid  ", "Club name") == "Real Madrid"


@pytest.mark.parametrize("value", [None, "", "   ", 12])
def test_require_text_rejects_blank_or_non_string(value):
    with pytest.raises(ValidationError) as exc:
        require_text(value, "Club name")
    assert exc.value.message == "Club name is required and cannot be empty"


def test_validate_statistics_full_payload_drops_unknown_keys(full_stats):
    payload = dict(full_stats, stamina=70)
    assert validate_statistics(payload) == full_stats


def test_validate_statistics_requires_all_fields_unless_partial(full_stats):
    del full_stats["physical"]
    with pytest.raises(ValidationError):
        validate_statistics(full_stats)
    assert validate_statistics({"overall": 90}, partial=True) == {"overall": 90}


@pytest.mark.parametrize("bad", [-1, 101, "90", 90.0, True, None])
def test_validate_statistics_rejects_out_of_range_or_non_int(full_stats, bad):
    full_stats["pace"] = bad
    with pytest.raises(ValidationError) as exc:
        validate_statistics(full_stats)
    assert exc.value.message == STATISTICS_RANGE_MESSAGE


def test_validate_statistics_accepts_bounds(full_stats):
    full_stats.update(overall=0, pace=100)
    assert validate_statistics(full_stats)["pace"] == 100


def test_validate_overall_bound():
    assert validate_overall_bound(None, "minOverall") is None
    assert validate_overall_bound(80, "minOverall") == 80
    with pytest.raises(ValidationError) as exc:
        validate_overall_bound(150, "maxOverall")
    assert exc.value.message == "maxOverall must be between 0 and 100"
