"""Input checks shared by the domain services."""

from typing import Any, Dict, Mapping, Optional

from champions.exceptions import InvalidArgumentError, ValidationError
from champions.models import STAT_FIELDS, STAT_MAX, STAT_MIN

STATISTICS_RANGE_MESSAGE = f"Statistics must be between {STAT_MIN} and {STAT_MAX}"


def validate_id(value: Any, label: str = "ID") -> int:
    """Return ``value`` as a positive int or raise InvalidArgumentError.

    Accepts ints and base-10 integer strings (path segments arrive as text).
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {label}")

    if isinstance(value, str):
        text = value.strip()
        if not text.isdecimal():
            raise InvalidArgumentError(f"Invalid {label}")
        value = int(text)
    elif not isinstance(value, int):
        raise InvalidArgumentError(f"Invalid {label}")

    if value <= 0:
        raise InvalidArgumentError(f"Invalid {label}")
    return value


def require_text(value: Any, label: str) -> str:
    """Return the trimmed string or raise ValidationError if it is blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required and cannot be empty")
    return value.strip()


def is_valid_score(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and STAT_MIN <= value <= STAT_MAX
    )


def validate_statistics(statistics: Mapping[str, Any], partial: bool = False) -> Dict[str, int]:
    """Check a statistics payload and return only the known score fields.

    With ``partial`` unset every score field must be present. Any missing or
    out-of-range value rejects the whole payload.
    """
    if not isinstance(statistics, Mapping):
        raise ValidationError(STATISTICS_RANGE_MESSAGE)

    scores = {field: statistics[field] for field in STAT_FIELDS if field in statistics}

    if not partial and len(scores) != len(STAT_FIELDS):
        raise ValidationError(STATISTICS_RANGE_MESSAGE)

    if not all(is_valid_score(value) for value in scores.values()):
        raise ValidationError(STATISTICS_RANGE_MESSAGE)

    return scores


def validate_overall_bound(value: Optional[Any], label: str) -> Optional[int]:
    if value is None:
        return None
    if not is_valid_score(value):
        raise ValidationError(f"{label} must be between {STAT_MIN} and {STAT_MAX}")
    return value
