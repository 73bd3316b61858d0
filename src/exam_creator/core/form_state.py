"""
Form state for the exam generation parameters.
"""
import math
import re
import sys
from typing import Any

from exam_creator import config
from exam_creator.models.exam_models import ExamFormData

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Wire names used by the form mapped to model attribute names.
FIELD_NAMES = {
    "topic": "topic",
    "gradeLevel": "grade_level",
    "grade_level": "grade_level",
    "itemCount": "item_count",
    "item_count": "item_count",
    "language": "language",
    "questionType": "question_type",
    "question_type": "question_type",
}


def parse_item_count(value: Any) -> int:
    """
    Parse form input the way a number field reports it.

    Leading digits are read ("12abc" -> 12); anything non-numeric,
    including NaN and infinity, is 0. Digit strings too long to convert
    saturate to +/- sys.maxsize.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        return -sys.maxsize if digits.startswith("-") else sys.maxsize


def clamp_item_count(value: Any) -> int:
    """Parse ``value`` and clamp it to the allowed item count range."""
    return min(config.MAX_ITEM_COUNT, max(config.MIN_ITEM_COUNT, parse_item_count(value)))


def default_form_data() -> ExamFormData:
    return ExamFormData(
        topic=config.DEFAULT_TOPIC,
        grade_level=config.DEFAULT_GRADE_LEVEL,
        item_count=config.DEFAULT_ITEM_COUNT,
        language=config.DEFAULT_LANGUAGE,
        question_type=config.QUESTION_TYPE,
    )


class FormStateHolder:
    """Hold the current exam form values and apply field edits."""

    def __init__(self):
        self._data = default_form_data()

    @property
    def data(self) -> ExamFormData:
        return self._data

    def update(self, field: str, value: Any) -> ExamFormData:
        """
        Apply a single field edit.

        Args:
            field: Form field name (``itemCount`` or ``item_count`` style)
            value: Raw input value

        Returns:
            The updated form data

        Raises:
            KeyError: If the field is not part of the form
            pydantic.ValidationError: If an enumerated field gets an unknown value
        """
        if field not in FIELD_NAMES:
            raise KeyError(f"Unknown form field: {field}")

        attribute = FIELD_NAMES[field]
        if attribute == "item_count":
            value = clamp_item_count(value)
        setattr(self._data, attribute, value)
        return self._data

    def reset(self) -> ExamFormData:
        """Restore the default form values."""
        self._data = default_form_data()
        return self._data

    def freeze(self) -> ExamFormData:
        """Snapshot of the current values for an outgoing request."""
        return self._data.model_copy(deep=True)
