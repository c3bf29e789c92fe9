"""
Grade form checks.

Three grades are required and a fourth one is optional. Grades are typed as
text, so each entry is parsed before its range is checked.
"""

import math
import re
from typing import Iterator, List, Optional

from notasapp.base_validator import BaseValidator, is_blank
from notasapp.settings import DEFAULT_MAX_GRADE, DEFAULT_MIN_GRADE
from notasapp.validation_result import ValidationResult

# Messages
MSG_REQUIRED = "the first three grades are required"
MSG_NOT_NUMBER = "all grades must be valid numbers"
MSG_OPTIONAL_NOT_NUMBER = "grade 4 must be a valid number"
MSG_OUT_OF_RANGE = "grades must be between {low:g} and {high:g}"

# Optional sign, digits, optional fraction; "." is the only separator
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

def parse_grade(text: str) -> Optional[float]:
    """Parse a grade typed by the user

    Surrounding whitespace is ignored. Exponents, thousands separators and
    non-finite values are rejected.

    Args:
        text (str): Raw grade text

    Returns:
        float: Parsed value, or None if the text is not a plain decimal number
    """
    text = text.strip()
    if not NUMBER_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value

def is_grade_input(text: str) -> bool:
    """Check if an edit of a grade field should be accepted

    The field only ever holds an empty string or something that parses as a
    number.
    """
    return text == "" or parse_grade(text) is not None

class GradeValidator(BaseValidator):
    """Validates the four grade fields of the grade entry screen."""

    def __init__(self, config: dict = None):
        """Initialize the grade validator

        Args:
            config (dict, optional): Configuration dictionary. Reads
                `min_grade` and `max_grade`.
        """
        super().__init__(config)
        self.min_grade = self.config.get("min_grade", DEFAULT_MIN_GRADE)
        self.max_grade = self.config.get("max_grade", DEFAULT_MAX_GRADE)

    def in_range(self, value: float) -> bool:
        return self.min_grade <= value <= self.max_grade

    def failures(self, g1: str, g2: str, g3: str, g4: str) -> Iterator[str]:
        required = (g1, g2, g3)
        has_optional = not is_blank(g4)
        out_of_range = MSG_OUT_OF_RANGE.format(low=self.min_grade, high=self.max_grade)

        if any(is_blank(g) for g in required):
            yield MSG_REQUIRED
        if any(parse_grade(g) is None for g in required):
            yield MSG_NOT_NUMBER
        if has_optional and parse_grade(g4) is None:
            yield MSG_OPTIONAL_NOT_NUMBER
        if not all(self.in_range(parse_grade(g)) for g in required):
            yield out_of_range
        if has_optional and not self.in_range(parse_grade(g4)):
            yield out_of_range

def parse_grades(g1: str, g2: str, g3: str, g4: str) -> List[float]:
    """Turn validated grade fields into the list of numbers to average

    The fourth grade is only included when it is not blank. Call this after
    `validate_grades` has passed.

    Returns:
        List[float]: Three or four grades
    """
    grades = [parse_grade(g) for g in (g1, g2, g3)]
    if not is_blank(g4):
        grades.append(parse_grade(g4))
    return grades

_default_validator = GradeValidator()

def validate_grades(g1: str, g2: str, g3: str, g4: str) -> ValidationResult:
    """Validate the grade fields with the default settings

    Args:
        g1 (str): First grade, required
        g2 (str): Second grade, required
        g3 (str): Third grade, required
        g4 (str): Fourth grade, may be blank

    Returns:
        ValidationResult: Result of the first failing check, or a passing result
    """
    return _default_validator.validate(g1, g2, g3, g4)
