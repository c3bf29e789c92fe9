"""Validation and scoring core of the notasapp grades application"""

__version__ = "0.1.0"

from notasapp.average_calculator import AverageCalculator, PASS_THRESHOLD, compute_average
from notasapp.base_validator import BaseValidator
from notasapp.credential_validator import CredentialValidator, validate_login
from notasapp.grade_validator import GradeValidator, parse_grades, validate_grades
from notasapp.validation_result import AverageResult, ValidationResult
