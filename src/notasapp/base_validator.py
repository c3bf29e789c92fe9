"""
Abstract validator class for building rule-based input checks.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from notasapp.validation_result import ValidationResult

class BaseValidator(ABC):
    """Abstract base class for validators.

    This class defines the interface for building input validators. Subclasses
    implement `failures` as a generator that yields one message per failing
    check, in priority order. Only the first message is ever consumed, so
    checks after the first failure are never evaluated.
    """
    def __init__(self, config: dict = None):
        """Initialize the validator with a configuration dictionary.

        Args:
            config (dict, optional): Configuration dictionary for the validator.
        """
        self.config = config if config is not None else {}

    @abstractmethod
    def failures(self, *fields: str) -> Iterator[str]:
        """Yield the message of each failing check, in priority order.

        Args:
            *fields (str): Raw input strings to validate.
        """
        pass

    def validate(self, *fields: str) -> ValidationResult:
        """Run the checks and stop at the first failure.

        Args:
            *fields (str): Raw input strings to validate.

        Returns:
            ValidationResult: Failing result carrying the first message, or a
                passing result if no check failed.
        """
        message = next(self.failures(*fields), None)
        if message is None:
            return ValidationResult.valid()
        return ValidationResult.invalid(message)

def is_blank(text: str) -> bool:
    """Check if a string is empty or only whitespace"""
    return not text or text.isspace()
