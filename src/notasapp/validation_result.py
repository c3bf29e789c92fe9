from dataclasses import dataclass

@dataclass(frozen=True)
class ValidationResult:
    """Result that validators must return

    Args:
        is_valid (bool): True if every check passed.
        message (str): Empty when valid, otherwise the message of the first
            failing check.
    """
    is_valid: bool
    message: str = ""

    @classmethod
    def valid(cls) -> "ValidationResult":
        """Build a passing result

        Returns:
            ValidationResult: Result with `is_valid` set and no message.
        """
        return cls(True, "")

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        """Build a failing result

        Args:
            message (str): User-facing message describing the failure.

        Returns:
            ValidationResult: Result with `is_valid` cleared.
        """
        return cls(False, message)

@dataclass(frozen=True)
class AverageResult:
    """Average of a set of grades and its pass/fail verdict

    Args:
        average (float): Arithmetic mean of the grades.
        is_passed (bool): True if the average reached the pass threshold.
    """
    average: float
    is_passed: bool
